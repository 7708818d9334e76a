import pytest

from pushswap.textops import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_counts_characters_and_missing_is_zero():
    assert strlen("Hello toi") == len("Hello toi")
    assert strlen("") == 0
    assert strlen(None) == 0


@pytest.mark.parametrize("size", [1, 3, 9, 10, 50])
def test_strlcpy_truncates_below_size(size):
    copied, total = strlcpy("oldstring", size)
    assert total == len("oldstring")
    assert len(copied) == min(size - 1, len("oldstring"))
    assert "oldstring".startswith(copied)


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("newstring", 0) == ("", len("newstring"))


def test_strlcpy_missing_source():
    assert strlcpy(None, 5) == ("", 0)


def test_strlcpy_rejects_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_appends_when_room():
    result, total = strlcat("old", "string", 50)
    assert result == "oldstring"
    assert total == len("oldstring")


def test_strlcat_truncates_to_size():
    result, total = strlcat("old", "string", 6)
    assert result == "oldst"
    assert len(result) == 5
    assert total == len("old") + len("string")


def test_strlcat_size_below_destination_leaves_it():
    result, total = strlcat("oldstring", "new", 4)
    assert result == "oldstring"
    assert total == len("new") + 4


def test_strlcat_size_equal_to_destination_appends_nothing():
    result, total = strlcat("old", "new", 3)
    assert result == "old"
    assert total == 6


def test_strchr_finds_first_and_end():
    assert strchr("Hello toi", "l") == "Hello toi".index("l")
    assert strchr("Hello toi", ord("o")) == "Hello toi".index("o")
    assert strchr("Hello toi", "\0") == len("Hello toi")
    assert strchr("Hello toi", "4") is None


def test_strrchr_finds_last_and_end():
    text = "Hello toi"
    assert strrchr(text, "l") == text.rindex("l")
    assert strrchr(text, "o") == text.rindex("o")
    assert strrchr(text, "E") is None
    assert strrchr(text, 0) == len(text)


def test_strchr_rejects_multi_character_search():
    with pytest.raises(TypeError):
        strchr("abc", "ab")


def test_strncmp_source_example():
    assert strncmp("Hello toi", "Hello moi", 5) == 0
    assert strncmp("Hello toi", "Hello moi", 7) > 0
    assert strncmp("Hello moi", "Hello toi", 10) < 0
    assert strncmp("Hello toi", "Hello moi", 0) == 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("abc", "abcd", 10) == -ord("d")
    assert strncmp("abcd", "abc", 10) == ord("d")
    assert strncmp("same", "same", 100) == 0


def test_strnstr_source_examples():
    assert strnstr("Hello toi", "Hello", 10) == 0
    assert strnstr("Hello toi", "Hello moi", 10) is None
    assert strnstr("Hello toi", "Hel", 10) == 0


def test_strnstr_respects_length():
    assert strnstr("Hello toi", "toi", 9) == "Hello toi".index("toi")
    assert strnstr("Hello toi", "toi", 8) is None
    assert strnstr("Hello toi", "", 0) == 0


def test_strdup_copies_and_rejects_missing():
    assert strdup("copy me") == "copy me"
    assert strdup("") == ""
    with pytest.raises(TypeError):
        strdup(None)


def test_substr_ranges():
    assert substr("Hello toi", 6, 3) == "toi"
    assert substr("Hello toi", 6, 100) == "toi"
    assert substr("Hello toi", 100, 3) == ""
    assert substr(None, 0, 3) is None


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_combinations():
    assert strjoin("old", "string") == "oldstring"
    assert strjoin(None, "string") == "string"
    assert strjoin("old", None) == "old"
    assert strjoin(None, None) is None


def test_strtrim_source_example():
    assert strtrim("*S@lut!#", "@#*") == "S@lut!"


def test_strtrim_edges():
    assert strtrim("####", "#") == ""
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim(None, "#") is None
    assert strtrim("abc", None) is None


def test_split_drops_empty_words():
    assert split("  1 2   3 ", " ") == ["1", "2", "3"]
    assert split("", " ") == []
    assert split("   ", " ") == []
    assert split(None, " ") is None


def test_split_join_round_trip():
    words = ["42", "-7", "+3", "0"]
    assert split(" ".join(words), " ") == words


def test_strmapi_source_example():
    assert strmapi("hello.", lambda i, ch: chr(ord(ch) - 32)) == "HELLO\x0e"


def test_strmapi_passes_indices():
    assert strmapi("abc", lambda i, ch: str(i)) == "012"
    assert strmapi(None, lambda i, ch: ch) is None
    assert strmapi("abc", None) is None


def test_striteri_replaces_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_striteri_sees_every_index():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, ch: seen.append((i, ch)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]
    assert chars == ["x", "y", "z"]