# pushswap

Helpers for reading a list of integers given as text arguments. The package
checks that the arguments are distinct 32-bit signed integers and ranks the
values. Alongside these it has small helpers for characters, number
conversion, strings, byte buffers, linked lists and formatted output.

## Installing

```
pip install .
```

## Reading integer arguments

`pushswap.parsing` works on a list of argument strings:

- `argument_words(args)`: a single argument is split on spaces into words;
  several arguments are taken as they are.
- `validate_args(args)`: returns the words, or raises `ArgumentError` (a
  `ValueError`) when a word is not an optionally signed run of digits, lies
  outside the 32-bit signed range, or repeats a later word.
- `parse_values(args)`: the integers, in order.
- `index_values(values)`: the rank of each value in sorted order; equal
  values are ranked by position.
- `has_repeat(value, words, position)`: whether a word after `position`
  reads as `value`.

```python
from pushswap.parsing import validate_args, parse_values, index_values

validate_args(["4 67 3 87 23"])
values = parse_values(["4 67 3 87 23"])   # [4, 67, 3, 87, 23]
index_values(values)                      # [1, 3, 0, 4, 2]
```

## Other helpers

- `pushswap.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `is_integer_text`, and case
  conversion with `to_upper` and `to_lower`. Each takes a one-character
  string or an integer code.
- `pushswap.conversions`: `atoi` (leading decimal integer, with -1 or 0 on
  32-bit overflow), `atol` (wrapping to 64 bits) and `itoa`.
- `pushswap.textops`: bounded copying and appending (`strlcpy`, `strlcat`),
  searching (`strchr`, `strrchr`, `strnstr`), `strncmp`, `substr`,
  `strjoin`, `strtrim`, `split`, `strmapi` and `striteri`. Searches return
  an index or `None`.
- `pushswap.memory`: `bzero`, `calloc`, `memset`, `memcpy`, `memmove`,
  `memchr` and `memcmp` on `bytes` and `bytearray` objects.
- `pushswap.linked`: `LinkedList` of `Node` objects, with `add_front`,
  `add_back`, `last`, `pop_front`, `clear`, `iterate` and `map`; it is
  iterable and has a length.
- `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write
  to a stream (standard output by default); `format_printf` and `printf`
  handle `%c %s %p %d %i %u %x %X` and `%%`; `format_hex`,
  `format_pointer` and `format_unsigned` format single numbers.

## What the package does not do

The package does not sort the values, has no two-stack operations and
installs no command. It stops at checking, parsing and ranking the
arguments.

## Tests

```
pip install ".[test]"
pytest
```