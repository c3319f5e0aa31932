# pushswap

Sorts a list of distinct integers using two stacks, **a** and **b**, and a
fixed set of moves. It prints the moves it makes, one per line. After those
moves, stack a holds the values in ascending order from top to bottom.

| move  | effect                                     |
|-------|--------------------------------------------|
| `sa`  | swap the first two values of a             |
| `sb`  | swap the first two values of b             |
| `ss`  | `sa` then `sb`                             |
| `pa`  | move the top of b onto a                   |
| `pb`  | move the top of a onto b                   |
| `ra`  | rotate a up by one (first becomes last)    |
| `rb`  | rotate b up by one                         |
| `rr`  | `ra` then `rb`                             |
| `rra` | rotate a down by one (last becomes first)  |
| `rrb` | rotate b down by one                       |
| `rrr` | `rra` then `rrb`                           |

## Installing

```
pip install .
```

## Command line

```
pushswap 3 2 1
```

Give each integer as its own argument. The first argument goes on top of stack
a. The command prints the moves, for example `sa` and `rra`, one per line. It
always exits with status 0.

* No arguments, a single value, or values that are already in ascending order:
  nothing is printed.
* `Error` is printed when an argument has a character other than a digit, `+`,
  `-` or `"`, when an argument is longer than 18 characters, when a value is
  outside the 32-bit signed range, or when a value appears twice. A space is not
  allowed, so `"3 2 1"` given as one argument is an error.
* A value is read as an optional sign followed by digits. Anything after the
  digits is ignored, and an argument with no digits reads as 0.

Each input size has its own strategy:

* up to three values: a short fixed sequence of `sa` and `rra`;
* four values: the smallest value is parked on b, the rest are sorted, and the
  parked value is pushed back;
* five values: the same, with the two smallest values parked;
* six or more values: values are moved to b one chunk of the value range at a
  time, each placed next to its nearest smaller value. Stack b is then rotated
  so that its largest value is on top, and everything is pushed back to a.

## Library use

```python
from pushswap.cli import sort_operations
from pushswap.stacks import Stacks
from pushswap.validate import InputError

sort_operations(["3", "2", "1"])    # list of move names such as ["sa", "rra"]

try:
    sort_operations(["1", "1"])
except InputError as error:
    print(error)                    # Error

stacks = Stacks([2, 1, 3])
stacks.swap_a()
stacks.is_sorted()                  # True
stacks.operations                   # ["sa"]
```

* `pushswap.stacks.Stacks` holds the two stacks as deques (`a` and `b`, top at
  index 0). It has one method per move: `push_a`, `push_b`, `swap_a`, `swap_b`,
  `swap_both`, `rotate_a`, `rotate_b`, `rotate_both`, `reverse_rotate_a`,
  `reverse_rotate_b` and `reverse_rotate_both`. Each move that runs is recorded
  in `operations`. Pushing from an empty stack, swapping a stack with fewer than
  two values, or rotating an empty stack raises `IndexError`. A reverse rotation
  of an empty stack changes nothing but is still recorded.
* `pushswap.validate` has the input checks (`check_lengths`,
  `check_characters`, `check_range`, `check_duplicates`), `parse_int`, and
  `parse_arguments`. `parse_arguments` runs every check and raises `InputError`.
* `pushswap.small` (`sort_three`, `sort_four`, `sort_five`) and
  `pushswap.chunks` (`ChunkWindow`, `chunk_window`, `find_from_top`,
  `find_from_bottom`, `push_near`, `sort_chunks`) are the sorting strategies.
  `pushswap.cli.choose_sort` picks one of them by the number of values.

### Helper modules

The package also ships small general-purpose helpers:

* `pushswap.chars`: ASCII tests and case mapping (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`). Each accepts a
  one-character string or a code point.
* `pushswap.strings`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strcmp`, `strnstr` and `atoi`. A string is read up to its first
  `"\0"`. Searches return an index, or `None` when nothing is found.
  `strlcpy` and `strlcat` return the resulting text together with a length.
* `pushswap.textops`: `strdup`, `substr`, `strjoin`, `split`, `strmapi`,
  `striteri` (edits a mutable sequence of characters in place), `strtrim` and
  `itoa`.
* `pushswap.memory`: byte-buffer operations `memset`, `bzero`, `memcpy`,
  `memmove` (within one buffer, by offsets), `memchr`, `memcmp` and `calloc`.
* `pushswap.linkedlist`: `Node` and `LinkedList`. `LinkedList` provides
  `push_front`, `push_back`, `last`, `len()`, iteration, `for_each`, `map` and
  `clear`.
* `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which write
  straight to a file descriptor.
* `pushswap.printf`: `render` builds the text for the `c s d i u x X p %`
  conversions and `printf` writes it to standard output. Both rely on
  `format_hex`, `format_signed`, `format_unsigned`, `format_pointer` and
  `format_str`.
* `pushswap.nextline.LineReader`: reads a text or binary stream line by line
  through a fixed-size read buffer (42 by default).

## What it does not do

There is no checker: the package produces moves, but no command reads a list
of moves and verifies that it sorts a given input.

## Tests

```
pip install .[test]
pytest
```