# pushswap

A solver for the two-stack sorting puzzle. Given a list of distinct
integers on stack `a` (top first) and an empty stack `b`, it produces a
sequence of operations that leaves `a` sorted in ascending order with
`b` empty.

## Operations

| Op    | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up (the top goes to the bottom)        |
| `rb`  | rotate `b` up                                     |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` down (the bottom comes to the top)     |
| `rrb` | rotate `b` down                                   |
| `rrr` | `rra` and `rrb` together                          |

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The command prints one operation per line. Each argument may hold
several numbers separated by spaces. Every number must be an optionally
signed decimal integer within the 32-bit signed range. On invalid input
or duplicate numbers the command prints `Error` to standard error and
exits with status 1. With no arguments, or when the arguments contain
no numbers, it prints nothing and exits with status 0.

Three or fewer numbers are sorted directly, four or five with a short
dedicated routine, and larger inputs by pushing them to `b` in chunks
about 1.4 times the square root of the count and then pulling them back
largest first. Input that is already sorted produces no operations.

## Library use

```python
from pushswap.cli import push_swap
from pushswap.stacks import Stacks

push_swap(["2 1 3"])        # ["sa"]

stacks = Stacks([3, 1, 2])
stacks.ra()
list(stacks.a)              # [1, 2, 3]
stacks.moves                # ["ra"]
```

- `pushswap.cli`: `push_swap(args)` returns the list of operation names;
  `main(argv=None)` is the command-line entry point and returns the exit
  status.
- `pushswap.stacks`: `Stacks` holds the deques `a` and `b` (top first)
  and the list `moves`, with one method per operation. An operation with
  nothing to act on leaves the stacks unchanged but is still recorded.
- `pushswap.parsing`: input handling — `split_words`, `is_valid_token`,
  `parse_int`, `parse_arguments`, `has_duplicates`, `assign_indices`
  (values to ranks, 1 for the smallest), and `InputError`, a
  `ValueError` raised for rejected input.
- `pushswap.sorting`: the sorting routines, which work on ranks —
  `solve`, `sort_three`, `sort_five`, `push_chunks`, `sort_back`, and
  their helpers `is_sorted`, `set_target`, `place_back`, `calc_move`
  and `root`.

## What it does not do

The package only produces operation sequences; it does not include a
checker that reads operations and verifies that they sort a given input.

## Tests

```
pip install ".[test]"
pytest
```