# pushswap

Sorts a list of distinct integers with two stacks, `a` and `b`, and a small
instruction set. It prints the instructions it used, one per line.

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate: the bottom element goes to the top |

Two elements are handled with a single `sa` and three are handled directly.
Larger inputs use a greedy cost-based strategy. It pushes elements from `a`
to `b`, each time choosing the one that takes the fewest rotations, until
three remain in `a`. It sorts those three, brings every element back into
place, and finally rotates the smallest number to the top.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, or as one argument separated by spaces:

```
push_swap 3 2 5 1 4
push_swap "3 2 5 1 4"
```

The first number is the top of stack `a`.

The command writes nothing in these cases:

- the input is already sorted (exit status 0);
- no arguments are given (exit status 1);
- the single argument is empty or holds only spaces (exit status 1).

On invalid input it prints `Error` to standard output and exits with status 1.
Input is invalid when it holds any of the following:

- something that is not an optional `+` or `-` followed by digits;
- a value outside the 32-bit signed range;
- a duplicate.

## Library

```python
from pushswap.turk import solve

print(solve([3, 2, 5, 1, 4]))   # list of instruction names, e.g. ["pb", "ra", ...]
```

- `pushswap.parsing.parse_arguments(args)` checks and converts command-line
  style arguments into a list of integers. It raises `InputError` on bad input
  and `EmptyInput` when there is nothing to sort. `is_valid_number`,
  `parse_long` and `split_words` are the helpers it is built from.
- `pushswap.stack` provides `Stack`, a stack of `Node` objects kept top first,
  and `Machine`, a pair of stacks whose methods (`sa`, `pb`, `rrr`, ...) apply
  one instruction each and record its name in `operations`.
- `pushswap.turk` holds the sorting strategy: `sort_three`, `sort_stacks`,
  the node preparation steps `init_nodes_a`, `init_nodes_b`, `set_cheapest`,
  `get_cheapest`, `prep_for_push`, and `solve`.
- `pushswap.cli.main(argv=None)` is the command above; it returns the exit
  status.

## What it does not do

The package only produces instructions. It has no command that reads a list
of instructions and checks whether they sort a given input.

## Tests

```
pip install ".[test]"
pytest
```