# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations. The `push_swap` command prints the moves that sort
stack `a` in ascending order, one per line.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments:

```
push_swap 3 2 1
```

or as one quoted, space-separated argument:

```
push_swap "4 67 3 87 23"
```

The first number is the top of stack `a`. Each line of output is one
operation:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the first two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one |

With no arguments, or when the input is already sorted, nothing is printed
and the exit status is 0.

The program writes `Error` to standard error and exits with status 1 when:

- an argument is not an optional `+` or `-` followed by digits only;
- a value falls outside the 32-bit signed range, or an argument is longer
  than eleven characters;
- a value appears more than once;
- a single argument holds nothing but spaces.

## Strategy

Values are first replaced by their rank, counting from 0. Two or three
elements are sorted directly, four or five by pushing the smallest elements
to `b`, sorting the remaining three and pushing them back, and larger inputs
with a binary radix sort on the ranks, least significant bit first.

## Library use

```python
from pushswap.parsing import parse_arguments
from pushswap.sorting import solve

values = parse_arguments(["3", "2", "1"])
moves = solve(values)          # [Operation.SA, Operation.RRA]
print([str(move) for move in moves])
```

- `pushswap.parsing.parse_arguments` turns argument strings into integers and
  raises `pushswap.parsing.InputError` (a `ValueError`) on invalid input.
- `pushswap.sorting.solve` returns the list of `pushswap.stacks.Operation`
  values that sorts the given distinct integers.
- `pushswap.stacks.Stacks` holds the two stacks as deques, performs the
  operations (`sa()`, `pb()`, `rra()`, … or `apply("rra")`), records each one
  in `operations`, and writes its name to a stream unless created with
  `echo=False`.
- `pushswap.sorting` also exposes `index_values`, `is_sorted`,
  `find_position`, `sort_three`, `sort_five`, `radix_sort` and `sort_stack`.
- `pushswap.cli.run(args, out, err)` runs the command on given streams and
  returns the exit status.

The package also carries small helper modules used by the command:
`pushswap.chars` (ASCII classification), `pushswap.memory` (bytearray
helpers), `pushswap.strings` and `pushswap.conversions` (string and number
helpers with NUL-terminated semantics, such as `atoi` and `split`),
`pushswap.output` (writing to text streams, with a small `printf`) and
`pushswap.linkedlist` (a singly linked list of integers).

## Limits

The package only produces a sequence of moves; it does not read moves back
to check whether they sort a given input.

## Tests

```
pip install .[test]
pytest
```