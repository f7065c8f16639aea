# pushswap

`pushswap` sorts a list of distinct integers using two stacks, **a** and **b**,
and a fixed set of operations. It prints each operation it uses on its own line.
The list to sort starts on stack **a**, with the first number on top. Stack
**b** starts empty.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of a / b / both |
| `pa` / `pb` | move the top element of b onto a / the top of a onto b |
| `ra` / `rb` / `rr` | rotate a / b / both up by one (the top goes to the bottom) |
| `rra` / `rrb` / `rrr` | rotate a / b / both down by one (the bottom goes to the top) |

An operation that cannot take effect does nothing and is not recorded. For
example, `sa` does nothing when a holds fewer than two elements.

## Command line

```
pushswap 3 2 1
```

prints

```
ra
sa
```

The same entry point can also be run as `python -m pushswap.cli`.

- You can give the numbers as separate arguments, or in one argument separated
  by spaces: `pushswap "4 67 3" 87 23`.
- Nothing is printed if the input is already sorted, or if there are no
  arguments.
- Bad input prints `Error` on standard error and exits with status 255. Bad
  input is any of the following:
  - a token that is not an integer (one optional sign, then digits only);
  - an argument that is empty or holds only spaces;
  - a value outside the 32-bit signed range;
  - a value given more than once.

How the input is sorted depends on its size:

- Two elements are sorted with a single `sa`.
- Up to six elements are sorted by repeatedly rotating the minimum to the top
  and pushing it to b. The last three are sorted in place, then b is pushed
  back.
- Larger inputs are sorted with a binary radix sort on the ranks of the values.

## Library use

```python
from pushswap.parsing import parse_arguments, InputError
from pushswap.sorting import solve

values = parse_arguments(["3 2", "1"])   # [3, 2, 1]
operations = solve(values)               # ["ra", "sa"]
```

- `pushswap.parsing` provides:
  - `parse_int`, which reads one token;
  - `parse_arguments`, which reads all arguments;
  - `rank_values`, which replaces each value by its position in sorted order.

  All three raise `InputError`, a `ValueError`, for input the command line would
  reject.
- `pushswap.stacks.Stacks` holds the two stacks and has one method per
  operation. The `a` and `b` properties show each stack top first,
  `operations` lists the operations applied so far, and `is_sorted()` checks
  the final state. Use it to replay or check a list of operations.
- `pushswap.sorting` provides `solve`, and the individual strategies
  `sort_three`, `sort_small` and `radix_sort`. It also has `min_max`, which
  scans stack a for its extremes.

The package also has small helper modules that follow C library conventions:

- `pushswap.ascii`: character classes, case conversion, `atoi` and `itoa`;
- `pushswap.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`
  and `calloc` on bytearrays;
- `pushswap.strings`: `strlen`, `strchr`, `strlcpy`, `split`, `strtrim` and
  similar functions on `str`. Searches return indices rather than pointers;
- `pushswap.linked_list`: `LinkedList` and `Node`;
- `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a text stream;
- `pushswap.printf`: `printf`, which supports `%c %s %p %d %i %u %x %X %%`.

## What it does not do

There is no checker command. The package does not read a list of operations
from input to verify them. To check a sequence yourself, apply it with
`Stacks` and call `is_sorted()`.

## Tests

```
pip install -e ".[test]"
pytest
```