# pushswap

A small engine for the two-stack puzzle. You give it a list of distinct
integers. It loads them onto stack **A**, gives each one its rank in sorted
order, and then moves them to stack **B** in chunks of neighbouring ranks. It
uses the standard puzzle operations to do this.

## Operations

`pushswap.operations.Board` holds two stacks, `a` and `b`, and has one method
for each operation:

| Method | Effect                                        |
|--------|-----------------------------------------------|
| `sa`   | swap the top two elements of A                |
| `sb`   | swap the top two elements of B                |
| `ss`   | `sa` and `sb` together                        |
| `pa`   | move the top of B onto A                      |
| `pb`   | move the top of A onto B                      |
| `ra`   | rotate A upwards (top goes to the bottom)     |
| `rb`   | rotate B upwards                              |
| `rr`   | `ra` and `rb` together                        |
| `rra`  | rotate A downwards (bottom comes to the top)  |
| `rrb`  | rotate B downwards                            |
| `rrr`  | `rra` and `rrb` together                      |

Each operation does two things:

- It writes its name on a line of its own to the board's output stream. This
  is the stream passed as `out`, or standard output if none was passed.
- It appends its name to `board.moves`.

Swaps and rotations on a stack with fewer than two elements change nothing,
but they are still recorded. `pa` and `pb` on an empty source stack do
nothing, and nothing is recorded.

## Installation

```
pip install .
```

## Command line

```
pushswap 3 -1 7 0 12
```

The same can be run as `python -m pushswap.cli 3 -1 7 0 12`.

### Argument rules

- Each argument must be digits, optionally led by a single `-`.
- An empty argument is accepted and reads as 0.
- Values are reduced to the signed 32-bit range. Values outside it wrap around.
- After that reduction, no two values may be equal.

If any argument breaks these rules, the program writes `Error` to standard
error and exits with status 1. With no arguments it prints nothing and exits
with status 0.

### Output

Otherwise the program prints the following, in order:

1. A `=== Before pushing ===` heading, then stack A and stack B.
2. The name of every operation performed while pushing chunks from A to B.
3. A `=== After pushing ===` heading, then both stacks again.

Each element is shown as `[num: <value> | idx: <rank>]`.

### How chunks are pushed

The number of chunks depends on the input size:

- Inputs of up to 100 values use 5 chunks.
- Larger inputs use 11 chunks.

Each chunk covers `size // chunks` consecutive ranks. For each chunk, the
program examines the top of A at most `size` times:

- If the rank falls in the chunk, it pushes the element with `pb`.
- Otherwise it rotates A with `ra`.

It moves on to the next chunk once a chunk's worth of elements has been
pushed.

## Library use

```python
import sys

from pushswap.parsing import parse_arguments
from pushswap.stack import Stack
from pushswap.indexing import assign_indexes
from pushswap.operations import Board
from pushswap.sorting import push_chunks_to_b

numbers = parse_arguments(["4", "-2", "9", "0"])
a = Stack(numbers)
assign_indexes(a)
board = Board(a, Stack(), sys.stdout)
push_chunks_to_b(board, len(a))
print(a.format())
print(board.b.format())
print(board.moves)
```

### `pushswap.parsing`

- `is_valid_token` and `check_input` check the form of one argument or of a
  sequence of arguments.
- `parse_number` converts one token, or raises `InputError`.
- `check_duplicate` reports whether any two tokens convert to the same number.
- `parse_arguments` runs every check and returns the numbers. It raises
  `InputError` (a `ValueError`) if the input is malformed or holds duplicates.

### `pushswap.stack`

`Stack` is an ordered sequence of `Node` objects with the top first. Each node
has the fields `number`, `index`, `cost_a` and `cost_b`.

A stack has these methods:

- `numbers`, `push_front`, `push_back`, `pop_front`
- `last`, `before_last`
- `swap_top`, `rotate`, `reverse_rotate`
- `is_sorted`, `clear`, `format`

It also supports `len()` and iteration.

### `pushswap.indexing`

- `stack_to_list` returns a stack's values from top to bottom.
- `assign_indexes` sets each node's `index` to its value's rank and returns
  the sorted values.

### `pushswap.sorting`

- `get_chunk_count` gives the number of chunks for a given size.
- `push_one_chunk` pushes a single chunk, as described above.
- `push_chunks_to_b` pushes every chunk in turn.

## What it does not do

The package does not sort the numbers. It only performs the chunked transfer
from A to B:

- Nothing is ever moved back to A.
- B is not ordered within a chunk.
- Elements whose rank lies beyond the last full chunk stay on A.
- With fewer values than chunks, nothing is pushed at all.

The `cost_a` and `cost_b` fields of a node are carried along but never
computed. The command's output mixes operation names with stack dumps, so it
is not a clean list of moves for a checker.

## Running the tests

```
pip install .[test]
pytest
```