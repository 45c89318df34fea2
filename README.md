# chessbits

Building blocks for chess programs, in plain Python with no third-party
dependencies:

- **`chessbits.types`** – colours (`Color`), piece types (`PieceType`),
  square helpers (`make_square`, `file_of`, `rank_of`, `relative_rank`,
  `square_name`, `parse_square`, …) and the middlegame/endgame `Score`.
- **`chessbits.bitboard`** – 64-bit bitboards: square, file and rank masks,
  shifts, pawn attacks and spans, lines and segments between squares,
  king distances, and sliding-piece attacks looked up through per-square
  tables (`Magic`, `attacks_bb`).
- **`chessbits.bitbase`** – a king-and-pawn versus king (KPK) bitbase,
  built by retrograde classification, with `probe()` to ask whether a
  position is a win for the side with the pawn.
- **`chessbits.material`** – the second-degree polynomial material
  imbalance term (`imbalance`, `material_imbalance`).
- **`chessbits.misc`** – the xorshift64* `PRNG`, `RunningAverage`, a
  fixed-size `HashTable`, an integer `sigmoid`, `mul_hi64` and a
  millisecond clock `now()`.
- **`chessbits.runtime`** – engine identification (`engine_info`),
  hit-rate and mean counters (`DebugStats`), executable and working
  directory discovery (`CommandLine`) and an input/output transcript
  logger (`IOLogger`).

Python 3.10 or newer is required.

## Bitboards

A bitboard is an ordinary `int` holding one bit per square, A1 being bit 0
and H8 bit 63.

```python
from chessbits.types import PieceType, parse_square, square_name
from chessbits.bitboard import attacks_bb, popcount, pretty, square_bb, squares

e4 = parse_square("e4")
d5 = parse_square("d5")

occupied = square_bb(e4) | square_bb(d5)
rook = attacks_bb(PieceType.ROOK, parse_square("e1"), occupied)

print(popcount(rook))
print([square_name(s) for s in squares(rook)])
print(pretty(rook))
```

`pretty()` draws the board as an ASCII grid with an `X` on every set
square, rank 8 at the top and the file letters underneath. Functions that
take a square raise `ValueError` for squares outside 0–63, and `lsb`,
`msb` and `pop_lsb` raise it for an empty bitboard.

## The KPK bitbase

```python
from chessbits.bitbase import probe
from chessbits.types import Color, parse_square

# White king, white pawn (files a to d), black king, side to move.
win = probe(parse_square("c6"), parse_square("c5"), parse_square("c8"), Color.WHITE)
```

The bitbase is computed the first time it is needed and then reused; the
first call takes a while. The pawn must stand on files a to d and ranks 2
to 7, otherwise `ValueError` is raised, so positions with the pawn on
files e to h must be mirrored before probing.

## Material imbalance

```python
from chessbits.material import material_imbalance

# Per colour: bishop pair flag, pawns, knights, bishops, rooks, queens.
score = material_imbalance([[1, 8, 2, 2, 2, 1], [0, 8, 2, 1, 2, 1]])
print(score.mg, score.eg)
```

## Logging a session

```python
from chessbits.runtime import IOLogger

with IOLogger() as logger:
    logger.start("session.log")
    print("hello")        # written to stdout and to session.log as "<< hello"
```

Lines read are logged with a `>> ` prefix. Calling `start("")` or `stop()`
ends logging and restores the original streams.

## What is not included

The package provides primitives only. It has no board or position class,
no move generation, no search or evaluation, no UCI command loop and no
command-line program.

## Running the tests

Install the `test` extra and run pytest from the project directory.