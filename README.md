# bvec

Packed, growable bit vectors for Python, plus a family of lazy adapters that
let a variety of things be treated as bit vectors and combined without
building intermediate vectors.

## Installation

```
pip install bvec
```

The package has no runtime dependencies. Its top-level `bvec` package does
not re-export anything; import from the submodules shown below.

## Bit vectors

`bvec.bit_vec.BitVec` stores bits packed into fixed-width integer blocks. The
block width is chosen with `block_bits` (64 by default). Its API follows that
of a Python list where reasonable.

```python
from bvec.bit_vec import BitVec, bit_vec

bv1 = BitVec.new_fill(False, 50, 64)
bv2 = BitVec.new_fill(False, 50, 64)
assert bv1 == bv2

bv1.set(49, True)
assert bv1 != bv2

assert bv1.pop() is True
assert bv2.pop() is False
assert bv1 == bv2

bv = bit_vec(True, False, True, block_bits=8)
assert len(bv) == 3
assert bv[0] and not bv[1] and bv[2]
```

Other constructors are `BitVec.with_capacity`, `BitVec.with_block_capacity`,
`BitVec.from_blocks` (a list of integer blocks) and `BitVec.from_bits` (a copy
of any bit sequence).

Bits are read and written with `get`/`set` (or `get_bit`/`set_bit`), appended
and removed with `push`/`pop`. Capacity management mirrors a growable array:
`capacity()`, `block_capacity()`, `reserve`, `reserve_exact`, `block_reserve`,
`block_reserve_exact`, `shrink_to_fit`, `truncate`, `resize`, `clear` and
`is_empty`. `into_blocks()` returns the stored blocks, unused capacity
included.

`BitVec` values compare equal to any bit sequence with the same block width
and the same bits, are ordered (first by length, then block by block) and
are hashable. The storage and growth logic lives in `bvec.raw_vec.RawBitVec`,
which `BitVec` extends; the block storage itself is `bvec.storage.BlockStore`.

## The `Bits` interface

Everything that behaves as a bit vector derives from `bvec.core.Bits`, which
provides `bit_len()`, `block_len()`, `get_bit()`, `get_block()`,
`get_raw_block()`, `get_bits()` and indexing: `x[i]` reads one bit and
`x[a:b]` gives a lazy slice (steps are not supported). Equality holds between
any two `Bits` values of the same block width with the same bits. Out-of-range
positions raise `IndexError`.

Mutable bit vectors add `set_bit()`, `set_block()` and `set_bits()`
(`bvec.core.BitsMut`); growable ones add `push_bit()`, `pop_bit()`,
`align_block()` and `push_block()` (`bvec.core.BitsPush`).

Ready-made wrappers let plain data act as bit vectors:

- `bvec.prims.Word` – a single unsigned integer of a given width,
- `bvec.core.BlockArray` – a fixed list of integer blocks,
- `bvec.core.BoolArray` – a fixed list of `bool`, in 8-bit blocks,
- `bvec.bool_adapter.BoolAdapter` – any sequence of `bool` with a chosen
  block width; it can grow and shrink when the sequence is a list.

`bvec.iter.BlockIter` iterates over the blocks of any bit sequence, and
`bvec.core` exposes the small helpers `mul_nbits`, `ceil_div_nbits`,
`low_mask`, `get_masked_block` and `inclusive_bounds`.

## Lazy adapters

Any `Bits` value offers `bit_not`, `bit_and`, `bit_or`, `bit_xor`, `bit_zip`,
`bit_concat`, `bit_pad` and `bit_slice`. They return lightweight views that
can be indexed or compared directly, or copied out with `to_bit_vec()`. The
binary operations take the length of the shorter operand; both operands must
share a block width.

```python
from bvec.bit_vec import bit_vec
from bvec.bool_adapter import BoolAdapter
from bvec.core import BlockArray

array = BlockArray([0b1100], 16)
bools = BoolAdapter([False, True, False, True], 16)

xor = array.bit_xor(bools)
assert xor == bit_vec(False, True, True, False, block_bits=16)
```

A three-way *or* that builds a single `BitVec` with no intermediate vectors:

```python
def three_way_or(a, b, c):
    return a.bit_or(b).bit_or(c).to_bit_vec()
```

The adapter classes are `bvec.logic.BitNot`, `BitAnd`, `BitOr`, `BitXor` and
`BitZip`; `bvec.fill.BitFill` (a constant run of zeroes or ones, without
storage); `bvec.concat.BitConcat`; and `bvec.slice_adapter.BitSliceAdapter`,
which also writes through to a mutable underlying bit vector.

## What it does not do

This is a library only: it has no command-line tool, and it offers no
serialisation of bit vectors to or from files or other formats.

## Running the tests

```
pip install -e ".[test]"
pytest
```