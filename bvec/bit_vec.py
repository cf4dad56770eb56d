"""The packed, growable bit vector and its literal constructor."""

from __future__ import annotations

from functools import total_ordering

from .core import DEFAULT_BLOCK_BITS, Bits, low_mask, mul_nbits
from .iter import BlockIter, cmp_block_iter
from .raw_vec import RawBitVec


@total_ordering
class BitVec(RawBitVec):
    """A packed, growable bit vector with equality, ordering and hashing."""

    @classmethod
    def from_bits(cls, bits):
        """A new vector holding a copy of any bit sequence."""
        block_bits = bits.block_bits
        mask = low_mask(block_bits)
        blocks = [bits.get_raw_block(index) & mask for index in range(bits.block_len())]
        result = cls.from_blocks(blocks, block_bits)
        result.resize(bits.bit_len(), False)
        return result

    @classmethod
    def from_blocks(cls, blocks, block_bits=DEFAULT_BLOCK_BITS):
        """A vector whose bits are exactly those of the given blocks."""
        blocks = list(blocks)
        result = cls.with_block_capacity(len(blocks), block_bits)
        result._len = mul_nbits(block_bits, len(blocks))
        for index, block in enumerate(blocks):
            result.set_block(index, block)
        return result

    def push_bit(self, value):
        self.push(value)

    def pop_bit(self):
        return self.pop()

    def __eq__(self, other):
        return Bits.__eq__(self, other)

    def __lt__(self, other):
        if not isinstance(other, BitVec):
            return NotImplemented
        return cmp_block_iter(BlockIter(self), BlockIter(other)) < 0

    def __hash__(self):
        return hash((self.block_bits, self._len, tuple(BlockIter(self))))

    def __repr__(self):
        bits = "".join("1" if self.get_bit(i) else "0" for i in range(self._len))
        return f"BitVec('{bits}', block_bits={self.block_bits})"


def bit_vec(*args, block_bits=DEFAULT_BLOCK_BITS):
    """A BitVec holding the given bits in order.

    For a vector of one repeated value use BitVec.new_fill.
    """
    result = BitVec(block_bits)
    for value in args:
        result.push(bool(value))
    return result