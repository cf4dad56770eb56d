"""Iteration over, and comparison of, the blocks of a bit sequence."""

from __future__ import annotations

from functools import total_ordering

from .core import mul_nbits


def cmp_block_iter(iter1, iter2):
    """Compare two block iterators: by remaining bit length, then block by block.

    Returns -1, 0 or 1.
    """
    if iter1.block_bits != iter2.block_bits:
        raise ValueError("cannot compare block iterators with different block sizes")
    len1, len2 = iter1.bit_len(), iter2.bit_len()
    if len1 != len2:
        return -1 if len1 < len2 else 1
    blocks1 = map(iter1.bits.get_block, range(iter1.pos, iter1.bits.block_len()))
    blocks2 = map(iter2.bits.get_block, range(iter2.pos, iter2.bits.block_len()))
    for block1, block2 in zip(blocks1, blocks2):
        if block1 != block2:
            return -1 if block1 < block2 else 1
    return 0


@total_ordering
class BlockIter:
    """An iterator over the blocks of a bit sequence."""

    def __init__(self, bits):
        self.bits = bits
        self.pos = 0

    @property
    def block_bits(self):
        return self.bits.block_bits

    def bit_len(self):
        """The number of bits not yet iterated over."""
        return max(0, self.bits.bit_len() - mul_nbits(self.block_bits, self.pos))

    def __iter__(self):
        return self

    def __next__(self):
        if self.pos >= self.bits.block_len():
            raise StopIteration
        block = self.bits.get_block(self.pos)
        self.pos += 1
        return block

    def __len__(self):
        return self.bits.block_len() - self.pos

    def __eq__(self, other):
        if not isinstance(other, BlockIter):
            return NotImplemented
        if other.block_bits != self.block_bits:
            return False
        return cmp_block_iter(self, other) == 0

    def __lt__(self, other):
        if not isinstance(other, BlockIter):
            return NotImplemented
        return cmp_block_iter(self, other) < 0

    def __repr__(self):
        return f"BlockIter({self.bits!r}, pos={self.pos})"