"""Lazy concatenation of two bit sequences."""

from __future__ import annotations

from .core import Bits, low_mask, mul_nbits


class BitConcat(Bits):
    """The bits of `first` followed by the bits of `second`."""

    def __init__(self, first, second):
        if first.block_bits != second.block_bits:
            raise ValueError("cannot concatenate bit sequences with different block sizes")
        self.block_bits = first.block_bits
        self.first = first
        self.second = second

    def bit_len(self):
        return self.first.bit_len() + self.second.bit_len()

    def get_bit(self, position):
        if not 0 <= position < self.bit_len():
            raise IndexError("BitConcat.get_bit: out of bounds")
        len0 = self.first.bit_len()
        if position < len0:
            return self.first.get_bit(position)
        return self.second.get_bit(position - len0)

    def get_block(self, position):
        if not 0 <= position < self.block_len():
            raise IndexError("BitConcat.get_block: out of bounds")
        nbits = self.block_bits
        start_bit = mul_nbits(nbits, position)
        count = min(nbits, self.bit_len() - start_bit)
        limit_bit = start_bit + count

        len0 = self.first.bit_len()
        if limit_bit <= len0:
            return self.first.get_block(position)
        if start_bit < len0:
            size1 = len0 - start_bit
            size2 = count - size1
            block1 = self.first.get_raw_block(position) & low_mask(size1)
            block2 = self.second.get_raw_block(0) & low_mask(size2)
            return block1 | (block2 << size1)
        return self.second.get_bits(start_bit - len0, count)

    def __repr__(self):
        return f"BitConcat({self.first!r}, {self.second!r})"