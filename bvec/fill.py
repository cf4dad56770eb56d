"""A constant-valued bit sequence of a given length."""

from __future__ import annotations

from .core import DEFAULT_BLOCK_BITS, Bits, get_masked_block, low_mask


class BitFill(Bits):
    """`length` copies of one bit value, without storage."""

    def __init__(self, length, value=False, block_bits=DEFAULT_BLOCK_BITS):
        if block_bits <= 0:
            raise ValueError("block_bits must be positive")
        if length < 0:
            raise ValueError("length must not be negative")
        self.block_bits = block_bits
        self.length = length
        self.block = low_mask(block_bits) if value else 0

    @classmethod
    def zeroes(cls, length, block_bits=DEFAULT_BLOCK_BITS):
        """`length` zero bits."""
        return cls(length, False, block_bits)

    @classmethod
    def ones(cls, length, block_bits=DEFAULT_BLOCK_BITS):
        """`length` one bits."""
        return cls(length, True, block_bits)

    def bit_len(self):
        return self.length

    def get_bit(self, position):
        if not 0 <= position < self.length:
            raise IndexError("BitFill.get_bit: out of bounds")
        return self.block != 0

    def get_block(self, position):
        if not 0 <= position < self.block_len():
            raise IndexError("BitFill.get_block: out of bounds")
        return get_masked_block(self, position)

    def get_raw_block(self, position):
        if not 0 <= position < self.block_len():
            raise IndexError("BitFill.get_raw_block: out of bounds")
        return self.block

    def get_bits(self, start, count):
        if count > self.block_bits:
            raise ValueError(f"get_bits: count {count} exceeds block size {self.block_bits}")
        if start < 0 or count < 0 or start + count > self.length:
            raise IndexError("BitFill.get_bits: out of bounds")
        return self.block & low_mask(count)

    def __repr__(self):
        value = self.block != 0
        return f"BitFill({self.length}, {value}, block_bits={self.block_bits})"