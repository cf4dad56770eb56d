"""A fixed-width unsigned integer viewed as a single block of bits."""

from __future__ import annotations

from .core import BitsMut, low_mask


class Word(BitsMut):
    """An unsigned integer of `nbits` bits, usable as a one-block bit vector."""

    def __init__(self, value, nbits=64):
        if nbits <= 0:
            raise ValueError("nbits must be positive")
        self.block_bits = nbits
        self.value = self._checked(value)

    def _checked(self, value):
        if not 0 <= value <= low_mask(self.block_bits):
            raise ValueError(f"value {value} does not fit in {self.block_bits} bits")
        return value

    def bit_len(self):
        return self.block_bits

    def block_len(self):
        return 1

    def get_bit(self, position):
        if not 0 <= position < self.block_bits:
            raise IndexError("prim::get_bit: out of bounds")
        return bool((self.value >> position) & 1)

    def get_block(self, position):
        if position != 0:
            raise IndexError("prim::get_block: out of bounds")
        return self.value

    def get_bits(self, start, count):
        if start < 0 or count < 0 or start + count > self.block_bits:
            raise IndexError("prim::get_bits: out of bounds")
        return (self.value >> start) & low_mask(count)

    def set_bit(self, position, value):
        if not 0 <= position < self.block_bits:
            raise IndexError("prim::set_bit: out of bounds")
        if value:
            self.value |= 1 << position
        else:
            self.value &= ~(1 << position)

    def set_block(self, position, value):
        if position != 0:
            raise IndexError("prim::set_block: out of bounds")
        self.value = self._checked(value)

    def set_bits(self, start, count, value):
        if start < 0 or count < 0 or start + count > self.block_bits:
            raise IndexError("prim::set_bits: out of bounds")
        mask = low_mask(count) << start
        self.value = (self.value & ~mask) | ((value << start) & mask)

    def __repr__(self):
        return f"Word({self.value:#x}, nbits={self.block_bits})"