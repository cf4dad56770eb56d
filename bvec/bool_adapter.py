"""A list of booleans viewed as a bit vector with any block size."""

from __future__ import annotations

from .core import DEFAULT_BLOCK_BITS, BitsPush


class BoolAdapter(BitsPush):
    """Adapts a sequence of bools to behave as bits in `block_bits`-bit blocks.

    Mutation and growth work when the underlying sequence allows them.
    """

    def __init__(self, bits, block_bits=DEFAULT_BLOCK_BITS):
        if block_bits <= 0:
            raise ValueError("block_bits must be positive")
        self.block_bits = block_bits
        self.bits = bits

    def into_inner(self):
        """The underlying bool sequence."""
        return self.bits

    def bit_len(self):
        return len(self.bits)

    def __len__(self):
        return len(self.bits)

    def get_bit(self, position):
        if not 0 <= position < len(self.bits):
            raise IndexError("BoolAdapter.get_bit: out of bounds")
        return bool(self.bits[position])

    def set_bit(self, position, value):
        if not 0 <= position < len(self.bits):
            raise IndexError("BoolAdapter.set_bit: out of bounds")
        self.bits[position] = bool(value)

    def push_bit(self, value):
        self.bits.append(bool(value))

    def pop_bit(self):
        if not self.bits:
            return None
        return bool(self.bits.pop())

    def __repr__(self):
        return f"BoolAdapter({self.bits!r}, block_bits={self.block_bits})"