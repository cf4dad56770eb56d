"""A lazy window onto a contiguous range of any bit sequence."""

from __future__ import annotations

from .core import BitsMut, mul_nbits


def _block_addr(nbits, start, length, position):
    """Start bit and width of block `position` of a slice of `length` bits at `start`."""
    real_start = start + mul_nbits(nbits, position)
    limit = start + length
    real_len = nbits if real_start + nbits < limit else limit - real_start
    return real_start, real_len


class BitSliceAdapter(BitsMut):
    """The `length` bits of `bits` starting at bit `start`.

    Reading works for any bit sequence; writing requires the underlying
    sequence to be mutable.
    """

    def __init__(self, bits, start, length):
        if start < 0 or length < 0:
            raise ValueError("BitSliceAdapter: start and length must not be negative")
        if start + length > bits.bit_len():
            raise IndexError("BitSliceAdapter.new: out of bounds")
        self.block_bits = bits.block_bits
        self.bits = bits
        self.start = start
        self.length = length

    def _writable(self):
        if not isinstance(self.bits, BitsMut):
            raise TypeError(f"{type(self.bits).__name__} does not support mutation")
        return self.bits

    def bit_len(self):
        return self.length

    def get_bit(self, position):
        if not 0 <= position < self.length:
            raise IndexError("BitSliceAdapter.get_bit: out of bounds")
        return self.bits.get_bit(self.start + position)

    def get_block(self, position):
        if not 0 <= position < self.block_len():
            raise IndexError("BitSliceAdapter.get_block: out of bounds")
        real_start, real_len = _block_addr(self.block_bits, self.start, self.length, position)
        return self.bits.get_bits(real_start, real_len)

    def get_bits(self, start, count):
        if start < 0 or count < 0 or start + count > self.length:
            raise IndexError("BitSliceAdapter.get_bits: out of bounds")
        return self.bits.get_bits(self.start + start, count)

    def set_bit(self, position, value):
        if not 0 <= position < self.length:
            raise IndexError("BitSliceAdapter.set_bit: out of bounds")
        self._writable().set_bit(self.start + position, value)

    def set_block(self, position, value):
        if not 0 <= position < self.block_len():
            raise IndexError("BitSliceAdapter.set_block: out of bounds")
        real_start, real_len = _block_addr(self.block_bits, self.start, self.length, position)
        self._writable().set_bits(real_start, real_len, value)

    def set_bits(self, start, count, value):
        if start < 0 or count < 0 or start + count > self.length:
            raise IndexError("BitSliceAdapter.set_bits: out of bounds")
        self._writable().set_bits(self.start + start, count, value)

    def bit_slice(self, start=None, stop=None):
        """A narrower slice over the same underlying bits; indices are relative."""
        start = 0 if start is None else start
        stop = self.length if stop is None else stop
        if start < 0 or start > stop:
            raise ValueError("BitSliceAdapter.bit_slice: bad range")
        if stop > self.length:
            raise IndexError("BitSliceAdapter.reslice: out of bounds")
        return BitSliceAdapter(self.bits, self.start + start, stop - start)

    def __repr__(self):
        return f"BitSliceAdapter({self.bits!r}, start={self.start}, length={self.length})"