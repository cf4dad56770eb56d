"""Lazy bitwise logic over bit sequences: not, and, or, xor and block-wise zip."""

from __future__ import annotations

import operator

from .core import Bits, get_masked_block, low_mask


def _check_same_blocks(first, second):
    if first.block_bits != second.block_bits:
        raise ValueError("cannot combine bit sequences with different block sizes")


def _resolve_range(start, stop, length, name):
    start = 0 if start is None else start
    stop = length if stop is None else stop
    if start < 0 or start > stop:
        raise ValueError(f"{name}.bit_slice: bad range")
    if stop > length:
        raise IndexError(f"{name}.bit_slice: out of bounds")
    return start, stop


class BitNot(Bits):
    """The complement of the bits of an underlying sequence."""

    def __init__(self, bits):
        self.block_bits = bits.block_bits
        self.bits = bits

    def bit_len(self):
        return self.bits.bit_len()

    def get_bit(self, position):
        return not self.bits.get_bit(position)

    def get_block(self, position):
        if not 0 <= position < self.block_len():
            raise IndexError("BitNot.get_block: out of bounds")
        return get_masked_block(self, position)

    def get_raw_block(self, position):
        return ~self.bits.get_raw_block(position) & low_mask(self.block_bits)

    def bit_slice(self, start=None, stop=None):
        """The complement of a slice of the underlying sequence."""
        return BitNot(self.bits.bit_slice(start, stop))

    def __repr__(self):
        return f"BitNot({self.bits!r})"


class _BinaryOp(Bits):
    """Two operands combined bit by bit; the length is the shorter of the two."""

    _op = staticmethod(operator.and_)

    def _setup(self, first, second):
        _check_same_blocks(first, second)
        self.block_bits = first.block_bits
        self.first = first
        self.second = second
        self.length = min(first.bit_len(), second.bit_len())

    def _bit(self, position):
        if not 0 <= position < self.length:
            raise IndexError(f"{type(self).__name__}.get_bit: out of bounds")
        return bool(self._op(self.first.get_bit(position), self.second.get_bit(position)))

    def _block(self, position):
        if not 0 <= position < self.block_len():
            raise IndexError(f"{type(self).__name__}.get_block: out of bounds")
        return get_masked_block(self, position)

    def _combine(self, block1, block2):
        return self._op(block1, block2)

    def _raw_block(self, position):
        block1 = self.first.get_raw_block(position)
        block2 = self.second.get_raw_block(position)
        return self._combine(block1, block2) & low_mask(self.block_bits)

    def _rebuild(self, first, second):
        return type(self)(first, second)

    def _slice(self, start, stop):
        start, stop = _resolve_range(start, stop, self.length, type(self).__name__)
        return self._rebuild(self.first.bit_slice(start, stop), self.second.bit_slice(start, stop))

    def __repr__(self):
        return f"{type(self).__name__}({self.first!r}, {self.second!r})"


class BitAnd(_BinaryOp):
    """The bitwise and of two bit sequences."""

    _op = staticmethod(operator.and_)

    def __init__(self, first, second):
        self._setup(first, second)

    def bit_len(self):
        return self.length

    def get_bit(self, position):
        return self._bit(position)

    def get_block(self, position):
        return self._block(position)

    def get_raw_block(self, position):
        return self._raw_block(position)

    def bit_slice(self, start=None, stop=None):
        """The and of matching slices of both operands."""
        return self._slice(start, stop)


class BitOr(_BinaryOp):
    """The bitwise or of two bit sequences."""

    _op = staticmethod(operator.or_)

    def __init__(self, first, second):
        self._setup(first, second)

    def bit_len(self):
        return self.length

    def get_bit(self, position):
        return self._bit(position)

    def get_block(self, position):
        return self._block(position)

    def get_raw_block(self, position):
        return self._raw_block(position)

    def bit_slice(self, start=None, stop=None):
        """The or of matching slices of both operands."""
        return self._slice(start, stop)


class BitXor(_BinaryOp):
    """The bitwise exclusive or of two bit sequences."""

    _op = staticmethod(operator.xor)

    def __init__(self, first, second):
        self._setup(first, second)

    def bit_len(self):
        return self.length

    def get_bit(self, position):
        return self._bit(position)

    def get_block(self, position):
        return self._block(position)

    def get_raw_block(self, position):
        return self._raw_block(position)

    def bit_slice(self, start=None, stop=None):
        """The exclusive or of matching slices of both operands."""
        return self._slice(start, stop)


class BitZip(_BinaryOp):
    """Two bit sequences combined block by block with an arbitrary function."""

    def __init__(self, first, second, fun):
        self._setup(first, second)
        self.fun = fun

    def bit_len(self):
        return self.length

    def get_bit(self, position):
        return Bits.get_bit(self, position)

    def get_block(self, position):
        return self._block(position)

    def _combine(self, block1, block2):
        return self.fun(block1, block2)

    def get_raw_block(self, position):
        return self._raw_block(position)

    def _rebuild(self, first, second):
        return BitZip(first, second, self.fun)

    def bit_slice(self, start=None, stop=None):
        """The same function applied to matching slices of both operands."""
        return self._slice(start, stop)

    def __repr__(self):
        return f"BitZip({self.first!r}, {self.second!r}, {self.fun!r})"