"""Core bit-vector protocol: the Bits, BitsMut and BitsPush base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod

DEFAULT_BLOCK_BITS = 64


def mul_nbits(nbits, count):
    """Number of bits held by `count` blocks of `nbits` bits each."""
    return nbits * count


def ceil_div_nbits(nbits, count):
    """Number of `nbits`-bit blocks needed to hold `count` bits."""
    return -(-count // nbits)


def low_mask(nbits):
    """An integer whose low `nbits` bits are set."""
    return (1 << nbits) - 1


def _block_width(bits, position):
    """How many bits of block `position` lie within `bits`."""
    nbits = bits.block_bits
    return max(0, min(nbits, bits.bit_len() - mul_nbits(nbits, position)))


def _with_bits(block, offset, count, value):
    mask = low_mask(count) << offset
    return (block & ~mask) | ((value << offset) & mask)


def _check_index(position, limit, what):
    if not 0 <= position < limit:
        raise IndexError(f"{what}: out of bounds")


def get_masked_block(bits, position):
    """The raw block at `position` with the bits past the end cleared."""
    return bits.get_raw_block(position) & low_mask(_block_width(bits, position))


def inclusive_bounds(start, end):
    """First and last element of the inclusive range, or None if it is empty."""
    if start > end:
        return None
    return start, end


class Bits(ABC):
    """A read-only sequence of bits, stored in blocks of `block_bits` bits."""

    block_bits: int = DEFAULT_BLOCK_BITS

    @abstractmethod
    def bit_len(self):
        """The number of bits."""

    def block_len(self):
        """The number of blocks, counting a final partial one."""
        return ceil_div_nbits(self.block_bits, self.bit_len())

    def get_bit(self, position):
        """The bit at `position`."""
        _check_index(position, self.bit_len(), f"{type(self).__name__}.get_bit")
        block_index, offset = divmod(position, self.block_bits)
        return bool((self.get_block(block_index) >> offset) & 1)

    def get_block(self, position):
        """The block at `position`; bits past the end are zero."""
        _check_index(position, self.block_len(), f"{type(self).__name__}.get_block")
        base = mul_nbits(self.block_bits, position)
        return sum(
            1 << offset
            for offset in range(_block_width(self, position))
            if self.get_bit(base + offset)
        )

    def get_raw_block(self, position):
        """The block at `position`; bits past the end are unspecified."""
        return self.get_block(position)

    def get_bits(self, start, count):
        """`count` bits (at most one block) starting at `start`, as an integer."""
        nbits = self.block_bits
        if count > nbits:
            raise ValueError(f"get_bits: count {count} exceeds block size {nbits}")
        if start < 0 or count < 0 or start + count > self.bit_len():
            raise IndexError(f"{type(self).__name__}.get_bits: out of bounds")
        if count == 0:
            return 0
        block_index, offset = divmod(start, nbits)
        result = self.get_raw_block(block_index) >> offset
        if offset + count > nbits:
            result |= self.get_raw_block(block_index + 1) << (nbits - offset)
        return result & low_mask(count)

    def to_bit_vec(self):
        """Copy the bits into a new BitVec."""
        from .bit_vec import BitVec

        return BitVec.from_bits(self)

    def bit_not(self):
        """A lazy view of the complement of these bits."""
        from .logic import BitNot

        return BitNot(self)

    def bit_and(self, other):
        """A lazy view of the bitwise and with `other`."""
        from .logic import BitAnd

        return BitAnd(self, other)

    def bit_or(self, other):
        """A lazy view of the bitwise or with `other`."""
        from .logic import BitOr

        return BitOr(self, other)

    def bit_xor(self, other):
        """A lazy view of the bitwise exclusive or with `other`."""
        from .logic import BitXor

        return BitXor(self, other)

    def bit_zip(self, other, fun):
        """A lazy view combining blocks of `self` and `other` with `fun`."""
        from .logic import BitZip

        return BitZip(self, other, fun)

    def bit_concat(self, other):
        """A lazy view of these bits followed by those of `other`."""
        from .concat import BitConcat

        return BitConcat(self, other)

    def bit_pad(self, length):
        """A lazy view padded with zeroes up to at least `length` bits."""
        from .concat import BitConcat
        from .fill import BitFill

        extra = max(0, length - self.bit_len())
        return BitConcat(self, BitFill.zeroes(extra, self.block_bits))

    def bit_slice(self, start=None, stop=None):
        """A lazy view of the bits from `start` up to `stop`."""
        from .slice_adapter import BitSliceAdapter

        start = 0 if start is None else start
        stop = self.bit_len() if stop is None else stop
        if start > stop:
            raise ValueError(f"{type(self).__name__}.bit_slice: bad range")
        return BitSliceAdapter(self, start, stop - start)

    def __getitem__(self, position):
        if isinstance(position, slice):
            if position.step is not None:
                raise ValueError("bit slices do not support a step")
            return self.bit_slice(position.start, position.stop)
        return self.get_bit(position)

    def __eq__(self, other):
        if not isinstance(other, Bits):
            return NotImplemented
        if other.block_bits != self.block_bits:
            return False
        from .iter import BlockIter

        return BlockIter(self) == BlockIter(other)


class BitsMut(Bits):
    """A bit sequence whose bits can be changed in place."""

    def set_bit(self, position, value):
        """Set the bit at `position` to `value`."""
        _check_index(position, self.bit_len(), f"{type(self).__name__}.set_bit")
        block_index, offset = divmod(position, self.block_bits)
        block = self.get_raw_block(block_index)
        self.set_block(block_index, _with_bits(block, offset, 1, int(bool(value))))

    def set_block(self, position, value):
        """Set the block at `position`; bits past the end are ignored."""
        _check_index(position, self.block_len(), f"{type(self).__name__}.set_block")
        base = mul_nbits(self.block_bits, position)
        for offset in range(_block_width(self, position)):
            self.set_bit(base + offset, bool((value >> offset) & 1))

    def set_bits(self, start, count, value):
        """Set `count` bits (at most one block) from `start` to the low bits of `value`."""
        nbits = self.block_bits
        if count > nbits:
            raise ValueError(f"set_bits: count {count} exceeds block size {nbits}")
        if start < 0 or count < 0 or start + count > self.bit_len():
            raise IndexError(f"{type(self).__name__}.set_bits: out of bounds")
        if count == 0:
            return
        value &= low_mask(count)
        block_index, offset = divmod(start, nbits)
        first = min(count, nbits - offset)
        block = self.get_raw_block(block_index)
        self.set_block(block_index, _with_bits(block, offset, first, value))
        if first < count:
            block = self.get_raw_block(block_index + 1)
            self.set_block(block_index + 1, _with_bits(block, 0, count - first, value >> first))


class BitsPush(BitsMut):
    """A bit sequence that can grow and shrink at its end."""

    @abstractmethod
    def push_bit(self, value):
        """Append one bit."""

    @abstractmethod
    def pop_bit(self):
        """Remove and return the last bit, or None if there are none."""

    def align_block(self, value):
        """Pad with `value` until the length is a whole number of blocks."""
        while self.bit_len() % self.block_bits:
            self.push_bit(value)

    def push_block(self, value):
        """Align with zeroes, then append a whole block."""
        self.align_block(False)
        for offset in range(self.block_bits):
            self.push_bit(bool((value >> offset) & 1))


class BlockArray(BitsMut):
    """A fixed-length list of integer blocks viewed as bits."""

    def __init__(self, blocks, block_bits=DEFAULT_BLOCK_BITS):
        if block_bits <= 0:
            raise ValueError("block_bits must be positive")
        self.block_bits = block_bits
        self.blocks = list(blocks)
        for block in self.blocks:
            self._check_value(block)

    def _check_value(self, value):
        if not 0 <= value <= low_mask(self.block_bits):
            raise ValueError(f"block value {value} does not fit in {self.block_bits} bits")

    def bit_len(self):
        return mul_nbits(self.block_bits, len(self.blocks))

    def block_len(self):
        return len(self.blocks)

    def get_block(self, position):
        _check_index(position, len(self.blocks), "BlockArray.get_block")
        return self.blocks[position]

    def set_block(self, position, value):
        _check_index(position, len(self.blocks), "BlockArray.set_block")
        self._check_value(value)
        self.blocks[position] = value

    def __repr__(self):
        return f"BlockArray({self.blocks!r}, block_bits={self.block_bits})"


class BoolArray(BitsMut):
    """A fixed-length list of booleans viewed as bits in 8-bit blocks."""

    block_bits = 8

    def __init__(self, values):
        self.values = [bool(value) for value in values]

    def bit_len(self):
        return len(self.values)

    def get_bit(self, position):
        _check_index(position, len(self.values), "BoolArray.get_bit")
        return self.values[position]

    def set_bit(self, position, value):
        _check_index(position, len(self.values), "BoolArray.set_bit")
        self.values[position] = bool(value)

    def __repr__(self):
        return f"BoolArray({self.values!r})"