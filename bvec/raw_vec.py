"""A packed, growable bit vector backed by integer blocks."""

from __future__ import annotations

from .core import (
    DEFAULT_BLOCK_BITS,
    BitsPush,
    ceil_div_nbits,
    get_masked_block,
    low_mask,
    mul_nbits,
)
from .storage import BlockStore


def _check_block_bits(block_bits):
    if block_bits <= 0:
        raise ValueError("block_bits must be positive")


class RawBitVec(BitsPush):
    """A growable bit vector stored in blocks of `block_bits` bits.

    Capacity is managed explicitly, mirroring a growable array: pushing
    may reserve extra room, and `shrink_to_fit` gives it back.
    """

    def __init__(self, block_bits=DEFAULT_BLOCK_BITS):
        _check_block_bits(block_bits)
        self.block_bits = block_bits
        self._bits = BlockStore(0, 0)
        self._len = 0

    @classmethod
    def _from_block(cls, init, nblocks, block_bits):
        result = cls(block_bits)
        result._bits = BlockStore(init, nblocks)
        result._len = mul_nbits(block_bits, nblocks)
        return result

    @classmethod
    def new_fill(cls, value, length, block_bits=DEFAULT_BLOCK_BITS):
        """A vector of `length` bits, all equal to `value`."""
        _check_block_bits(block_bits)
        if length < 0:
            raise ValueError("length must not be negative")
        init = low_mask(block_bits) if value else 0
        result = cls._from_block(init, ceil_div_nbits(block_bits, length), block_bits)
        result._len = length
        return result

    @classmethod
    def with_capacity(cls, nbits, block_bits=DEFAULT_BLOCK_BITS):
        """An empty vector with room for at least `nbits` bits."""
        _check_block_bits(block_bits)
        return cls.with_block_capacity(ceil_div_nbits(block_bits, nbits), block_bits)

    @classmethod
    def with_block_capacity(cls, nblocks, block_bits=DEFAULT_BLOCK_BITS):
        """An empty vector with room for `nblocks` blocks."""
        _check_block_bits(block_bits)
        if nblocks < 0:
            raise ValueError("nblocks must not be negative")
        result = cls._from_block(0, nblocks, block_bits)
        result._len = 0
        return result

    def __len__(self):
        return self._len

    def bit_len(self):
        return self._len

    def block_len(self):
        return ceil_div_nbits(self.block_bits, self._len)

    def capacity(self):
        """The number of bits that fit without reallocating."""
        return mul_nbits(self.block_bits, self.block_capacity())

    def block_capacity(self):
        """The number of blocks that fit without reallocating."""
        return len(self._bits)

    def _reallocate(self, block_cap):
        self._bits = self._bits.clone_resize(self.block_len(), block_cap)

    def reserve(self, additional):
        """Make room for at least `additional` more bits, possibly more."""
        old_cap = self.capacity()
        if self._len + additional > old_cap:
            self.reserve_exact(max(additional, old_cap))

    def block_reserve(self, additional):
        """Make room for at least `additional` more blocks, possibly more."""
        old_cap = self.block_capacity()
        if self.block_len() + additional > old_cap:
            self.block_reserve_exact(max(additional, old_cap))

    def reserve_exact(self, additional):
        """Make room for `additional` more bits, rounded up to whole blocks."""
        new_cap = ceil_div_nbits(self.block_bits, self._len + additional)
        if new_cap > self.block_capacity():
            self._reallocate(new_cap)

    def block_reserve_exact(self, additional):
        """Make room for exactly `additional` blocks beyond those in use."""
        new_cap = self.block_len() + additional
        if new_cap > self.block_capacity():
            self._reallocate(new_cap)

    def shrink_to_fit(self):
        """Drop unused capacity."""
        block_len = self.block_len()
        if self.block_capacity() > block_len:
            self._reallocate(block_len)

    def into_blocks(self):
        """All stored blocks as a list, excess capacity included."""
        return self._bits.to_list()

    def truncate(self, length):
        """Keep only the first `length` bits; no effect if already shorter."""
        if length < self._len:
            self._len = max(0, length)

    def resize(self, length, value):
        """Change the length to `length`, filling new bits with `value`."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length < self._len:
            self._len = length
        elif length > self._len:
            self.reserve(length - self._len)
            self.align_block(value)
            block = low_mask(self.block_bits) if value else 0
            while self._len < length:
                self.push_block(block)
            self._len = length

    def get(self, position):
        """The bit at `position`."""
        return self.get_bit(position)

    def set(self, position, value):
        """Set the bit at `position` to `value`."""
        self.set_bit(position, value)

    def push(self, value):
        """Append one bit."""
        self.reserve(1)
        old_len = self._len
        self._len = old_len + 1
        self.set_bit(old_len, value)

    def pop(self):
        """Remove and return the last bit, or None if empty."""
        if self._len == 0:
            return None
        new_len = self._len - 1
        result = self.get_bit(new_len)
        self._len = new_len
        return result

    def push_bit(self, value):
        self.push(value)

    def pop_bit(self):
        return self.pop()

    def clear(self):
        """Remove all bits, keeping the capacity."""
        self._len = 0

    def is_empty(self):
        return self._len == 0

    def get_bit(self, position):
        if not 0 <= position < self._len:
            raise IndexError(f"{type(self).__name__}.get_bit: out of bounds")
        block_index, offset = divmod(position, self.block_bits)
        return bool((self._bits.get_block(block_index) >> offset) & 1)

    def get_block(self, position):
        return get_masked_block(self, position)

    def get_raw_block(self, position):
        if not 0 <= position < self.block_len():
            raise IndexError(f"{type(self).__name__}.get_block: out of bounds")
        return self._bits.get_block(position)

    def set_bit(self, position, value):
        if not 0 <= position < self._len:
            raise IndexError(f"{type(self).__name__}.set_bit: out of bounds")
        block_index, offset = divmod(position, self.block_bits)
        block = self._bits.get_block(block_index)
        if value:
            block |= 1 << offset
        else:
            block &= ~(1 << offset)
        self._bits.set_block(block_index, block)

    def set_block(self, position, value):
        if not 0 <= position < self.block_len():
            raise IndexError(f"{type(self).__name__}.set_block: out of bounds")
        if not 0 <= value <= low_mask(self.block_bits):
            raise ValueError(f"block value {value} does not fit in {self.block_bits} bits")
        self._bits.set_block(position, value)

    def align_block(self, value):
        keep_bits = self._len % self.block_bits
        if keep_bits:
            last_index = self.block_len() - 1
            old_last = self._bits.get_block(last_index)
            keep_mask = low_mask(keep_bits)
            if value:
                new_last = old_last | (low_mask(self.block_bits) & ~keep_mask)
            else:
                new_last = old_last & keep_mask
            self._bits.set_block(last_index, new_last)
            self._len += self.block_bits - keep_bits

    def push_block(self, value):
        self.align_block(False)
        self.block_reserve(1)
        self._len += self.block_bits
        self.set_block(self.block_len() - 1, value)

    def __repr__(self):
        bits = "".join("1" if self.get_bit(i) else "0" for i in range(self._len))
        return f"{type(self).__name__}('{bits}', block_bits={self.block_bits})"