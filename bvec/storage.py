"""Block storage backing a growable bit vector."""

from __future__ import annotations


class BlockStore:
    """A fixed number of integer blocks, resized by copying."""

    def __init__(self, init=0, nblocks=0):
        self._blocks = [init] * nblocks

    def clone_resize(self, length, new_cap):
        """A new store of `new_cap` blocks holding a copy of the first `length` blocks.

        Blocks not copied are zero.
        """
        if length > len(self._blocks):
            raise IndexError("BlockStore.clone_resize: length exceeds stored blocks")
        result = BlockStore(0, new_cap)
        kept = self._blocks[: min(length, new_cap)]
        result._blocks[: len(kept)] = kept
        return result

    def __len__(self):
        return len(self._blocks)

    def _check(self, index):
        if not 0 <= index < len(self._blocks):
            raise IndexError("BlockStore: block index out of bounds")

    def get_block(self, index):
        self._check(index)
        return self._blocks[index]

    def set_block(self, index, value):
        self._check(index)
        self._blocks[index] = value

    def to_list(self):
        """A copy of all blocks, including unused capacity."""
        return list(self._blocks)

    def __repr__(self):
        return f"BlockStore({self._blocks!r})"