"""Packed, growable bit vectors with lazy slicing, logic and concatenation adapters."""

__version__ = "0.11.1"

__all__ = [
    "bit_vec",
    "bool_adapter",
    "concat",
    "core",
    "fill",
    "iter",
    "logic",
    "prims",
    "raw_vec",
    "slice_adapter",
    "storage",
]