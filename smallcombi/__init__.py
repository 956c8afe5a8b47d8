"""Byte vectors, permutations of any size and 8 x 8 boolean matrices for combinatorics."""

__version__ = "0.1.0"
__all__ = ["epu8", "perm_generic", "bmat8"]