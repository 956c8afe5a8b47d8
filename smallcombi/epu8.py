"""Vectors of sixteen unsigned bytes and the combinatorial operations on them.

A vector is represented as a tuple of 16 integers in ``range(256)``.
Every function accepts any sequence of 16 such integers and returns tuples.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

Epu8 = tuple[int, ...]

SIZE = 16
FULL = 0xFF

#: A prime number good for hashing.
PRIME = 0x9E3779B97F4A7BB9


def _vec(a: Iterable[int]) -> Epu8:
    """Validate ``a`` and return it as a tuple of 16 bytes."""
    values = tuple(a)
    if len(values) != SIZE:
        raise ValueError(f"expected {SIZE} entries, got {len(values)}")
    for x in values:
        if not 0 <= x <= FULL:
            raise ValueError(f"entry {x!r} is not an unsigned byte")
    return values


def make_epu8(values: Sequence[int] = (), fill: int = 0) -> Epu8:
    """Build a vector starting with ``values`` and padded with ``fill``."""
    values = tuple(values)
    if len(values) > SIZE:
        raise ValueError(f"at most {SIZE} values are allowed, got {len(values)}")
    return _vec(values + (fill,) * (SIZE - len(values)))


def identity() -> Epu8:
    """The vector ``(0, 1, ..., 15)``."""
    return tuple(range(SIZE))


def rev() -> Epu8:
    """The vector ``(15, 14, ..., 0)``."""
    return tuple(reversed(range(SIZE)))


def to_string(a: Sequence[int]) -> str:
    """Render a vector as ``{ a0, a1,..., a15}`` with width-2 entries."""
    return "{" + ",".join(f"{x:2d}" for x in _vec(a)) + "}"


def is_all_zero(a: Sequence[int]) -> bool:
    """Whether every entry is zero."""
    return not any(_vec(a))


def is_all_one(a: Sequence[int]) -> bool:
    """Whether every entry is ``0xFF``."""
    return all(x == FULL for x in _vec(a))


def equal(a: Sequence[int], b: Sequence[int]) -> bool:
    """Entry-wise equality."""
    return _vec(a) == _vec(b)


def not_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    """Entry-wise inequality."""
    return not equal(a, b)


def permuted(a: Sequence[int], b: Sequence[int]) -> Epu8:
    """Byte shuffle: entry ``i`` is ``a[b[i] & 15]``, or 0 if ``b[i]`` has its high bit set."""
    a, b = _vec(a), _vec(b)
    return tuple(0 if idx & 0x80 else a[idx & 0x0F] for idx in b)


def shifted_right(a: Sequence[int]) -> Epu8:
    """Move every entry one place towards higher indices, inserting 0 at index 0."""
    a = _vec(a)
    return (0,) + a[:-1]


def shifted_left(a: Sequence[int]) -> Epu8:
    """Move every entry one place towards lower indices, inserting 0 at index 15."""
    a = _vec(a)
    return a[1:] + (0,)


def reverted(a: Sequence[int]) -> Epu8:
    """The vector read backwards."""
    return permuted(a, rev())


def epu8_min(a: Sequence[int], b: Sequence[int]) -> Epu8:
    """Entry-wise minimum."""
    return tuple(map(min, _vec(a), _vec(b)))


def epu8_max(a: Sequence[int], b: Sequence[int]) -> Epu8:
    """Entry-wise maximum."""
    return tuple(map(max, _vec(a), _vec(b)))


def is_sorted(a: Sequence[int]) -> bool:
    """Whether the entries are non-decreasing."""
    a = _vec(a)
    return all(x <= y for x, y in zip(a, a[1:]))


def sorted16(a: Sequence[int]) -> Epu8:
    """The entries sorted increasingly."""
    return tuple(sorted(_vec(a)))


def sorted8(a: Sequence[int]) -> Epu8:
    """Each half of the vector sorted increasingly."""
    a = _vec(a)
    return tuple(sorted(a[:8])) + tuple(sorted(a[8:]))


def revsorted(a: Sequence[int]) -> Epu8:
    """The entries sorted decreasingly."""
    return tuple(sorted(_vec(a), reverse=True))


def revsorted8(a: Sequence[int]) -> Epu8:
    """Each half of the vector sorted decreasingly."""
    a = _vec(a)
    return tuple(sorted(a[:8], reverse=True)) + tuple(sorted(a[8:], reverse=True))


def sort_perm(a: Sequence[int]) -> tuple[Epu8, Epu8]:
    """Return ``(sorted_a, perm)`` where ``permuted(a, perm) == sorted_a``."""
    a = _vec(a)
    perm = tuple(sorted(range(SIZE), key=a.__getitem__))
    return tuple(a[i] for i in perm), perm


def sort8_perm(a: Sequence[int]) -> tuple[Epu8, Epu8]:
    """Sort each half; return ``(result, perm)`` with ``permuted(a, perm) == result``."""
    a = _vec(a)
    perm = tuple(sorted(range(8), key=a.__getitem__)) + tuple(
        sorted(range(8, SIZE), key=a.__getitem__)
    )
    return tuple(a[i] for i in perm), perm


def merge(a: Sequence[int], b: Sequence[int]) -> tuple[Epu8, Epu8]:
    """Merge two vectors: both results are sorted and ``lo[15] <= hi[0]``."""
    merged = sorted(_vec(a) + _vec(b))
    return tuple(merged[:SIZE]), tuple(merged[SIZE:])


def permutation_of(a: Sequence[int], b: Sequence[int]) -> Epu8:
    """Entry ``i`` is the position of ``b[i]`` in ``a`` if it occurs there exactly once.

    Entries whose value does not occur exactly once in ``a`` are ``0xFF``.
    """
    a, b = _vec(a), _vec(b)
    positions: dict[int, list[int]] = {}
    for i, x in enumerate(a):
        positions.setdefault(x, []).append(i)
    result = []
    for x in b:
        found = positions.get(x, [])
        result.append(found[0] if len(found) == 1 else FULL)
    return tuple(result)


def random_epu8(bnd: int) -> Epu8:
    """A random vector with entries in ``range(bnd)``; requires ``0 < bnd <= 256``."""
    if not 0 < bnd <= 256:
        raise ValueError(f"bound must satisfy 0 < bnd <= 256, got {bnd}")
    return tuple(random.randrange(bnd) for _ in range(SIZE))


def remove_dups(a: Sequence[int], repl: int = 0) -> Epu8:
    """Replace each entry equal to the one before it by ``repl``.

    The entry before index 0 is taken to be 0, as in a right shift.
    """
    a = _vec(a)
    if not 0 <= repl <= FULL:
        raise ValueError(f"replacement {repl!r} is not an unsigned byte")
    return tuple(x if x != prev else repl for x, prev in zip(a, shifted_right(a)))


def _running(v: Sequence[int], op) -> Epu8:
    result = []
    acc = None
    for x in _vec(v):
        acc = x if acc is None else op(acc, x)
        result.append(acc)
    return tuple(result)


def horiz_sum(v: Sequence[int]) -> int:
    """Sum of the entries, modulo 256."""
    return sum(_vec(v)) & FULL


def partial_sums(v: Sequence[int]) -> Epu8:
    """Running sums of the entries, modulo 256."""
    return _running(v, lambda x, y: (x + y) & FULL)


def horiz_max(v: Sequence[int]) -> int:
    """Largest entry."""
    return max(_vec(v))


def partial_max(v: Sequence[int]) -> Epu8:
    """Running maxima of the entries."""
    return _running(v, max)


def horiz_min(v: Sequence[int]) -> int:
    """Smallest entry."""
    return min(_vec(v))


def partial_min(v: Sequence[int]) -> Epu8:
    """Running minima of the entries."""
    return _running(v, min)


def eval16(v: Sequence[int]) -> Epu8:
    """Entry ``i`` counts the occurrences of ``i`` in ``v``; entries above 15 are ignored."""
    v = _vec(v)
    return tuple(v.count(i) for i in range(SIZE))


def first_diff(a: Sequence[int], b: Sequence[int], bound: int = SIZE) -> int:
    """Smallest index below ``bound`` where ``a`` and ``b`` differ, or 16."""
    a, b = _vec(a), _vec(b)
    return next((i for i in range(min(bound, SIZE)) if a[i] != b[i]), SIZE)


def last_diff(a: Sequence[int], b: Sequence[int], bound: int = SIZE) -> int:
    """Largest index below ``bound`` where ``a`` and ``b`` differ, or 16."""
    a, b = _vec(a), _vec(b)
    return next(
        (i for i in reversed(range(min(bound, SIZE))) if a[i] != b[i]), SIZE
    )


def less(a: Sequence[int], b: Sequence[int]) -> bool:
    """Lexicographic comparison ``a < b``."""
    a, b = _vec(a), _vec(b)
    diff = first_diff(a, b)
    return diff < SIZE and a[diff] < b[diff]


def less_partial(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Compare the first ``k`` entries: negative, zero or positive."""
    a, b = _vec(a), _vec(b)
    diff = first_diff(a, b, k)
    return 0 if diff == SIZE else a[diff] - b[diff]


def _find(v: Sequence[int], bnd: int, pred, last: bool) -> int:
    v = _vec(v)
    indices = range(max(0, min(bnd, SIZE)))
    if last:
        indices = reversed(indices)
    return next((i for i in indices if pred(v[i])), SIZE)


def first_zero(v: Sequence[int], bnd: int = SIZE) -> int:
    """Index of the first zero entry below ``bnd``, or 16."""
    return _find(v, bnd, lambda x: x == 0, last=False)


def last_zero(v: Sequence[int], bnd: int = SIZE) -> int:
    """Index of the last zero entry below ``bnd``, or 16."""
    return _find(v, bnd, lambda x: x == 0, last=True)


def first_non_zero(v: Sequence[int], bnd: int = SIZE) -> int:
    """Index of the first non-zero entry below ``bnd``, or 16."""
    return _find(v, bnd, lambda x: x != 0, last=False)


def last_non_zero(v: Sequence[int], bnd: int = SIZE) -> int:
    """Index of the last non-zero entry below ``bnd``, or 16."""
    return _find(v, bnd, lambda x: x != 0, last=True)


def popcount16(v: Sequence[int]) -> Epu8:
    """Number of set bits of each entry."""
    return tuple(bin(x).count("1") for x in _vec(v))


def _fixed_beyond(v: Epu8, k: int) -> bool:
    diff = last_diff(v, identity())
    return diff == SIZE or diff < k


def is_partial_transformation(v: Sequence[int], k: int = SIZE) -> bool:
    """Entries are points below 16 or ``0xFF``, and points from ``k`` on are fixed."""
    v = _vec(v)
    return all(x < SIZE or x == FULL for x in v) and _fixed_beyond(v, k)


def is_transformation(v: Sequence[int], k: int = SIZE) -> bool:
    """Entries are points below 16, and points from ``k`` on are fixed."""
    v = _vec(v)
    return all(x < SIZE for x in v) and _fixed_beyond(v, k)


def is_partial_permutation(v: Sequence[int], k: int = SIZE) -> bool:
    """A partial transformation whose defined values are pairwise distinct."""
    v = _vec(v)
    return is_partial_transformation(v, k) and all(c <= 1 for c in eval16(v))


def is_permutation(v: Sequence[int], k: int = SIZE) -> bool:
    """A bijection of ``0..15`` fixing every point from ``k`` on."""
    v = _vec(v)
    return sorted16(v) == identity() and _fixed_beyond(v, k)