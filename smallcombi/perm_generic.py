"""Permutations of ``0 .. size-1`` of arbitrary size, held as tuples."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable, Iterator


class PermGeneric:
    """An immutable permutation of the points ``0 .. size-1``.

    Given fewer than ``size`` values, the remaining points are fixed.
    The product ``p * q`` applies ``p`` first and then ``q``, so that
    ``(p * q)[i] == q[p[i]]``.
    """

    __slots__ = ("_size", "_values")

    def __init__(self, size: int, values: Iterable[int] = ()) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        given = tuple(values)
        if len(given) > size:
            raise ValueError(f"at most {size} values are allowed, got {len(given)}")
        full = given + tuple(range(len(given), size))
        if sorted(full) != list(range(size)):
            raise ValueError(f"{full!r} is not a permutation of range({size})")
        self._size = size
        self._values = full

    @classmethod
    def one(cls, size: int) -> PermGeneric:
        """The identity permutation."""
        return cls(size)

    @classmethod
    def elementary_transposition(cls, size: int, i: int) -> PermGeneric:
        """The permutation exchanging ``i`` and ``i + 1``."""
        if not 0 <= i < size - 1:
            raise ValueError(f"transposition index {i} out of range for size {size}")
        values = list(range(size))
        values[i], values[i + 1] = i + 1, i
        return cls(size, values)

    @classmethod
    def random(cls, size: int) -> PermGeneric:
        """A uniformly random permutation."""
        values = list(range(size))
        _random.shuffle(values)
        return cls(size, values)

    @property
    def size(self) -> int:
        return self._size

    @property
    def values(self) -> tuple[int, ...]:
        return self._values

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, i: int) -> int:
        return self._values[i]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermGeneric):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash((PermGeneric, self._values))

    def __repr__(self) -> str:
        return f"PermGeneric({self._size}, {list(self._values)!r})"

    def __mul__(self, other: PermGeneric) -> PermGeneric:
        if not isinstance(other, PermGeneric):
            return NotImplemented
        if other._size != self._size:
            raise ValueError(
                f"cannot multiply permutations of sizes {self._size} and {other._size}"
            )
        return PermGeneric(self._size, (other._values[x] for x in self._values))

    def inverse(self) -> PermGeneric:
        """The inverse permutation."""
        result = [0] * self._size
        for i, x in enumerate(self._values):
            result[x] = i
        return PermGeneric(self._size, result)

    def lehmer(self) -> tuple[int, ...]:
        """Entry ``i`` counts the ``j > i`` with ``self[j] < self[i]``."""
        v = self._values
        return tuple(sum(1 for y in v[i + 1:] if y < x) for i, x in enumerate(v))

    def length(self) -> int:
        """The number of inversions."""
        return sum(self.lehmer())

    def nb_descents(self) -> int:
        """The number of ``i`` with ``self[i] > self[i + 1]``."""
        v = self._values
        return sum(1 for x, y in zip(v, v[1:]) if x > y)

    def nb_cycles(self) -> int:
        """The number of cycles, fixed points included."""
        seen = [False] * self._size
        cycles = 0
        for start in range(self._size):
            if seen[start]:
                continue
            j = start
            while not seen[j]:
                seen[j] = True
                j = self._values[j]
            cycles += 1
        return cycles

    def left_weak_leq(self, other: PermGeneric) -> bool:
        """Whether ``self`` is below ``other`` in the left weak order."""
        if other._size != self._size:
            raise ValueError(
                f"cannot compare permutations of sizes {self._size} and {other._size}"
            )
        v, w = self._values, other._values
        return not any(
            v[i] > v[j] and w[i] < w[j]
            for i in range(self._size)
            for j in range(i + 1, self._size)
        )