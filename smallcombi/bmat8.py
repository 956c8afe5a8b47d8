"""Boolean matrices of dimension up to 8 x 8, packed into a 64-bit integer."""

from __future__ import annotations

import random as _random
from collections.abc import Sequence
from functools import total_ordering

from smallcombi.epu8 import Epu8, is_permutation, permutation_of

_DIM = 8
_MASK64 = (1 << 64) - 1

_ONES = (
    0x0000000000000000,
    0x8000000000000000,
    0x8040000000000000,
    0x8040200000000000,
    0x8040201000000000,
    0x8040201008000000,
    0x8040201008040000,
    0x8040201008040200,
    0x8040201008040201,
)


def _check_index(i: int, j: int) -> None:
    if not (0 <= i < _DIM and 0 <= j < _DIM):
        raise IndexError(f"entry ({i}, {j}) is outside an 8 x 8 matrix")


def _bit(i: int, j: int) -> int:
    return 1 << (63 - _DIM * i - j)


def _perm8(p: Sequence[int]) -> tuple[int, ...]:
    """Validate a permutation of 0..7, given alone or fixing 8..15 in 16 entries."""
    values = tuple(p)
    if len(values) == 16:
        if not is_permutation(values, _DIM):
            raise ValueError(f"{values!r} is not a permutation fixing 8..15")
        return values[:_DIM]
    if len(values) == _DIM and sorted(values) == list(range(_DIM)):
        return values
    raise ValueError(f"{values!r} is not a permutation of range(8)")


@total_ordering
class BMat8:
    """An immutable boolean matrix stored as 8 x 8 bits.

    Rows are read left to right and top to bottom from the most significant
    bit, so entry ``(0, 0)`` is bit 63. Entries outside a smaller matrix are 0.
    """

    __slots__ = ("_data",)

    def __init__(self, data: int = 0) -> None:
        if not 0 <= data <= _MASK64:
            raise ValueError(f"{data!r} does not fit in 64 bits")
        self._data = data

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> BMat8:
        """Build a matrix whose rows are the given boolean vectors."""
        rows = [list(r) for r in rows]
        if len(rows) > _DIM:
            raise ValueError(f"at most {_DIM} rows are allowed, got {len(rows)}")
        data = 0
        for i, row in enumerate(rows):
            if len(row) > _DIM:
                raise ValueError(f"row {i} has {len(row)} entries, at most {_DIM}")
            for j, entry in enumerate(row):
                if entry:
                    data |= _bit(i, j)
        return cls(data)

    @classmethod
    def one(cls, dim: int = _DIM) -> BMat8:
        """The matrix with 1s on the first ``dim`` diagonal entries."""
        if not 0 <= dim <= _DIM:
            raise ValueError(f"dimension must be between 0 and {_DIM}, got {dim}")
        return cls(_ONES[dim])

    @classmethod
    def random(cls, dim: int = _DIM) -> BMat8:
        """A random matrix whose non-zero entries lie in the top-left ``dim`` x ``dim``."""
        if not 0 < dim <= _DIM:
            raise ValueError(f"dimension must be between 1 and {_DIM}, got {dim}")
        row_mask = ((1 << dim) - 1) << (_DIM - dim)
        mask = 0
        for i in range(dim):
            mask |= row_mask << (_DIM * (_DIM - 1 - i))
        return cls(_random.getrandbits(64) & mask)

    def __getitem__(self, key: tuple[int, int]) -> bool:
        i, j = key
        _check_index(i, j)
        return bool(self._data & _bit(i, j))

    def with_entry(self, i: int, j: int, val: bool) -> BMat8:
        """A copy of this matrix with entry ``(i, j)`` set to ``val``."""
        _check_index(i, j)
        bit = _bit(i, j)
        return BMat8(self._data | bit if val else self._data & ~bit)

    def to_int(self) -> int:
        """The 64-bit integer holding the entries."""
        return self._data

    def to_array(self) -> tuple[tuple[bool, ...], ...]:
        """The entries as 8 rows of 8 booleans."""
        return tuple(
            tuple(bool(row >> (_DIM - 1 - j) & 1) for j in range(_DIM))
            for row in self.rows()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BMat8):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: BMat8) -> bool:
        if not isinstance(other, BMat8):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"BMat8(0x{self._data:016x})"

    def __or__(self, other: BMat8) -> BMat8:
        if not isinstance(other, BMat8):
            return NotImplemented
        return BMat8(self._data | other._data)

    def transpose(self) -> BMat8:
        """The transposed matrix."""
        x = self._data
        y = (x ^ (x >> 7)) & 0x00AA00AA00AA00AA
        x ^= y ^ (y << 7)
        y = (x ^ (x >> 14)) & 0x0000CCCC0000CCCC
        x ^= y ^ (y << 14)
        y = (x ^ (x >> 28)) & 0x00000000F0F0F0F0
        x ^= y ^ (y << 28)
        return BMat8(x & _MASK64)

    def mult_transpose(self, other: BMat8) -> BMat8:
        """The boolean product of this matrix with the transpose of ``other``."""
        mine, theirs = self.rows(), other.rows()
        data = 0
        for i, a in enumerate(mine):
            for j, b in enumerate(theirs):
                if a & b:
                    data |= _bit(i, j)
        return BMat8(data)

    def __mul__(self, other: BMat8) -> BMat8:
        if not isinstance(other, BMat8):
            return NotImplemented
        return self.mult_transpose(other.transpose())

    def rows(self) -> tuple[int, ...]:
        """The 8 rows as bytes, the most significant bit being column 0."""
        return tuple(
            (self._data >> (_DIM * (_DIM - 1 - i))) & 0xFF for i in range(_DIM)
        )

    @classmethod
    def _from_row_bytes(cls, rows: Sequence[int]) -> BMat8:
        data = 0
        for row in rows:
            data = (data << _DIM) | row
        return cls(data << (_DIM * (_DIM - len(rows))))

    def row_space_basis(self) -> BMat8:
        """A canonical basis of the row space, rows sorted decreasingly."""
        distinct = {r for r in self.rows() if r}
        basis = []
        for r in distinct:
            union = 0
            for s in distinct:
                if s != r and s | r == r:
                    union |= s
            if union != r:
                basis.append(r)
        basis.sort(reverse=True)
        return self._from_row_bytes(basis + [0] * (_DIM - len(basis)))

    def col_space_basis(self) -> BMat8:
        """A canonical basis of the column space."""
        return self.transpose().row_space_basis().transpose()

    def nr_rows(self) -> int:
        """The number of non-zero rows."""
        return sum(1 for r in self.rows() if r)

    def row_space_bitset(self) -> int:
        """The row space as a 256-bit integer: bit ``v`` is set when ``v`` is in it."""
        space = {0}
        for r in self.row_space_basis().rows():
            if r:
                space |= {s | r for s in space}
        return sum(1 << v for v in space)

    def row_space_size(self) -> int:
        """The number of elements of the row space, the zero row included."""
        return bin(self.row_space_bitset()).count("1")

    def _contains_row(self, v: int) -> bool:
        union = 0
        for r in self.rows():
            if r | v == v:
                union |= r
        return union == v

    def row_space_included(self, other: BMat8) -> bool:
        """Whether the row space of this matrix lies within that of ``other``."""
        return all(other._contains_row(r) for r in self.rows())

    @staticmethod
    def row_space_included2(
        a1: BMat8, b1: BMat8, a2: BMat8, b2: BMat8
    ) -> tuple[bool, bool]:
        """Whether ``a1`` is included in ``b1`` and ``a2`` in ``b2``, row-space-wise."""
        return a1.row_space_included(b1), a2.row_space_included(b2)

    def row_space_mask(self, vects: Sequence[int]) -> Epu8:
        """For 16 row vectors, ``0xFF`` where a vector lies in the row space, else 0."""
        values = tuple(vects)
        if len(values) != 16 or not all(0 <= v <= 0xFF for v in values):
            raise ValueError("expected 16 unsigned bytes")
        return tuple(0xFF if self._contains_row(v) else 0 for v in values)

    def row_permuted(self, p: Sequence[int]) -> BMat8:
        """The matrix whose row ``i`` is row ``p[i]`` of this one."""
        perm = _perm8(p)
        rows = self.rows()
        return self._from_row_bytes([rows[k] for k in perm])

    def col_permuted(self, p: Sequence[int]) -> BMat8:
        """The matrix whose column ``j`` is column ``p[j]`` of this one."""
        return self.transpose().row_permuted(p).transpose()

    @classmethod
    def row_permutation_matrix(cls, p: Sequence[int]) -> BMat8:
        """The identity with its rows permuted by ``p``."""
        return cls.one().row_permuted(p)

    @classmethod
    def col_permutation_matrix(cls, p: Sequence[int]) -> BMat8:
        """The identity with its columns permuted by ``p``."""
        return cls.one().col_permuted(p)

    def right_perm_action_on_basis(self, other: BMat8) -> Epu8:
        """Where each row of this basis lands among the rows of ``self * other``.

        Entry ``i`` is the position of row ``i`` of ``self`` among the rows of
        the product; zero rows and points 8..15 are fixed.
        """
        x = self.rows() + (0,) * _DIM
        y = (self * other).rows() + (0,) * _DIM
        found = permutation_of(y, x)
        return tuple(f if v else i for i, (v, f) in enumerate(zip(x, found)))

    def __str__(self) -> str:
        return "".join(
            "".join("1" if e else "0" for e in row) + "\n" for row in self.to_array()
        )