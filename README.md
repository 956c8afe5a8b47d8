# smallcombi

Small combinatorial objects for experiments in algebraic combinatorics and
semigroup theory. Everything is pure Python with no dependencies, and every
object is immutable.

The package has three modules:

- `smallcombi.epu8`: functions on vectors of 16 unsigned bytes, stored as
  tuples of 16 integers in `0..255`. Any sequence of 16 such integers is
  accepted, and a `ValueError` is raised for the wrong length or an entry
  that is out of range.
- `smallcombi.perm_generic`: `PermGeneric`, a permutation of `0 .. size-1`
  for any size.
- `smallcombi.bmat8`: `BMat8`, a boolean matrix of dimension up to 8 x 8
  packed into a 64-bit integer.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Byte vectors: `smallcombi.epu8`

```python
from smallcombi.epu8 import make_epu8, sorted16, partial_sums, eval16, identity

v = make_epu8([5, 5, 2, 5, 1, 6, 12, 4, 0, 3, 2, 11, 12, 13, 14, 15], 0)
sorted16(v)          # entries in increasing order
partial_sums(v)      # (5, 10, 12, 17, 18, 24, 36, 40, 40, 43, 45, 56, 68, 81, 95, 110)
eval16(v)            # (1, 1, 2, 1, 1, 3, 1, 0, 0, 0, 0, 1, 2, 1, 1, 1)
identity()           # (0, 1, 2, ..., 15)
```

- Construction: `make_epu8(values, fill)` puts `values` first and fills the
  rest with `fill`. `identity()` and `rev()` give `0..15` and `15..0`.
  `random_epu8(bnd)` draws entries from `range(bnd)`, for `0 < bnd <= 256`.
- Display: `to_string(a)` renders `{ 0, 1,..., 15}` with width-2 entries.
- Tests and comparison: `is_all_zero`, `is_all_one`, `equal`, `not_equal`,
  `less` (lexicographic), and `less_partial(a, b, k)`. The last compares the
  first `k` entries and returns a negative, zero or positive integer.
- Rearranging: `permuted(a, b)` works like a byte shuffle. Entry `i` is
  `a[b[i] & 15]`, or 0 when `b[i]` has its high bit set. The module also
  has `shifted_right`, `shifted_left` and `reverted`.
- Entry-wise: `epu8_min`, `epu8_max`, `popcount16`.
- Sorting:
  - `is_sorted`, `sorted16`, `revsorted`.
  - `sorted8` and `revsorted8` sort each half separately.
  - `sort_perm(a)` and `sort8_perm(a)` return `(sorted_vector, perm)` with
    `permuted(a, perm) == sorted_vector`.
  - `merge(a, b)` returns two sorted vectors `(lo, hi)` with
    `lo[15] <= hi[0]`.
- Reductions: `horiz_sum` and `partial_sums` (both modulo 256), `horiz_max`,
  `partial_max`, `horiz_min`, `partial_min`.
- Counting: `eval16(v)` gives the number of times each value `0..15` occurs.
  `remove_dups(a, repl)` replaces each entry equal to the one before it by
  `repl`.
- Searching:
  - `first_diff(a, b, bound)` and `last_diff(a, b, bound)`.
  - `first_zero`, `last_zero`, `first_non_zero`, `last_non_zero`, each
    taking a bound `bnd`.
  - All of these return 16 when nothing is found.
  - `permutation_of(a, b)` gives, for each `b[i]`, its position in `a` if
    it occurs there exactly once, and `0xFF` otherwise.
- Classification:
  - `is_transformation(v, k)` and `is_permutation(v, k)`.
  - `is_partial_transformation(v, k)` and `is_partial_permutation(v, k)`,
    where undefined points are `0xFF`.
  - Points from `k` on must be fixed; `k` defaults to 16.

## Permutations: `smallcombi.perm_generic`

```python
from smallcombi.perm_generic import PermGeneric

p = PermGeneric(5, [1, 2, 3, 4, 0])
p.length()                               # number of inversions: 4
p.lehmer()                               # (1, 1, 1, 1, 0)
p.nb_cycles()                            # 1
p * p.inverse() == PermGeneric.one(5)    # True
```

- Construction:
  - `PermGeneric(size, values)` fixes every point after the values given.
    It raises `ValueError` when the result is not a permutation.
  - `PermGeneric.one(size)` is the identity.
  - `PermGeneric.elementary_transposition(size, i)` exchanges `i` and
    `i + 1`.
  - `PermGeneric.random(size)` is uniformly random.
- The product `p * q` applies `p` first, so `(p * q)[i] == q[p[i]]`.
- Statistics: `inverse()`, `lehmer()`, `length()`, `nb_descents()`,
  `nb_cycles()`.
- `left_weak_leq(other)` compares in the left weak order.
- Permutations support `len`, indexing, iteration, equality and hashing.

## Boolean matrices: `smallcombi.bmat8`

```python
from smallcombi.bmat8 import BMat8

m = BMat8.from_rows([[1, 1], [0, 1]])
m.transpose()
m * m                  # boolean product
m.row_space_size()     # 3, the zero row included
print(m)               # eight lines of eight 0/1 characters
```

- Construction:
  - `BMat8(data)` takes a 64-bit integer read row by row from the most
    significant bit, so entry `(0, 0)` is bit 63.
  - `BMat8.from_rows(rows)` takes up to 8 rows of up to 8 booleans.
  - `BMat8.one(dim)` has 1s on the first `dim` diagonal entries.
  - `BMat8.random(dim)` only sets entries in the top-left `dim` x `dim`
    block.
- Entries:
  - `m[i, j]` reads an entry.
  - `m.with_entry(i, j, val)` returns a modified copy.
  - `to_int()`, `to_array()` and `rows()` give the integer, the 8 x 8
    booleans and the rows as bytes.
- Operations:
  - `|` is the entry-wise or.
  - `*` is the boolean product.
  - `mult_transpose(other)` multiplies by the transpose of `other`.
  - `transpose()`.
  - Ordering compares by the integer value.
- Row and column spaces:
  - `row_space_basis()` and `col_space_basis()` give canonical bases.
  - `nr_rows()` counts the non-zero rows.
  - `row_space_bitset()` returns a 256-bit integer with a bit for each
    element of the row space.
  - `row_space_size()` counts the elements of the row space.
  - `row_space_included(other)` and
    `BMat8.row_space_included2(a1, b1, a2, b2)` test inclusion.
  - `row_space_mask(vects)` marks with `0xFF` which of 16 row vectors lie
    in the row space.
- Permutations:
  - Each takes a permutation of `0..7`, or a 16-entry vector that fixes
    `8..15`.
  - `row_permuted(p)` and `col_permuted(p)`.
  - `BMat8.row_permutation_matrix(p)` and `BMat8.col_permutation_matrix(p)`.
  - `right_perm_action_on_basis(other)` gives, for each row of this basis,
    its position among the rows of `self * other`.

## What the package does not do

- It has no command-line tool; it is a library only.
- Byte vectors are plain tuples. There are no dedicated classes for
  transformations, partial transformations or partial permutations on 16
  points, and no product for them. `smallcombi.epu8` only checks whether a
  vector is one of these.
- Boolean matrices are limited to 8 x 8.
- Everything is computed in plain Python, with no vectorised arithmetic.

## Running the tests

```
pytest
```