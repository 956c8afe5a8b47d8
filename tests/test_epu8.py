import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from smallcombi.epu8 import (
    epu8_max,
    epu8_min,
    equal,
    eval16,
    first_diff,
    first_non_zero,
    first_zero,
    horiz_max,
    horiz_min,
    horiz_sum,
    identity,
    is_all_one,
    is_all_zero,
    is_partial_permutation,
    is_partial_transformation,
    is_permutation,
    is_sorted,
    is_transformation,
    last_diff,
    last_non_zero,
    last_zero,
    less,
    less_partial,
    make_epu8,
    merge,
    not_equal,
    partial_max,
    partial_min,
    partial_sums,
    permutation_of,
    permuted,
    popcount16,
    random_epu8,
    remove_dups,
    rev,
    reverted,
    revsorted,
    revsorted8,
    shifted_left,
    shifted_right,
    sort8_perm,
    sort_perm,
    sorted8,
    sorted16,
    to_string,
)

FF = 0xFF
EX = (5, 5, 2, 5, 1, 6, 12, 4, 0, 3, 2, 11, 12, 13, 14, 15)
EX_B = (5, 5, 2, 9, 1, 6, 12, 4, 0, 4, 4, 4, 12, 13, 14, 15)

vectors = st.lists(st.integers(0, 255), min_size=16, max_size=16).map(tuple)
small_vectors = st.lists(st.integers(0, 15), min_size=16, max_size=16).map(tuple)


def test_make_epu8_pads_with_fill():
    v = make_epu8((0, 1), 7)
    assert v[:2] == (0, 1)
    assert v[2:] == (7,) * 14
    assert make_epu8((), 3) == (3,) * 16


def test_make_epu8_rejects_bad_input():
    with pytest.raises(ValueError):
        make_epu8(tuple(range(17)), 0)
    with pytest.raises(ValueError):
        make_epu8((256,), 0)
    with pytest.raises(ValueError):
        equal((0,) * 15, (0,) * 15)


def test_identity_and_rev():
    assert identity() == tuple(range(16))
    assert rev() == tuple(range(15, -1, -1))
    assert reverted(identity()) == rev()


def test_to_string_format():
    text = to_string(identity())
    assert text.startswith("{ 0, 1,")
    assert text.endswith("15}")


def test_all_zero_all_one():
    assert is_all_zero(make_epu8((), 0))
    assert not is_all_zero(make_epu8((0, 1), 0))
    assert is_all_one(make_epu8((), FF))
    assert not is_all_one(make_epu8((0,), FF))


@given(vectors, vectors)
def test_equal_not_equal(a, b):
    assert equal(a, a)
    assert equal(a, b) != not_equal(a, b)


def test_permuted_identity_and_high_bit():
    assert permuted(EX, identity()) == EX
    assert permuted(EX, make_epu8((), 0x80)) == (0,) * 16
    assert permuted(EX, make_epu8((), 3)) == (5,) * 16


@given(vectors)
def test_shifts(a):
    r = shifted_right(a)
    l = shifted_left(a)
    assert r[0] == 0 and r[1:] == a[:-1]
    assert l[-1] == 0 and l[:-1] == a[1:]
    assert reverted(reverted(a)) == a


@given(vectors, vectors)
def test_min_max_bounds(a, b):
    lo, hi = epu8_min(a, b), epu8_max(a, b)
    assert all(x <= y for x, y in zip(lo, hi))
    assert sorted(lo + hi) == sorted(a + b)


@given(vectors)
def test_sorting(a):
    s = sorted16(a)
    assert is_sorted(s)
    assert revsorted(a) == reverted(s)
    s8 = sorted8(a)
    assert is_sorted(s8[:8] + (255,) * 8)
    assert list(s8[8:]) == sorted(s8[8:])
    assert revsorted8(a)[:8] == tuple(reversed(s8[:8]))


@given(vectors)
def test_sort_perm(a):
    s, perm = sort_perm(a)
    assert s == sorted16(a)
    assert is_permutation(perm)
    assert permuted(a, perm) == s


@given(vectors)
def test_sort8_perm(a):
    s, perm = sort8_perm(a)
    assert s == sorted8(a)
    assert permuted(a, perm) == s
    assert set(perm[:8]) == set(range(8))


@given(vectors, vectors)
def test_merge(a, b):
    lo, hi = merge(sorted16(a), sorted16(b))
    assert is_sorted(lo) and is_sorted(hi)
    assert lo[15] <= hi[0]
    assert sorted(lo + hi) == sorted(a + b)


def test_permutation_of():
    a = list(range(16))
    random.Random(7).shuffle(a)
    b = list(a)
    random.Random(11).shuffle(b)
    res = permutation_of(a, b)
    assert permuted(a, res) == tuple(b)


def test_permutation_of_missing_value():
    res = permutation_of(make_epu8((), 1), identity())
    assert res == (FF,) * 16


def test_random_epu8():
    v = random_epu8(5)
    assert all(0 <= x < 5 for x in v)
    with pytest.raises(ValueError):
        random_epu8(0)
    with pytest.raises(ValueError):
        random_epu8(257)


def test_remove_dups():
    assert remove_dups(make_epu8((), 1)) == make_epu8((1,), 0)
    assert remove_dups(make_epu8((1, 1), 0)) == make_epu8((1,), 0)
    assert remove_dups(make_epu8((1, 1, 2), 2), FF) == make_epu8((1, FF, 2), FF)


@given(vectors)
def test_remove_dups_keeps_distinct_values(a):
    s = sorted16(a)
    kept = {x for x in remove_dups(s, 0)}
    assert set(s) - {0} <= kept


def test_horiz_and_partial_examples():
    assert horiz_sum(EX) == 110
    assert partial_sums(EX) == (5, 10, 12, 17, 18, 24, 36, 40, 40, 43, 45, 56,
                                68, 81, 95, 110)
    assert horiz_max((5, 5, 2, 5, 1, 6, 12, 4, 0, 3, 2, 0, 12, 0, 0, 0)) == 12
    assert partial_max(EX) == (5, 5, 5, 5, 5, 6, 12, 12, 12, 12, 12, 12, 12,
                               13, 14, 15)
    assert horiz_min((5, 5, 2, 5, 1, 6, 12, 4, 1, 3, 2, 2, 12, 3, 4, 4)) == 1
    assert partial_min(EX) == (5, 5, 2, 2, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0)


@given(vectors)
def test_partial_agrees_with_horiz(v):
    assert partial_sums(v)[15] == horiz_sum(v)
    assert partial_max(v)[15] == horiz_max(v)
    assert partial_min(v)[15] == horiz_min(v)


def test_eval16_example():
    assert eval16(EX) == (1, 1, 2, 1, 1, 3, 1, 0, 0, 0, 0, 1, 2, 1, 1, 1)


@given(small_vectors)
def test_eval16_counts_everything(v):
    assert sum(eval16(v)) == 16


def test_first_last_diff_examples():
    assert first_diff(EX, EX_B) == 3
    assert first_diff(EX, EX_B, 3) == 16
    assert first_diff(EX, EX_B, 4) == 3
    assert first_diff(EX, EX_B, 7) == 3
    assert last_diff(EX, EX_B) == 11
    assert last_diff(EX, EX_B, 3) == 16
    assert last_diff(EX, EX_B, 4) == 3
    assert last_diff(EX, EX_B, 7) == 3


@given(vectors, vectors)
def test_less(a, b):
    assert less(a, b) == (a < b)
    assert not less(a, a)
    assert (less_partial(a, b, 16) < 0) == less(a, b)
    assert less_partial(a, a, 16) == 0


def test_less_partial_bound():
    assert less_partial(EX, EX_B, 3) == 0
    assert less_partial(EX, EX_B, 4) < 0
    assert less_partial(EX_B, EX, 16) > 0


def test_zero_searches():
    v = make_epu8((3, 0, 4, 0, 5), 7)
    assert first_zero(v, 16) == 1
    assert last_zero(v, 16) == 3
    assert first_zero(v, 1) == 16
    assert first_non_zero(v, 16) == 0
    assert last_non_zero(v, 16) == 15
    assert last_non_zero(make_epu8((1,), 0), 16) == 0
    assert first_non_zero(make_epu8((), 0), 16) == 16


def test_popcount16():
    assert popcount16(make_epu8((), FF)) == (8,) * 16
    assert popcount16(make_epu8((1, 2, 4, 8, 16, 32, 64, 128), 0))[:8] == (1,) * 8


def test_transformation_predicates():
    t = (2, 0, 5, 2, 1, 4) + tuple(range(6, 16))
    assert is_transformation(t, 6)
    assert is_transformation(t)
    assert not is_transformation(t, 5)
    assert not is_permutation(t)
    pt = (2, 0, 5, FF, FF, 4) + tuple(range(6, 16))
    assert is_partial_transformation(pt, 6)
    assert is_partial_permutation(pt, 6)
    assert not is_transformation(pt)
    p = (2, 0, 5, 3, 1, 4) + tuple(range(6, 16))
    assert is_permutation(p, 6)
    assert not is_permutation(p, 3)
    assert not is_partial_permutation(make_epu8((1, 1), FF))
    assert not is_partial_transformation(make_epu8((16,), FF))