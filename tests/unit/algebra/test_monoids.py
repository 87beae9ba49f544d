"""
Unit tests for the stock `Monoid` instances.

Each instance is checked against the associativity and identity laws on a
few sample values; the numpy instance is checked element-wise.
"""
import numpy as np
import pytest

from nested_pairs.algebra.monoids import ALL, ANY, PRODUCT, STRING, SUM, TUPLE, Monoid, dual, ndarray_sum

LAW_CASES = [
    (SUM, [0, 3, -2, 7]),
    (PRODUCT, [1, 2, 5, -1]),
    (STRING, ["", "a", "bc", "d"]),
    (TUPLE, [(), (1,), (2, 3), ("x",)]),
    (ALL, [True, False, True]),
    (ANY, [False, True, False]),
]


@pytest.mark.parametrize("monoid, samples", LAW_CASES, ids=lambda case: getattr(case, "name", None))
def test_associativity(monoid, samples):
    for x in samples:
        for y in samples:
            for z in samples:
                left = monoid.combine(monoid.combine(x, y), z)
                right = monoid.combine(x, monoid.combine(y, z))
                assert left == right


@pytest.mark.parametrize("monoid, samples", LAW_CASES, ids=lambda case: getattr(case, "name", None))
def test_identity(monoid, samples):
    for x in samples:
        assert monoid.combine(monoid.identity, x) == x
        assert monoid.combine(x, monoid.identity) == x


def test_concat_folds_left_from_identity():
    assert STRING.concat(["a", "b", "c"]) == "abc"
    assert SUM.concat([]) == 0
    assert TUPLE.concat([(1,), (2,), (3,)]) == (1, 2, 3)


def test_dual_flips_operands():
    flipped = dual(STRING)
    assert flipped.combine("a", "b") == "ba"
    assert flipped.identity == ""
    assert flipped.concat(["a", "b", "c"]) == "cba"


def test_custom_monoid_repr_uses_name():
    max_monoid = Monoid(max, float("-inf"), "max")
    assert repr(max_monoid) == "Monoid(max)"
    assert max_monoid.concat([3, 9, 1]) == 9


def test_ndarray_sum_identity_and_combination():
    """
    The numpy monoid adds arrays element-wise and its zero identity is
    read-only.
    """
    monoid = ndarray_sum(3)
    x = np.array([1.0, 2.0, 3.0])
    y = np.array([0.5, -2.0, 4.0])

    np.testing.assert_array_equal(monoid.combine(monoid.identity, x), x)
    np.testing.assert_array_equal(monoid.combine(x, y), np.array([1.5, 0.0, 7.0]))
    np.testing.assert_array_equal(monoid.concat([x, y, x]), np.array([2.5, 2.0, 10.0]))
    assert monoid.identity.shape == (3,)
    assert not monoid.identity.flags.writeable


def test_ndarray_sum_multidimensional_dtype():
    monoid = ndarray_sum((2, 2), dtype=np.int64)
    assert monoid.identity.dtype == np.int64
    total = monoid.concat([np.eye(2, dtype=np.int64)] * 3)
    np.testing.assert_array_equal(total, 3 * np.eye(2, dtype=np.int64))
