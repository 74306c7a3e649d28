import math
import operator

import pytest

from linearkit.vector import Vector


def test_elements_round_trip():
    v = Vector([1, 2, 3])
    assert list(v) == [1.0, 2.0, 3.0]
    assert len(v) == 3
    assert v[1] == 2.0


def test_zeros():
    z = Vector.zeros(4)
    assert len(z) == 4
    assert all(x == 0.0 for x in z)


def test_zeros_negative_size():
    with pytest.raises(ValueError):
        Vector.zeros(-1)


def test_sum():
    assert Vector([1, 2, 3]).sum() == 6.0


def test_sum_of_zeros():
    assert Vector.zeros(5).sum() == Vector([]).sum()


def test_max():
    assert Vector([1, 5, 3]).max() == 5.0


def test_max_empty_raises():
    with pytest.raises(ValueError):
        Vector([]).max()


def test_add_scalar_round_trip():
    v = Vector([1, 2, 3])
    v.add_scalar(15.0)
    assert v.max() == 18.0
    v.add_scalar(-15.0)
    assert v == Vector([1, 2, 3])


def test_add_commutes_and_inverts():
    a = Vector([1, 2, 3])
    b = Vector([4, 5, 6])
    assert a + b == b + a
    assert (a + b) - b == a


def test_add_sum_is_additive():
    a = Vector([1, 2, 3])
    b = Vector([4, 5, 6])
    assert (a + b).sum() == a.sum() + b.sum()


def test_iadd_in_place():
    a = Vector([1, 2, 3])
    b = Vector([4, 5, 6])
    expected = a + b
    original = a
    a += b
    assert a is original
    assert a == expected


def test_isub_in_place():
    a = Vector([4, 5, 6])
    b = Vector([1, 2, 3])
    expected = a - b
    a -= b
    assert a == expected
    a -= a
    assert a == Vector.zeros(3)


def test_mul_elementwise():
    a = Vector([1, 2, 3])
    b = Vector([4, 5, 6])
    assert a * b == b * a
    assert a * Vector([1, 1, 1]) == a
    assert a * Vector.zeros(3) == Vector.zeros(3)


def test_imul_in_place():
    a = Vector([1, 2, 3])
    b = Vector([4, 5, 6])
    expected = a * b
    a *= b
    assert a == expected


@pytest.mark.parametrize(
    "op",
    [
        operator.add,
        operator.sub,
        operator.mul,
        operator.iadd,
        operator.isub,
        operator.imul,
    ],
)
def test_size_mismatch_raises(op):
    a = Vector([1, 2, 3])
    b = Vector([1, 2])
    with pytest.raises(ValueError):
        op(a, b)
    assert a == Vector([1, 2, 3])
    assert b == Vector([1, 2])


def test_scaled_returns_new_vector():
    a = Vector([1, 2, 3])
    doubled = a.scaled(2.0)
    assert doubled == a + a
    assert a == Vector([1, 2, 3])


def test_scale_in_place():
    a = Vector([1, 2, 3])
    expected = a.scaled(-3.0)
    a.scale(-3.0)
    assert a == expected


def test_norm():
    assert Vector([3, 4]).norm() == 5.0


def test_norm_scales_linearly():
    v = Vector([1, -2, 2.5])
    assert math.isclose(v.scaled(-4).norm(), 4 * v.norm())


def test_str_column_form():
    assert str(Vector([1, 2])) == "[1.000000]\n[2.000000]"


def test_str_empty():
    assert str(Vector([])) == ""


def test_eq_with_other_type():
    assert (Vector([1]) == [1.0]) is False