import numpy as np
import pytest

from densead import Evaluation


def test_constant_and_variable_seeding():
    c = Evaluation.constant(4.0, 3)
    assert c.value == 4.0
    np.testing.assert_array_equal(c.derivatives, [0.0, 0.0, 0.0])

    v = Evaluation.variable(4.0, 1, 3)
    np.testing.assert_array_equal(v.derivatives, [0.0, 1.0, 0.0])
    assert v.num_vars == 3

    with pytest.raises(IndexError):
        Evaluation.variable(4.0, 3, 3)


def test_rejects_non_numeric_value():
    with pytest.raises(TypeError):
        Evaluation("1.0", [0.0])


def test_derivatives_are_copied_and_read_only():
    d = np.array([1.0, 2.0])
    x = Evaluation(1.0, d)
    d[0] = 99.0
    assert x.derivatives[0] == 1.0
    with pytest.raises(ValueError):
        x.derivatives[0] = 5.0


def test_equality_semantics():
    x = Evaluation(2.0, [1.0, 0.0])
    assert x == 2.0
    assert x == Evaluation(2.0, [1.0, 0.0])
    assert x != Evaluation(2.0, [1.0, 1e-12])
    assert x != Evaluation(2.0, [1.0, 0.0, 0.0])


def test_ordering_compares_values():
    x = Evaluation(2.0, [1.0])
    y = Evaluation(3.0, [-5.0])
    assert x < y and y > x
    assert x <= 2.0 and x >= 2.0
    assert 1.0 < x


def test_add_sub():
    x = Evaluation(2.0, [1.0, 0.0])
    y = Evaluation(5.0, [0.0, 1.0])
    assert x + y == Evaluation(7.0, [1.0, 1.0])
    assert x - y == Evaluation(-3.0, [1.0, -1.0])
    assert x + 1.0 == Evaluation(3.0, [1.0, 0.0])
    assert 1.0 - x == Evaluation(-1.0, [-1.0, 0.0])
    assert -x == Evaluation(-2.0, [-1.0, 0.0])


def test_product_rule():
    x = Evaluation(2.0, [1.0, 0.0])
    y = Evaluation(5.0, [0.0, 1.0])
    assert x * y == Evaluation(10.0, [5.0, 2.0])
    assert 3.0 * x == Evaluation(6.0, [3.0, 0.0])
    assert x * 3 == Evaluation(6.0, [3.0, 0.0])


def test_quotient_rule():
    x = Evaluation(2.0, [1.0, 0.0])
    y = Evaluation(4.0, [0.0, 1.0])
    q = x / y
    assert q.value == pytest.approx(0.5)
    np.testing.assert_allclose(q.derivatives, [0.25, -0.125])

    r = 1.0 / y
    np.testing.assert_allclose(r.derivatives, [0.0, -1.0 / 16.0])
    assert (x / 2.0) == Evaluation(1.0, [0.5, 0.0])


def test_division_by_zero_is_not_intercepted():
    with np.errstate(all="ignore"):
        q = Evaluation(1.0, [1.0]) / Evaluation(0.0, [1.0])
    assert np.isinf(q.value)


def test_mismatched_num_vars_raise():
    with pytest.raises(ValueError):
        Evaluation(1.0, [1.0]) + Evaluation(1.0, [1.0, 0.0])


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        Evaluation(1.0, [1.0]) + "a"


def test_abs_builtin_routes_to_ops():
    assert abs(Evaluation(-2.0, [3.0])) == Evaluation(2.0, [-3.0])


def test_nested_value_and_object_derivatives():
    inner = Evaluation(1.0, [1.0])
    x = Evaluation(inner, [Evaluation(1.0, [0.0])])
    assert x.derivatives.dtype == object
    assert x.value is inner
