import math

import pytest

from scalar_autodiff.aad import (
    Node,
    Op,
    NumericDomainError,
    DivisionByZero,
    add, sub, mul, div, neg, pow, exp, log, tanh, relu, sigmoid,
)


def test_forward_values():
    a = Node(3.0)
    b = Node(-2.0)
    assert add(a, b).value == 1.0
    assert sub(a, b).value == 5.0
    assert mul(a, b).value == -6.0
    assert div(a, b).value == -1.5
    assert neg(a).value == -3.0
    assert pow(a, 2).value == 9.0
    assert relu(a).value == 3.0
    assert relu(b).value == 0.0
    assert tanh(a).value == pytest.approx(math.tanh(3.0))
    assert exp(b).value == pytest.approx(math.exp(-2.0))
    assert log(a).value == pytest.approx(math.log(3.0))
    assert sigmoid(b).value == pytest.approx(1.0 / (1.0 + math.exp(2.0)))


def test_operator_overloads_match_combinators():
    a = Node(3.0)
    b = Node(4.0)
    assert (a + b).op is Op.ADD
    assert (a - b).op is Op.SUB
    assert (a * b).op is Op.MUL
    assert (a / b).op is Op.DIV
    assert (-a).op is Op.NEG
    assert (a ** 3).op is Op.POW
    assert a.relu().op is Op.RELU
    assert a.tanh().op is Op.TANH
    assert a.exp().op is Op.EXP
    assert a.log().op is Op.LOG
    assert a.sigmoid().op is Op.SIGMOID


def test_plain_numbers_are_wrapped_on_either_side():
    x = Node(2.0)
    assert (x + 1).value == 3.0
    assert (1 + x).value == 3.0
    assert (10 - x).value == 8.0
    assert (3 * x).value == 6.0
    assert (1 / x).value == 0.5
    const = (x + 1).operands[1]
    assert const.is_leaf and const.value == 1.0


@pytest.mark.parametrize("op, a, b, da, db", [
    (add, 3.0, 5.0, 1.0, 1.0),
    (sub, 3.0, 5.0, 1.0, -1.0),
    (mul, 3.0, 5.0, 5.0, 3.0),
    (div, 3.0, 5.0, 1.0 / 5.0, -3.0 / 25.0),
])
def test_binary_local_partials(op, a, b, da, db):
    out = op(Node(a), Node(b))
    assert out.local_partials == pytest.approx((da, db))


@pytest.mark.parametrize("op, a, expected", [
    (neg, 2.0, -1.0),
    (relu, 2.0, 1.0),
    (relu, -2.0, 0.0),
    (relu, 0.0, 0.0),
    (tanh, 0.0, 1.0),
    (tanh, 0.5, 1.0 - math.tanh(0.5) ** 2),
    (exp, 1.0, math.e),
    (log, 2.0, 0.5),
    (sigmoid, 0.0, 0.25),
])
def test_unary_local_partials(op, a, expected):
    out = op(Node(a))
    assert out.local_partials[0] == pytest.approx(expected)


def test_pow_local_partial():
    out = Node(2.0) ** 3
    assert out.value == 8.0
    assert out.local_partials[0] == pytest.approx(12.0)


def test_pow_fractional_and_negative_exponents():
    assert (Node(4.0) ** 0.5).value == pytest.approx(2.0)
    assert (Node(4.0) ** 0.5).local_partials[0] == pytest.approx(0.25)
    assert (Node(2.0) ** -1).value == pytest.approx(0.5)
    assert (Node(-2.0) ** 3).value == -8.0
    assert (Node(-2.0) ** 2).local_partials[0] == pytest.approx(-4.0)


def test_pow_zero_exponent():
    out = Node(0.0) ** 0
    assert out.value == 1.0
    assert out.local_partials[0] == 0.0


def test_pow_exponent_must_be_a_number():
    with pytest.raises(TypeError):
        Node(2.0) ** Node(2.0)
    with pytest.raises(TypeError):
        2.0 ** Node(2.0)


def test_division_by_zero_node():
    with pytest.raises(DivisionByZero):
        Node(1.0) / Node(0.0)
    with pytest.raises(DivisionByZero):
        1.0 / Node(0.0)


def test_division_by_zero_is_a_numeric_domain_error():
    with pytest.raises(NumericDomainError):
        div(Node(1.0), Node(0.0))
    with pytest.raises(ZeroDivisionError):
        div(Node(1.0), Node(0.0))


def test_division_by_a_tiny_denominator():
    x, y = Node(0.0), Node(1e-200)
    out = x / y
    assert out.value == 0.0
    assert out.local_partials[0] == pytest.approx(1e200)
    assert out.local_partials[1] == 0.0


def test_zero_base_negative_power():
    with pytest.raises(DivisionByZero):
        Node(0.0) ** -1


def test_negative_base_non_integer_power():
    with pytest.raises(NumericDomainError):
        Node(-2.0) ** 0.5


def test_fractional_power_of_zero_has_no_derivative():
    with pytest.raises(NumericDomainError):
        Node(0.0) ** 0.5


def test_log_of_non_positive():
    with pytest.raises(NumericDomainError):
        log(Node(0.0))
    with pytest.raises(NumericDomainError):
        log(Node(-1.0))


def test_overflow_is_reported_not_coerced():
    with pytest.raises(NumericDomainError):
        exp(Node(1000.0))
    with pytest.raises(NumericDomainError):
        Node(1e200) * Node(1e200)


def test_underflow_is_allowed():
    assert exp(Node(-1000.0)).value == 0.0


def test_sigmoid_is_stable_for_large_inputs():
    assert sigmoid(Node(-800.0)).value == pytest.approx(0.0)
    assert sigmoid(Node(800.0)).value == pytest.approx(1.0)


def test_failed_combinator_leaves_graph_untouched():
    a = Node(1.0)
    b = Node(0.0)
    with pytest.raises(DivisionByZero):
        a / b
    assert a.grad == 0.0 and b.grad == 0.0
    assert a.is_leaf and b.is_leaf
