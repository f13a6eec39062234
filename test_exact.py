import pickle

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from errors import DivisionByZero, InexactInputError, InputError, IrrationalRootError
from exact import ExactNumber


def test_lowest_terms_and_sign():
    x = ExactNumber(6, -8)
    assert x.numerator == -3
    assert x.denominator == 4
    assert x.sign == -1
    assert ExactNumber(0, -5).sign == 0
    assert ExactNumber(0, -5).denominator == 1


@pytest.mark.parametrize("a, b", [
    (ExactNumber(1, 2), ExactNumber(2, 4)),
    (ExactNumber(-3, -6), ExactNumber("1/2")),
    (ExactNumber("0.5"), Fraction(1, 2)),
    (ExactNumber(Decimal("2.50")), ExactNumber(5, 2)),
    (ExactNumber(np.int64(7)), 7),
    (ExactNumber(ExactNumber(3, 4), ExactNumber(3, 2)), ExactNumber(1, 2)),
])
def test_equality_by_value(a, b):
    assert a == b
    assert hash(a) == hash(b)


@pytest.mark.parametrize("args", [(1, 0), (ExactNumber(3), ExactNumber(0)), ("1/0",), (5, "0")])
def test_zero_denominator_at_construction(args):
    with pytest.raises(DivisionByZero):
        ExactNumber(*args)


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        ExactNumber(1) / 0
    with pytest.raises(DivisionByZero):
        ExactNumber(1) / ExactNumber(0, 3)
    with pytest.raises(DivisionByZero):
        3 / ExactNumber(0)
    # still a ZeroDivisionError for callers that only know the builtin
    with pytest.raises(ZeroDivisionError):
        ExactNumber(2) / 0


def test_arithmetic_is_exact():
    third = ExactNumber(1, 3)
    assert third + third + third == 1
    assert ExactNumber(1, 10) * 3 == ExactNumber(3, 10)
    assert 1 - third == ExactNumber(2, 3)
    assert 2 / ExactNumber(4) == ExactNumber(1, 2)
    assert -third == ExactNumber(-1, 3)
    assert abs(ExactNumber(-5, 7)) == ExactNumber(5, 7)
    assert Fraction(1, 6) + third == ExactNumber(1, 2)
    assert isinstance(Fraction(1, 6) + third, ExactNumber)
    assert isinstance(3 * third, ExactNumber)


def test_no_precision_limit():
    big = ExactNumber(10 ** 60 + 1, 10 ** 60)
    assert big - 1 == ExactNumber(1, 10 ** 60)
    assert big > 1
    assert (big - 1) * 10 ** 60 == 1


def test_total_order():
    values = [ExactNumber(1, 3), ExactNumber(-2), ExactNumber(1, 4), ExactNumber(0), ExactNumber(2, 6)]
    assert sorted(values) == [ExactNumber(-2), 0, ExactNumber(1, 4), ExactNumber(1, 3), ExactNumber(1, 3)]
    assert ExactNumber(1, 3) <= ExactNumber(2, 6)
    assert ExactNumber(1, 3) >= Fraction(1, 3)
    assert ExactNumber(1, 3) < 1
    assert 1 > ExactNumber(1, 3)


@pytest.mark.parametrize("value", [0.5, np.float64(1.5), float("nan")])
def test_floats_are_rejected(value):
    with pytest.raises(InexactInputError):
        ExactNumber(value)
    with pytest.raises(TypeError):
        ExactNumber(1) + value


def test_bad_string():
    with pytest.raises(InputError):
        ExactNumber("one half")


def test_immutable():
    x = ExactNumber(1, 2)
    with pytest.raises(AttributeError):
        x._value = Fraction(3)
    with pytest.raises(AttributeError):
        x.numerator = 3
    assert x == ExactNumber(1, 2)


def test_sqrt():
    assert ExactNumber(9, 4).sqrt() == ExactNumber(3, 2)
    assert ExactNumber(0).sqrt() == 0
    assert ExactNumber(16).is_square()
    assert not ExactNumber(2).is_square()
    with pytest.raises(IrrationalRootError):
        ExactNumber(2).sqrt()
    with pytest.raises(IrrationalRootError):
        ExactNumber(-4).sqrt()


def test_display_and_pickle():
    x = ExactNumber(-3, 4)
    assert str(x) == "-3/4"
    assert repr(x) == "ExactNumber(-3, 4)"
    assert repr(ExactNumber(5)) == "ExactNumber(5)"
    assert float(x) == -0.75
    assert pickle.loads(pickle.dumps(x)) == x
