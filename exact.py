import math
import numbers

from decimal import Decimal
from fractions import Fraction

from errors import DivisionByZero, InexactInputError, InputError, IrrationalRootError


def _as_fraction(value) -> Fraction:
    """
    Convert a constructor argument to a Fraction without losing precision.
    Accepts exact numbers, integers (numpy integers included), rationals,
    decimals and strings like '3/4', '-7' or '1.25'.
    """
    if isinstance(value, ExactNumber):
        return value._value
    if isinstance(value, numbers.Integral):
        return Fraction(int(value))
    if isinstance(value, numbers.Rational):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InputError(f"Not a finite number: {value!r}")
        return Fraction(value)
    if isinstance(value, str):
        try:
            return Fraction(value.strip())
        except ZeroDivisionError as e:
            raise DivisionByZero(f"Zero denominator in {value!r}") from e
        except ValueError as e:
            raise InputError(f"Not an exact number: {value!r}") from e
    if isinstance(value, numbers.Real):
        raise InexactInputError(
            f"Floating-point value {value!r} is not accepted, convert it to a rational first"
        )
    raise TypeError(f"Cannot build an exact number from {type(value).__name__}")


def _operand(value) -> Fraction | None:
    """
    Operand for arithmetic and comparison, or None for unsupported types.
    """
    if isinstance(value, ExactNumber):
        return value._value
    if isinstance(value, numbers.Rational):
        return _as_fraction(value)
    if isinstance(value, numbers.Real):
        raise InexactInputError(f"Cannot mix floating-point value {value!r} with exact numbers")
    return None


class ExactNumber:
    """
    Immutable arbitrary-precision rational number.

    The value is kept in lowest terms with a positive denominator, so two
    numbers compare equal exactly when they denote the same rational.
    """

    __slots__ = ("_value",)

    def __init__(self, numerator=0, denominator=1):
        num = _as_fraction(numerator)
        den = _as_fraction(denominator)
        if den == 0:
            raise DivisionByZero(f"Zero denominator: {numerator!r}/{denominator!r}")
        object.__setattr__(self, "_value", num / den)

    @classmethod
    def _wrap(cls, value: Fraction) -> "ExactNumber":
        number = cls.__new__(cls)
        object.__setattr__(number, "_value", value)
        return number

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return type(self), (self.numerator, self.denominator)

    @property
    def numerator(self) -> int:
        return self._value.numerator

    @property
    def denominator(self) -> int:
        return self._value.denominator

    @property
    def sign(self) -> int:
        return (self._value > 0) - (self._value < 0)

    def is_square(self) -> bool:
        if self._value < 0:
            return False
        num, den = self.numerator, self.denominator
        return math.isqrt(num) ** 2 == num and math.isqrt(den) ** 2 == den

    def sqrt(self) -> "ExactNumber":
        """
        Exact square root. Raises IrrationalRootError when the root is not rational.
        """
        if not self.is_square():
            raise IrrationalRootError(f"{self} has no rational square root")
        return ExactNumber._wrap(Fraction(math.isqrt(self.numerator), math.isqrt(self.denominator)))

    # arithmetic

    def __add__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        return ExactNumber._wrap(self._value + other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        return ExactNumber._wrap(self._value - other)

    def __rsub__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        return ExactNumber._wrap(other - self._value)

    def __mul__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        return ExactNumber._wrap(self._value * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        if other == 0:
            raise DivisionByZero(f"Division of {self} by zero")
        return ExactNumber._wrap(self._value / other)

    def __rtruediv__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        if self._value == 0:
            raise DivisionByZero(f"Division of {ExactNumber._wrap(other)} by zero")
        return ExactNumber._wrap(other / self._value)

    def __neg__(self):
        return ExactNumber._wrap(-self._value)

    def __pos__(self):
        return self

    def __abs__(self):
        return ExactNumber._wrap(abs(self._value))

    # comparison

    def __eq__(self, other):
        if isinstance(other, (ExactNumber, numbers.Rational)):
            return self._value == _operand(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __lt__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        return self._value < other

    def __le__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        return self._value <= other

    def __gt__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        return self._value > other

    def __ge__(self, other):
        other = _operand(other)
        if other is None:
            return NotImplemented
        return self._value >= other

    def __bool__(self):
        return self._value != 0

    # display boundary only
    def __float__(self):
        return float(self._value)

    def __repr__(self):
        if self.denominator == 1:
            return f"ExactNumber({self.numerator})"
        return f"ExactNumber({self.numerator}, {self.denominator})"

    def __str__(self):
        return str(self._value)

