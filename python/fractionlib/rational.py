# FractionLib - Rational Numbers
# Copyright (c) 2025 FractionLib Contributors. All rights reserved.

"""
Exact rational numbers with arbitrary-precision numerators and denominators.

A Rational keeps its sign on the numerator; the denominator is always
positive. Arithmetic never simplifies on its own, call simplify() when the
reduced form is wanted. Equality and hashing look at the reduced form, so
unreduced values compare equal to their simplified counterparts.

Example:
    >>> from fractionlib.rational import Rational
    >>> a = Rational(1, -5)
    >>> a
    Rational(-1, 5)
    >>> Rational(-3, -9).simplify()
    Rational(1, 3)
    >>> Rational(1, 2) == Rational(2, 4)
    True
    >>> Rational(12, 5).to_string_mixed()
    '(2 + 2 / 5)'
"""

from __future__ import annotations
import math
import numbers
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Union, Optional, Any, Sequence, Tuple

from .config import DEFAULT_SQRT_STEPS, DEFAULT_DECIMAL_DIGITS
from .exceptions import (
    FractionLibError,
    DivideByZeroError,
    InvalidArgumentError,
    RationalOverflowError,
    FractionFormatError,
)


# Type for things that can be converted to Rational
RationalLike = Union['Rational', int, Fraction]

# "a/b" or "(a/b)", minus sign allowed on the numerator only
_PARSE_PATTERN = re.compile(
    r"^\s*(?P<open>\()?\s*(?P<num>-?[0-9]+)\s*/\s*(?P<den>[0-9]+)\s*(?P<close>\))?\s*$"
)


@dataclass(frozen=True, eq=False)
class Rational:
    """
    An exact fraction numerator / denominator.

    Rationals are immutable; every operator returns a new value. Decimal
    rendering (str, approximate, the format specifiers) is bounded by
    sys.get_int_max_str_digits() and raises RationalOverflowError past it.
    """
    numerator: int
    denominator: int

    def __init__(self, numerator: RationalLike, denominator: RationalLike = 1):
        """
        Create the rational numerator / denominator.

        Args:
            numerator: Top part. An int, Rational or Fraction.
            denominator: Bottom part. An int, Rational or Fraction.

        Raises:
            DivideByZeroError: If the denominator is zero.
            TypeError: If either part is not an exact number.
        """
        if isinstance(numerator, numbers.Integral) and isinstance(denominator, numbers.Integral):
            num, den = int(numerator), int(denominator)
        else:
            # X over Y/Z is X times Z/Y
            quotient = to_rational(numerator) * to_rational(denominator).invert()
            num, den = quotient.numerator, quotient.denominator

        if den == 0:
            raise DivideByZeroError(f"Can't divide by zero: denominator of {num}/{den} is zero")
        if den < 0:
            num, den = -num, -den

        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'numerator', num)
        object.__setattr__(self, 'denominator', den)

    @classmethod
    def from_continued_fraction(cls, continued_fraction: Any, steps: int = DEFAULT_SQRT_STEPS) -> Rational:
        """
        Build the convergent of a continued fraction after ``steps`` terms.

        The term sequence is walked backwards starting at index steps - 1,
        wrapping around modulo its length. Asking for more steps than there
        are terms therefore repeats the sequence, which is what makes a
        periodic expansion usable for any precision.

        Args:
            continued_fraction: A ContinuedFraction, or an
                (initial, terms[, repeats]) tuple.
            steps: Number of terms to use.

        Returns:
            The convergent initial + 1/(t0 + 1/(t1 + ... 1/t[steps-1])).

        Raises:
            InvalidArgumentError: If steps is negative.
            DivideByZeroError: If the term sequence contains a zero.
        """
        initial, terms = _unpack_continued_fraction(continued_fraction)
        if steps < 0:
            raise InvalidArgumentError(f"Cannot take a negative amount of steps: {steps}")
        if not terms:
            steps = 0
        if steps == 0:
            return cls(initial)
        if any(term == 0 for term in terms):
            raise DivideByZeroError(f"Continued fraction terms must not contain zero: {list(terms)}")

        period = len(terms)
        steps -= 1
        value = cls(1, terms[steps % period])
        while steps > 0:
            steps -= 1
            value = (terms[steps % period] + value).invert()
        return initial + value

    @classmethod
    def parse(cls, text: str) -> Rational:
        """
        Parse "a/b" or "(a/b)" into a Rational.

        Whitespace around the numbers and the slash is allowed, so the
        output of str() parses back to the same value.

        Raises:
            FractionFormatError: If the text has any other shape.
            DivideByZeroError: If b is zero.
        """
        if not isinstance(text, str):
            raise TypeError(f"Cannot parse {type(text).__name__}, expected str")
        match = _PARSE_PATTERN.match(text)
        if match is None or (match.group('open') is None) != (match.group('close') is None):
            raise FractionFormatError(f"Cannot parse {text!r} as a fraction", text=text)
        try:
            numerator, denominator = int(match.group('num')), int(match.group('den'))
        except ValueError as e:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            raise FractionFormatError(f"Cannot parse {text[:40]!r}...: {e}", text=text) from e
        return cls(numerator, denominator)

    @classmethod
    def try_parse(cls, text: str) -> Tuple[bool, Rational]:
        """
        Parse like parse() without raising.

        Returns:
            (True, value) on success, (False, IDENTITY) otherwise.
        """
        try:
            return True, cls.parse(text)
        except (FractionLibError, TypeError):
            return False, IDENTITY

    @property
    def is_proper(self) -> bool:
        """A proper fraction has an absolute value below 1."""
        return abs(self.numerator) < self.denominator

    @property
    def is_reduced(self) -> bool:
        """True when numerator and denominator share no factor but 1."""
        return math.gcd(self.numerator, self.denominator) == 1

    def simplify(self) -> Rational:
        """Divide numerator and denominator by their greatest common divisor."""
        divisor = math.gcd(self.numerator, self.denominator)
        return Rational(self.numerator // divisor, self.denominator // divisor)

    def invert(self) -> Rational:
        """
        Swap numerator and denominator.

        Raises:
            DivideByZeroError: If the numerator is zero.
        """
        if self.numerator == 0:
            raise DivideByZeroError(f"Cannot invert {self}: numerator is zero")
        return Rational(self.denominator, self.numerator)

    def negate(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def compare(self, other: RationalLike) -> int:
        """
        Three-way comparison without converting to floating point.

        Returns:
            1 if self > other, -1 if self < other, 0 if they are equal.
        """
        other = to_rational(other)
        if self.denominator == other.denominator:
            return _sign(self.numerator - other.numerator)

        quotient, remainder = divmod(self.numerator, self.denominator)
        other_quotient, other_remainder = divmod(other.numerator, other.denominator)
        if quotient != other_quotient:
            return 1 if quotient > other_quotient else -1

        # Same integer part, cross-multiply the remainders
        return _sign(remainder * other.denominator - other_remainder * self.denominator)

    def to_bounded_int(self, bits: int = 32) -> int:
        """
        Truncate toward zero into a signed integer of the given width.

        Raises:
            RationalOverflowError: If the truncated value does not fit.
        """
        if bits < 1:
            raise InvalidArgumentError(f"Integer width must be positive, got {bits}")
        value = int(self)
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if not low <= value <= high:
            raise RationalOverflowError(
                f"{self} does not fit in a {bits}-bit integer",
                value=value,
            )
        return value

    def approximate(self, digits: Optional[int] = None) -> str:
        """
        Render a decimal approximation by long division.

        Args:
            digits: Maximum number of digits after the decimal point.
                    Defaults to 18. Stops early when the division terminates.

        Example:
            >>> Rational(1, 7).approximate(6)
            '0.142857'
            >>> Rational(-5, 4).approximate()
            '-1.25'
        """
        if digits is None:
            digits = DEFAULT_DECIMAL_DIGITS
        if digits < 0:
            raise InvalidArgumentError(f"Cannot produce a negative amount of digits: {digits}")

        whole, remainder = divmod(abs(self.numerator), self.denominator)
        fraction_digits = []
        while remainder and len(fraction_digits) < digits:
            digit, remainder = divmod(remainder * 10, self.denominator)
            fraction_digits.append(str(digit))

        nonzero = whole or any(digit != '0' for digit in fraction_digits)
        sign = '-' if self.numerator < 0 and nonzero else ''
        whole_text = _decimal_text(whole, 'numerator')
        if not fraction_digits:
            return f"{sign}{whole_text}"
        return f"{sign}{whole_text}.{''.join(fraction_digits)}"

    def to_string_mixed(self) -> str:
        """Render as '(Q + R / D)', separating the whole part."""
        quotient = int(self)
        remainder = self.numerator - quotient * self.denominator
        return "({} + {} / {})".format(
            _decimal_text(quotient, 'numerator'),
            _decimal_text(remainder, 'numerator'),
            _decimal_text(self.denominator, 'denominator'),
        )

    # Arithmetic
    def __add__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def __radd__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + self

    def __sub__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self.numerator * other.denominator - self.denominator * other.numerator,
            self.denominator * other.denominator,
        )

    def __rsub__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self.numerator * other.numerator, self.denominator * other.denominator)

    def __rmul__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self

    def __truediv__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self * other.invert()

    def __rtruediv__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self.invert()

    def __pow__(self, n: int) -> Rational:
        from .fraction_math import power
        return power(self, n)

    def __neg__(self) -> Rational:
        return self.negate()

    def __pos__(self) -> Rational:
        return self

    def __invert__(self) -> Rational:
        return self.invert()

    def __abs__(self) -> Rational:
        return Rational(abs(self.numerator), self.denominator)

    # Comparison
    def __eq__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        a, b = self.simplify(), other.simplify()
        return a.numerator == b.numerator and a.denominator == b.denominator

    def __hash__(self) -> int:
        # Matches hash(int) and hash(Fraction) for equal values
        return hash(Fraction(self.numerator, self.denominator))

    def __lt__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.compare(other) >= 0

    # Conversions
    def __bool__(self) -> bool:
        return self.numerator != 0

    def __int__(self) -> int:
        """Truncate toward zero."""
        whole = abs(self.numerator) // self.denominator
        return whole if self.numerator >= 0 else -whole

    __trunc__ = __int__

    def __float__(self) -> float:
        """Parse the decimal approximation, giving up digits past the 18th."""
        return float(self.approximate())

    def __str__(self) -> str:
        return "({} / {})".format(
            _decimal_text(self.numerator, 'numerator'),
            _decimal_text(self.denominator, 'denominator'),
        )

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"

    def __format__(self, format_spec: str) -> str:
        """
        Format with 'G' or 'S' (default form), 'B' (mixed form) or
        'H' (integer part). Specifiers are case-insensitive.
        """
        if not format_spec:
            return str(self)
        key = format_spec.upper()
        if key in ('G', 'S'):
            return str(self)
        if key == 'B':
            return self.to_string_mixed()
        if key == 'H':
            return _decimal_text(int(self), 'numerator')
        raise FractionFormatError(
            f"The '{format_spec}' format string is not supported.",
            format_spec=format_spec,
        )


def to_rational(x: RationalLike) -> Rational:
    """
    Convert an exact number to a Rational.

    Args:
        x: A Rational, an int or a Fraction.

    Raises:
        TypeError: For floats and anything else that is not exact.
    """
    result = _coerce(x)
    if result is None:
        raise TypeError(f"Cannot convert {type(x).__name__} to Rational")
    return result


def _coerce(x: Any) -> Optional[Rational]:
    """Convert x to a Rational, or return None when it is not an exact number."""
    if isinstance(x, Rational):
        return x
    elif isinstance(x, numbers.Integral):
        return Rational(int(x), 1)
    elif isinstance(x, numbers.Rational):
        return Rational(int(x.numerator), int(x.denominator))
    return None


def _decimal_text(value: int, operand: str) -> str:
    """str() of an int, raising RationalOverflowError past the interpreter's digit limit."""
    try:
        return str(value)
    except ValueError as e:
        raise RationalOverflowError(
            f"Cannot render {value.bit_length()}-bit integer as decimal text: {e}",
            operand=operand,
            value=value,
        ) from e


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def _unpack_continued_fraction(continued_fraction: Any) -> Tuple[int, Sequence[int]]:
    """Extract (initial, terms) from a ContinuedFraction or a plain tuple."""
    if isinstance(continued_fraction, tuple):
        initial, terms = continued_fraction[0], continued_fraction[1]
    else:
        initial, terms = continued_fraction.initial, continued_fraction.terms
    return int(initial), tuple(int(term) for term in terms)


IDENTITY = Rational(1, 1)
ZERO = Rational(0, 1)
