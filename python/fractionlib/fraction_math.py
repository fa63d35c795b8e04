# FractionLib - Fraction Math
# Copyright (c) 2025 FractionLib Contributors. All rights reserved.

"""
Square roots, integer powers and constants built on Rational.

Square roots are approximated by convergents of the periodic continued
fraction of the root, so every result is an exact Rational close to the
irrational value. π, e and the golden ratio are convergents of their
known continued-fraction expansions.

Example:
    >>> from fractionlib.fraction_math import sqrt, power
    >>> sqrt(2, steps=5)
    Rational(99, 70)
    >>> sqrt(4)
    Rational(2, 1)
    >>> power(Rational(2, 3), -2)
    Rational(9, 4)
"""

from __future__ import annotations
import logging
import numbers
from typing import Optional, Union

from .config import Config
from .continued_fraction import ContinuedFraction, sqrt_as_continued_fraction
from .exceptions import InvalidArgumentError, RationalOverflowError
from .rational import Rational, RationalLike, IDENTITY, ZERO, to_rational

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

PI_CONTINUED_FRACTION = ContinuedFraction(
    3,
    (7, 15, 1, 292, 1, 1, 1, 2, 1, 3, 1, 14, 2, 1, 1, 2, 2, 2, 2, 1, 84, 2, 1, 1, 15, 3, 13, 1),
    False,
)

# e = [2; 1, 2, 1, 1, 4, 1, 1, 6, 1, ...]
E_CONTINUED_FRACTION = ContinuedFraction(
    2,
    tuple(term for k in range(1, 21) for term in (1, 2 * k, 1)),
    False,
)

GOLDEN_RATIO_CONTINUED_FRACTION = ContinuedFraction(1, (1,), True)

PI_DEPTH = len(PI_CONTINUED_FRACTION.terms)
E_DEPTH = len(E_CONTINUED_FRACTION.terms)
GOLDEN_RATIO_DEPTH = 100

PI = Rational.from_continued_fraction(PI_CONTINUED_FRACTION, PI_DEPTH)
E = Rational.from_continued_fraction(E_CONTINUED_FRACTION, E_DEPTH)
GOLDEN_RATIO = Rational.from_continued_fraction(GOLDEN_RATIO_CONTINUED_FRACTION, GOLDEN_RATIO_DEPTH)


# =============================================================================
# SQUARE ROOTS
# =============================================================================

def sqrt(
    value: Union[int, RationalLike],
    steps: Optional[int] = None,
    config: Optional[Config] = None,
) -> Rational:
    """
    Approximate the square root of an integer or a Rational.

    For a Rational a/b the result is sqrt(a) / sqrt(b), so the root is
    exact when both parts are perfect squares. This can be expensive for
    large operands.

    Args:
        value: Non-negative int or Rational.
        steps: Continued-fraction terms per root. Defaults to config.sqrt_steps.
        config: Optional Config, defaults to Config().

    Returns:
        A Rational approximation of the root.

    Raises:
        InvalidArgumentError: If value or steps is negative.
        RationalOverflowError: If a Rational's numerator or denominator
            exceeds config.sqrt_operand_limit.
    """
    config = config or Config()
    if steps is None:
        steps = config.sqrt_steps
    if steps < 0:
        raise InvalidArgumentError("Cannot take a negative amount of steps")

    if isinstance(value, numbers.Integral):
        return _sqrt_integer(int(value), steps)

    fraction = to_rational(value)
    if fraction.numerator == fraction.denominator:
        return IDENTITY
    if fraction.numerator == 0:
        return ZERO
    if fraction.numerator < 0:
        raise InvalidArgumentError(f"Cannot take the root of {fraction} because it is negative.")

    for operand, part in (('numerator', fraction.numerator), ('denominator', fraction.denominator)):
        if part > config.sqrt_operand_limit:
            raise RationalOverflowError(
                f"{fraction} has a {operand} that is too big to take the root of "
                f"(limit {config.sqrt_operand_limit})",
                operand=operand,
                value=part,
            )

    logger.debug("sqrt(%s) with %d steps", fraction, steps)
    return Rational(
        _sqrt_integer(fraction.numerator, steps),
        _sqrt_integer(fraction.denominator, steps),
    )


def _sqrt_integer(n: int, steps: int) -> Rational:
    """Convergent of sqrt(n) after ``steps`` continued-fraction terms."""
    if n < 0:
        raise InvalidArgumentError(f"Cannot take the root of {n} because it is negative.")
    # No more than ``steps`` terms are ever read back
    expansion = sqrt_as_continued_fraction(n, max_steps=steps)
    return Rational.from_continued_fraction(expansion, steps)


# =============================================================================
# POWERS
# =============================================================================

def power(f: RationalLike, n: int) -> Rational:
    """
    Raise a rational to an integer power.

    The result is simplified. Negative powers invert: f ** -n == 1 / f ** n.

    Raises:
        DivideByZeroError: For a zero base with a negative exponent.
        TypeError: If n is not an integer.
    """
    if not isinstance(n, numbers.Integral):
        raise TypeError(f"Only integer powers are supported, got {type(n).__name__}")
    base = to_rational(f)
    n = int(n)

    if n == 0:
        return IDENTITY
    if n < 0:
        return power(base, -n).invert().simplify()

    result = IDENTITY
    base = base.simplify()
    while n:
        if n & 1:
            result = (result * base).simplify()
        n >>= 1
        if n:
            base = (base * base).simplify()
    return result
