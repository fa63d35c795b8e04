# FractionLib - Continued Fractions
# Copyright (c) 2025 FractionLib Contributors. All rights reserved.

"""
Continued-fraction expansions of square roots.

The square root of a non-square integer has an eventually periodic
expansion [a0; a1, a2, ...]. sqrt_as_continued_fraction() runs the
quadratic-surd recurrence until the period closes and returns the terms of
one full period, which Rational.from_continued_fraction() can cycle through
to build convergents of any depth.

Example:
    >>> cf = sqrt_as_continued_fraction(2)
    >>> cf
    ContinuedFraction(initial=1, terms=(2,), repeats=True)
    >>> str(cf)
    '[1; 2]'
    >>> cf.convergent(5)
    Rational(99, 70)
"""

from __future__ import annotations
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional, Tuple

from .exceptions import InvalidArgumentError
from .rational import Rational

logger = logging.getLogger(__name__)


class _Signature(NamedTuple):
    """Recurrence state (a, m, d) after one step of the expansion."""
    a: int
    m: int
    d: int


@dataclass(frozen=True)
class ContinuedFraction:
    """
    A continued fraction initial + 1/(t0 + 1/(t1 + ...)).

    Attributes:
        initial: The integer part a0.
        terms: The denominator sequence after the initial term.
        repeats: True once the expansion detected that its terms cycle.
    """
    initial: int
    terms: Tuple[int, ...] = ()
    repeats: bool = False

    def __post_init__(self):
        # Accept any iterable of terms, store a tuple
        object.__setattr__(self, 'terms', tuple(self.terms))

    @property
    def period(self) -> Optional[int]:
        """Length of the repeating block, or None when the expansion does not repeat."""
        if not self.repeats:
            return None
        return len(self.terms)

    def convergent(self, steps: int) -> Rational:
        """The rational obtained by truncating after ``steps`` terms."""
        return Rational.from_continued_fraction(self, steps)

    def convergents(self, count: int) -> Iterator[Rational]:
        """
        Yield the first ``count`` convergents, starting with initial/1.

        Uses the forward recurrence h(k) = t*h(k-1) + h(k-2) so each
        convergent costs a constant number of multiplications. The k-th value
        equals convergent(k).
        """
        if count < 0:
            raise InvalidArgumentError(f"Cannot produce a negative amount of convergents: {count}")
        if count == 0:
            return
        h_prev, h = 1, self.initial
        k_prev, k = 0, 1
        yield Rational(h, k)
        if not self.terms:
            for _ in range(count - 1):
                yield Rational(h, k)
            return
        period = len(self.terms)
        for step in range(count - 1):
            term = self.terms[step % period]
            h_prev, h = h, term * h + h_prev
            k_prev, k = k, term * k + k_prev
            yield Rational(h, k)

    def __str__(self) -> str:
        if not self.terms:
            return f"[{self.initial}]"
        return f"[{self.initial}; {', '.join(str(t) for t in self.terms)}]"


def sqrt_as_continued_fraction(n: int, max_steps: Optional[int] = None) -> ContinuedFraction:
    """
    Expand the square root of n as a continued fraction.

    Args:
        n: Non-negative integer to take the root of.
        max_steps: Maximum number of terms to compute. None runs until the
                   period closes, which can take very long for huge n.

    Returns:
        (a0, [], repeats=False) when n is a perfect square. Otherwise the
        terms of one period with repeats=True, or the first max_steps terms
        with repeats=False when the bound was hit before the period closed.
        A bound equal to the period length also gives repeats=False, since
        the closing step is never reached; the terms are still one full period.

    Raises:
        InvalidArgumentError: If n or max_steps is negative.
    """
    if not isinstance(n, numbers.Integral):
        raise TypeError(f"Cannot expand the square root of {type(n).__name__}, expected int")
    n = int(n)
    if n < 0:
        raise InvalidArgumentError(f"Cannot take the root of {n} because it is negative.")
    if max_steps is not None and max_steps < 0:
        raise InvalidArgumentError(f"Cannot take a negative amount of steps: {max_steps}")

    a0 = math.isqrt(n)
    if a0 * a0 == n:
        return ContinuedFraction(a0, (), False)

    terms = []
    seen = set()
    a, m, d = a0, 0, 1
    while max_steps is None or len(terms) < max_steps:
        m = d * a - m
        d = (n - m * m) // d
        a = (a0 + m) // d
        signature = _Signature(a, m, d)
        if signature in seen:
            logger.debug("sqrt(%d): period of length %d closed", n, len(terms))
            return ContinuedFraction(a0, terms, True)
        seen.add(signature)
        terms.append(a)

    logger.debug("sqrt(%d): stopped after %d terms before the period closed", n, len(terms))
    return ContinuedFraction(a0, terms, False)
