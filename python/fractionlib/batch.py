# FractionLib - Batch Helpers
# Copyright (c) 2025 FractionLib Contributors. All rights reserved.

"""
numpy interop for batch computations over many rationals.

Rationals stay exact; these helpers only move values in and out of numpy
arrays so batch drivers can scan, filter and plot them.

Example:
    >>> import numpy as np
    >>> from fractionlib.batch import from_numpy, to_numpy
    >>> values = from_numpy(np.array([1, 2, 3]), np.array([2, 4, 7]))
    >>> values
    [Rational(1, 2), Rational(2, 4), Rational(3, 7)]
    >>> to_numpy(values)
    array([0.5       , 0.5       , 0.42857143])
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional

import numpy as np

from .config import Config
from .continued_fraction import ContinuedFraction
from .rational import Rational, RationalLike, to_rational

logger = logging.getLogger(__name__)

__all__ = [
    "to_numpy",
    "from_numpy",
    "convergent_errors",
    "count_reduced",
]


def to_numpy(values: Iterable[RationalLike], config: Optional[Config] = None) -> np.ndarray:
    """Convert rationals to a float64 array.

    Each value goes through its decimal approximation with
    config.decimal_digits fractional digits.

    Args:
        values: Rationals, ints or Fractions.
        config: Optional Config, defaults to Config().
    """
    config = config or Config()
    return np.array(
        [float(to_rational(v).approximate(config.decimal_digits)) for v in values],
        dtype=np.float64,
    )


def from_numpy(numerators: np.ndarray, denominators: Optional[np.ndarray] = None) -> List[Rational]:
    """Create rationals from integer arrays.

    Args:
        numerators: Integer array of numerators.
        denominators: Integer array of the same shape. Defaults to all ones.

    Returns:
        Flat list of unsimplified rationals in C order.

    Raises:
        TypeError: If an array does not hold integers.
        ValueError: If the shapes differ.
        DivideByZeroError: If a denominator is zero.
    """
    numerators = np.asarray(numerators)
    if denominators is None:
        denominators = np.ones_like(numerators)
    denominators = np.asarray(denominators)

    for name, array in (('numerators', numerators), ('denominators', denominators)):
        if not np.issubdtype(array.dtype, np.integer):
            raise TypeError(f"{name} must be an integer array, got dtype {array.dtype}")
    if numerators.shape != denominators.shape:
        raise ValueError(
            f"Shape mismatch: numerators {numerators.shape} vs denominators {denominators.shape}"
        )

    return [
        Rational(int(n), int(d))
        for n, d in zip(numerators.ravel(), denominators.ravel())
    ]


def convergent_errors(
    continued_fraction: ContinuedFraction,
    count: int,
    target: float,
) -> np.ndarray:
    """Absolute error of the first ``count`` convergents against ``target``.

    Handy to see how fast an expansion closes in on the value it represents,
    e.g. ``convergent_errors(sqrt_as_continued_fraction(2), 10, math.sqrt(2))``.
    """
    approximations = to_numpy(continued_fraction.convergents(count))
    errors = np.abs(approximations - target)
    logger.debug("convergent errors for %s: %s", continued_fraction, errors)
    return errors


def count_reduced(numerators: np.ndarray, denominator: int) -> int:
    """Count the numerators n for which n/denominator is already reduced."""
    numerators = np.asarray(numerators)
    if not np.issubdtype(numerators.dtype, np.integer):
        raise TypeError(f"numerators must be an integer array, got dtype {numerators.dtype}")
    return sum(
        1 for n in numerators.ravel()
        if Rational(int(n), denominator).is_reduced
    )
