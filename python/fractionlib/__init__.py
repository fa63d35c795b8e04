# FractionLib
# Copyright (c) 2025 FractionLib Contributors. All rights reserved.

"""
FractionLib - Exact Rational Arithmetic and Continued Fractions.

This package provides an exact rational number type together with a
continued-fraction engine that approximates square roots, π, e and the
golden ratio by their best rational convergents.

Example:
    >>> import fractionlib as fl
    >>> half = fl.Rational(1, 2)
    >>> half + fl.Rational(1, 3)
    Rational(5, 6)
    >>> fl.sqrt(2, steps=5)
    Rational(99, 70)
    >>> fl.sqrt(2).approximate(10)
    '1.4142135623'

Key Features:
    - Arbitrary-precision numerators and denominators
    - Explicit simplification, equality on the reduced form
    - Periodic continued-fraction expansion of square roots
    - Long-division decimal rendering without floating point
"""

__version__ = "0.3.0"

# Rational numbers
from .rational import (
    Rational,
    RationalLike,
    IDENTITY,
    ZERO,
    to_rational,
)

# Continued fractions
from .continued_fraction import (
    ContinuedFraction,
    sqrt_as_continued_fraction,
)

# Derived operations and constants
from .fraction_math import (
    sqrt,
    power,
    PI,
    E,
    GOLDEN_RATIO,
    PI_CONTINUED_FRACTION,
    E_CONTINUED_FRACTION,
    GOLDEN_RATIO_CONTINUED_FRACTION,
)

# Configuration
from .config import Config

# numpy interop
from . import batch

# Exceptions
from .exceptions import (
    FractionLibError,
    DivideByZeroError,
    InvalidArgumentError,
    RationalOverflowError,
    FractionFormatError,
    SUPPORTED_FORMATS,
)

__all__ = [
    # Version
    "__version__",
    # Rational numbers
    "Rational",
    "RationalLike",
    "IDENTITY",
    "ZERO",
    "to_rational",
    # Continued fractions
    "ContinuedFraction",
    "sqrt_as_continued_fraction",
    # Derived operations
    "sqrt",
    "power",
    # Constants
    "PI",
    "E",
    "GOLDEN_RATIO",
    "PI_CONTINUED_FRACTION",
    "E_CONTINUED_FRACTION",
    "GOLDEN_RATIO_CONTINUED_FRACTION",
    # Configuration
    "Config",
    # numpy interop
    "batch",
    # Exceptions
    "FractionLibError",
    "DivideByZeroError",
    "InvalidArgumentError",
    "RationalOverflowError",
    "FractionFormatError",
    "SUPPORTED_FORMATS",
]
