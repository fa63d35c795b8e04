# FractionLib - Configuration
# Copyright (c) 2025 FractionLib Contributors. All rights reserved.

"""Configuration settings for FractionLib."""

from __future__ import annotations
from dataclasses import dataclass

from .exceptions import InvalidArgumentError


DEFAULT_SQRT_STEPS = 30
DEFAULT_DECIMAL_DIGITS = 18
# Largest operand accepted by the rational square root (signed 32-bit range)
DEFAULT_SQRT_OPERAND_LIMIT = 2**31 - 1


@dataclass
class Config:
    """
    Configuration for approximation requests.

    Attributes:
        sqrt_steps: Number of continued-fraction terms used to build a
                    square-root convergent. More steps give a closer
                    approximation with larger numerators and denominators.
        decimal_digits: Fractional digits produced by Rational.approximate().
        sqrt_operand_limit: Largest numerator or denominator the rational
                            square root accepts.
    """
    sqrt_steps: int = DEFAULT_SQRT_STEPS
    decimal_digits: int = DEFAULT_DECIMAL_DIGITS
    sqrt_operand_limit: int = DEFAULT_SQRT_OPERAND_LIMIT

    def __post_init__(self):
        if self.sqrt_steps < 0:
            raise InvalidArgumentError(f"sqrt_steps must be non-negative, got {self.sqrt_steps}")
        if self.decimal_digits < 0:
            raise InvalidArgumentError(f"decimal_digits must be non-negative, got {self.decimal_digits}")
        if self.sqrt_operand_limit < 1:
            raise InvalidArgumentError(
                f"sqrt_operand_limit must be positive, got {self.sqrt_operand_limit}"
            )

    @classmethod
    def low_precision(cls) -> Config:
        """Fast, lower precision configuration."""
        return cls(
            sqrt_steps=10,
            decimal_digits=8,
        )

    @classmethod
    def medium_precision(cls) -> Config:
        """Balanced precision/speed configuration (default)."""
        return cls()

    @classmethod
    def high_precision(cls) -> Config:
        """High precision configuration."""
        return cls(
            sqrt_steps=100,
            decimal_digits=50,
        )

    def __repr__(self) -> str:
        return (
            f"Config(sqrt_steps={self.sqrt_steps}, "
            f"decimal_digits={self.decimal_digits}, "
            f"sqrt_operand_limit={self.sqrt_operand_limit})"
        )
