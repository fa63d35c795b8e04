# FractionLib - Fraction Math Tests
# Copyright (c) 2025 FractionLib Contributors. All rights reserved.

"""
Tests for square roots, integer powers and the precomputed constants.
"""

import math
import pytest

from fractionlib.config import Config
from fractionlib.fraction_math import (
    sqrt,
    power,
    PI,
    E,
    GOLDEN_RATIO,
    PI_CONTINUED_FRACTION,
    E_CONTINUED_FRACTION,
    GOLDEN_RATIO_CONTINUED_FRACTION,
)
from fractionlib.rational import Rational, IDENTITY, ZERO
from fractionlib.exceptions import DivideByZeroError, InvalidArgumentError, RationalOverflowError


PRIMES = [3, 5, 7, 11, 13, 97, 101, 997]


class TestIntegerSqrt:
    """Tests for sqrt() of integers."""

    def test_exact_root(self):
        r = sqrt(4)
        assert (r.numerator, r.denominator) == (2, 1)

    def test_zero_and_one(self):
        assert sqrt(0) == ZERO
        assert sqrt(1) == IDENTITY

    def test_sqrt_two_five_steps(self):
        assert sqrt(2, steps=5) == Rational(99, 70)

    def test_default_precision(self):
        assert float(sqrt(3)) == pytest.approx(math.sqrt(3), rel=1e-15)
        assert sqrt(2).approximate(10) == "1.4142135623"

    def test_zero_steps_gives_floor(self):
        assert sqrt(10, steps=0) == Rational(3)

    def test_large_integer(self):
        n = 10**40
        assert sqrt(n) == Rational(10**20)

    def test_negative_raises(self):
        with pytest.raises(InvalidArgumentError, match="negative"):
            sqrt(-1)

    def test_negative_steps_raises(self):
        with pytest.raises(InvalidArgumentError):
            sqrt(2, steps=-3)

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            sqrt(2.0)


class TestRationalSqrt:
    """Tests for sqrt() of rationals."""

    def test_quarter(self):
        assert sqrt(Rational(1, 4)) == Rational(1, 2)

    def test_squared_half(self):
        assert sqrt(power(Rational(1, 2), 2)) == Rational(1, 2)

    def test_one(self):
        assert sqrt(Rational(7, 7)) is IDENTITY

    def test_zero(self):
        assert sqrt(Rational(0, 3)) == ZERO

    def test_negative_raises(self):
        with pytest.raises(InvalidArgumentError):
            sqrt(Rational(-1, 4))

    @pytest.mark.parametrize("p", PRIMES)
    def test_root_of_reciprocal(self, p):
        expected = sqrt(Rational(1, p))
        assert expected == Rational(1, sqrt(p))
        assert float(expected) == pytest.approx(float(Rational(sqrt(p), p)), rel=1e-15)

    @pytest.mark.parametrize("i", range(1, 8))
    @pytest.mark.parametrize("j", range(1, 8))
    def test_power_of_root_of_squares(self, i, j):
        value = Rational(i * i, j * j)
        assert power(sqrt(value), 2) == value

    def test_numerator_overflow(self):
        with pytest.raises(RationalOverflowError, match="numerator") as exc_info:
            sqrt(Rational(2**31, 3))
        assert exc_info.value.operand == "numerator"
        assert exc_info.value.value == 2**31

    def test_denominator_overflow(self):
        with pytest.raises(OverflowError) as exc_info:
            sqrt(Rational(3, 2**40))
        assert exc_info.value.operand == "denominator"

    def test_operand_limit_from_config(self):
        config = Config(sqrt_operand_limit=100)
        assert sqrt(Rational(81, 4), config=config) == Rational(9, 2)
        with pytest.raises(RationalOverflowError):
            sqrt(Rational(121, 4), config=config)

    def test_steps_from_config(self):
        config = Config(sqrt_steps=5)
        assert sqrt(2, config=config) == Rational(99, 70)
        assert sqrt(Rational(2, 1), config=config) == Rational(99, 70)


class TestPower:
    """Tests for power()."""

    def test_zero_power(self):
        assert power(Rational(5, 3), 0) is IDENTITY
        assert power(ZERO, 0) == IDENTITY

    def test_first_power_is_simplified(self):
        r = power(Rational(2, 4), 1)
        assert (r.numerator, r.denominator) == (1, 2)

    def test_positive_power(self):
        r = power(Rational(2, 3), 5)
        assert (r.numerator, r.denominator) == (32, 243)

    def test_negative_power(self):
        r = power(Rational(-2, 3), -3)
        assert (r.numerator, r.denominator) == (-27, 8)

    def test_inverse_matches_negative_power(self):
        assert ~Rational(1, 5) == power(Rational(1, 5), -1)

    def test_large_exponent(self):
        assert power(Rational(2), 1000) == Rational(2**1000)
        assert power(Rational(1, 2), -1000) == Rational(2**1000)

    def test_int_base(self):
        assert power(3, 4) == Rational(81)

    def test_zero_base_negative_power_raises(self):
        with pytest.raises(DivideByZeroError):
            power(ZERO, -2)

    def test_non_integer_exponent_raises(self):
        with pytest.raises(TypeError):
            power(Rational(1, 2), 0.5)

    @pytest.mark.parametrize("n", range(-4, 5))
    def test_matches_repeated_multiplication(self, n):
        base = Rational(-3, 4)
        expected = IDENTITY
        for _ in range(abs(n)):
            expected = expected * base
        if n < 0:
            expected = ~expected
        assert power(base, n) == expected


class TestConstants:
    """Tests for PI, E and GOLDEN_RATIO."""

    def test_pi(self):
        assert float(PI) == pytest.approx(math.pi, rel=1e-15)
        assert PI.approximate(15) == "3.141592653589793"

    def test_pi_early_convergents(self):
        assert PI_CONTINUED_FRACTION.convergent(1) == Rational(22, 7)
        assert PI_CONTINUED_FRACTION.convergent(3) == Rational(355, 113)

    def test_e(self):
        assert float(E) == pytest.approx(math.e, rel=1e-15)
        assert E.approximate(15) == "2.718281828459045"

    def test_e_early_convergents(self):
        assert list(E_CONTINUED_FRACTION.convergents(6)) == [
            Rational(2), Rational(3), Rational(8, 3),
            Rational(11, 4), Rational(19, 7), Rational(87, 32),
        ]

    def test_golden_ratio(self):
        assert float(GOLDEN_RATIO) == pytest.approx((1 + math.sqrt(5)) / 2, rel=1e-15)

    def test_golden_ratio_convergents_are_fibonacci_ratios(self):
        assert GOLDEN_RATIO_CONTINUED_FRACTION.repeats
        assert GOLDEN_RATIO_CONTINUED_FRACTION.convergent(10) == Rational(144, 89)

    def test_golden_ratio_satisfies_its_equation_approximately(self):
        # phi^2 - phi - 1 == 0
        residual = GOLDEN_RATIO * GOLDEN_RATIO - GOLDEN_RATIO - 1
        assert abs(residual) < Rational(1, 10**40)
