# Tests for the top-level package API

import pytest


class TestExports:
    """Tests for names re-exported from fractionlib."""

    def test_all_names_resolve(self):
        import fractionlib as fl

        for name in fl.__all__:
            assert hasattr(fl, name), name

    def test_version(self):
        import fractionlib as fl

        assert isinstance(fl.__version__, str)


class TestWorkflow:
    """End-to-end use through the top-level namespace."""

    def test_build_combine_render(self):
        import fractionlib as fl

        total = fl.Rational(1, 2) + fl.Rational(1, 3) - fl.Rational(1, 6)
        assert total == fl.Rational(2, 3)
        assert str(total.simplify()) == "(2 / 3)"
        assert f"{fl.Rational(7, 3):B}" == "(2 + 1 / 3)"

    def test_root_of_three(self):
        import fractionlib as fl

        root = fl.sqrt(3)
        square = root * root
        assert abs(square - 3) < fl.Rational(1, 10**15)
        assert fl.sqrt(3, steps=5) == fl.Rational(26, 15)

    def test_continued_fraction_to_rational(self):
        import fractionlib as fl

        cf = fl.sqrt_as_continued_fraction(2)
        assert fl.Rational.from_continued_fraction(cf, 5) == fl.Rational(99, 70)

    def test_parse_and_compute(self):
        import fractionlib as fl

        ok, value = fl.Rational.try_parse("(3/4)")
        assert ok
        assert value ** 2 == fl.Rational(9, 16)


class TestExceptionHierarchy:
    """All library errors share a base and map onto builtin exceptions."""

    def test_base_class(self):
        import fractionlib as fl

        for exc in (fl.DivideByZeroError, fl.InvalidArgumentError,
                    fl.RationalOverflowError, fl.FractionFormatError):
            assert issubclass(exc, fl.FractionLibError)

    def test_builtin_bases(self):
        import fractionlib as fl

        assert issubclass(fl.DivideByZeroError, ZeroDivisionError)
        assert issubclass(fl.InvalidArgumentError, ValueError)
        assert issubclass(fl.RationalOverflowError, OverflowError)
        assert issubclass(fl.FractionFormatError, ValueError)

    def test_catch_with_base(self):
        import fractionlib as fl

        with pytest.raises(fl.FractionLibError):
            fl.Rational(1, 0)
        with pytest.raises(fl.FractionLibError):
            fl.sqrt(-2)

    def test_overflow_message_names_operand(self):
        import fractionlib as fl

        err = fl.RationalOverflowError("too big", operand="denominator", value=10)
        assert "denominator" in str(err)
        assert err.value == 10
