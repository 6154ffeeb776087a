"""Tests for Fresa utility modules."""

import math

import pytest


class TestFormatNumber:
    """Tests for format_number."""

    def test_integral_values_keep_point(self) -> None:
        from fresa.utils.numbers import format_number

        assert format_number(90.0) == "90.0"
        assert format_number(0.0) == "0.0"

    def test_shortest_digits(self) -> None:
        from fresa.utils.numbers import format_number

        assert format_number(3.1415) == "3.1415"
        assert format_number(0.1) == "0.1"

    def test_negative(self) -> None:
        from fresa.utils.numbers import format_number

        assert format_number(-20.0) == "-20.0"
        assert format_number(-0.0) == "-0.0"

    def test_never_scientific(self) -> None:
        from fresa.utils.numbers import format_number

        assert format_number(1e-05) == "0.00001"
        assert format_number(1e20) == "100000000000000000000.0"
        assert "e" not in format_number(1.5e-300).lower()

    def test_round_trips(self) -> None:
        from fresa.utils.numbers import format_number

        for value in (1 / 3, 2.5e-8, 123456789.123, 5e-324, 1.7976931348623157e308):
            assert float(format_number(value)) == value

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, value: float) -> None:
        from fresa.utils.numbers import format_number

        with pytest.raises(ValueError, match="non-finite"):
            format_number(value)


class TestToUnsigned:
    """Tests for to_unsigned."""

    def test_truncates(self) -> None:
        from fresa.utils.numbers import to_unsigned

        assert to_unsigned(91.0) == 91
        assert to_unsigned(91.7) == 91
        assert to_unsigned(0.9) == 0

    def test_saturates_low(self) -> None:
        from fresa.utils.numbers import to_unsigned

        assert to_unsigned(-3.0) == 0
        assert to_unsigned(-0.0) == 0
        assert to_unsigned(math.nan) == 0

    def test_saturates_high(self) -> None:
        from fresa.utils.numbers import UNSIGNED_MAX, to_unsigned

        assert to_unsigned(float(UNSIGNED_MAX)) == UNSIGNED_MAX
        assert to_unsigned(1e20) == UNSIGNED_MAX
        assert to_unsigned(math.inf) == UNSIGNED_MAX

    def test_returns_int(self) -> None:
        from fresa.utils.numbers import to_unsigned

        assert type(to_unsigned(5.0)) is int


class TestGetLogger:
    """Tests for get_logger."""

    def test_adds_prefix(self) -> None:
        from fresa.utils.logger import get_logger

        assert get_logger("mymodule").name == "fresa.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        from fresa.utils.logger import get_logger

        assert get_logger("fresa.lexer.core").name == "fresa.lexer.core"
        assert get_logger("fresa").name == "fresa"

    def test_same_logger_instance(self) -> None:
        from fresa.utils.logger import get_logger

        assert get_logger("parser") is get_logger("fresa.parser")
