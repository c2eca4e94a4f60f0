"""Tests for DecimalValue fixed-point decimals."""

from decimal import Decimal

import pytest

from swapmath.errors import InvalidScaleError, ScaleNarrowingError
from swapmath.math.decimal_value import DecimalValue


class TestParse:
    """Tests for DecimalValue.parse."""

    @pytest.mark.parametrize(
        "text,mantissa,scale",
        [
            ("123", 123, 0),
            ("0.25", 25, 2),
            ("12.50", 1250, 2),
            ("0", 0, 0),
            ("0.", 0, 0),
            ("1.", 1, 0),
            ("0.005", 5, 3),
            ("01", 1, 0),
        ],
    )
    def test_valid(self, text: str, mantissa: int, scale: int) -> None:
        assert DecimalValue.parse(text) == DecimalValue(mantissa=mantissa, scale=scale)

    @pytest.mark.parametrize(
        "text",
        ["", "00", "00.5", "-1", "+1", "1e5", "1.2.3", ".5", " 1", "1\n", "abc", "1,5"],
    )
    def test_invalid_returns_none(self, text: str) -> None:
        assert DecimalValue.parse(text) is None

    def test_non_string_returns_none(self) -> None:
        assert DecimalValue.parse(12) is None  # type: ignore[arg-type]

    def test_large_mantissa_is_exact(self) -> None:
        text = "123456789012345678901234567890.123456789"
        value = DecimalValue.parse(text)
        assert value is not None
        assert value.mantissa == 123456789012345678901234567890123456789
        assert value.format(pad_to_scale=True) == text


class TestFormat:
    """Tests for DecimalValue.format."""

    def test_trims_trailing_zeros(self) -> None:
        assert DecimalValue(1250, 2).format() == "12.5"
        assert DecimalValue(200, 2).format() == "2"

    def test_pad_to_scale(self) -> None:
        assert DecimalValue(1250, 2).format(pad_to_scale=True) == "12.50"
        assert DecimalValue(200, 2).format(pad_to_scale=True) == "2.00"

    def test_pads_integer_part(self) -> None:
        assert DecimalValue(5, 3).format() == "0.005"

    def test_scale_zero(self) -> None:
        assert DecimalValue(42, 0).format(pad_to_scale=True) == "42"

    def test_negative(self) -> None:
        assert DecimalValue(-125, 2).format(pad_to_scale=True) == "-1.25"
        assert DecimalValue(-5, 2).format() == "-0.05"

    def test_str_is_padded(self) -> None:
        assert str(DecimalValue(100, 2)) == "1.00"

    @pytest.mark.parametrize(
        "value",
        [
            DecimalValue(0, 0),
            DecimalValue(0, 3),
            DecimalValue(123, 0),
            DecimalValue(1250, 2),
            DecimalValue(5, 3),
            DecimalValue(100, 2),
        ],
    )
    def test_padded_format_parses_back(self, value: DecimalValue) -> None:
        assert DecimalValue.parse(value.format(pad_to_scale=True)) == value


class TestConversion:
    """Tests for float/Decimal conversion."""

    def test_to_float(self) -> None:
        assert DecimalValue(25, 2).to_float() == 0.25

    def test_to_decimal_is_exact(self) -> None:
        assert DecimalValue(1250, 2).to_decimal() == Decimal("12.50")
        assert DecimalValue(7, 0).to_decimal() == Decimal(7)

    def test_from_int(self) -> None:
        assert DecimalValue.from_int(9) == DecimalValue(9, 0)


class TestAlignment:
    """Tests for scale alignment."""

    def test_can_align_to(self) -> None:
        value = DecimalValue(25, 2)
        assert value.can_align_to(2)
        assert value.can_align_to(5)
        assert not value.can_align_to(1)

    def test_align_widens(self) -> None:
        assert DecimalValue(25, 2).align_to(4) == DecimalValue(2500, 4)

    def test_align_to_other_value(self) -> None:
        assert DecimalValue(25, 2).align_to(DecimalValue(1, 3)) == DecimalValue(250, 3)

    @pytest.mark.parametrize("target", [2, 3, 9])
    def test_align_preserves_value(self, target: int) -> None:
        value = DecimalValue(25, 2)
        assert value.align_to(target).to_float() == value.to_float()

    def test_narrowing_raises(self) -> None:
        with pytest.raises(ScaleNarrowingError):
            DecimalValue(25, 2).align_to(1)

    def test_negative_scale_raises(self) -> None:
        with pytest.raises(InvalidScaleError):
            DecimalValue(1, -1)
