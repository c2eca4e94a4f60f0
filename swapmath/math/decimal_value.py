"""Exact fixed-point decimal values.

A DecimalValue is an arbitrary-precision integer mantissa plus a decimal
scale, representing mantissa / 10^scale. It is used for share ratios and
user-entered amounts, where the text a user typed must survive a
parse/format round trip unchanged.

Values are only combined after alignment to a common scale. Alignment only
ever widens: narrowing would silently drop digits and is refused.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from swapmath.errors import InvalidScaleError, ScaleNarrowingError

# Digits with an optional fractional part; no sign, no exponent
_NUMERIC_RE = re.compile(r"[0-9]+(\.[0-9]*)?")


@dataclass(frozen=True)
class DecimalValue:
    """Fixed-point decimal: mantissa / 10^scale.

    Example: "12.50" is stored as DecimalValue(mantissa=1250, scale=2)
    """

    mantissa: int
    scale: int

    def __post_init__(self) -> None:
        if self.scale < 0:
            raise InvalidScaleError(f"Decimal scale must be non-negative, got {self.scale}")

    @classmethod
    def parse(cls, text: str) -> DecimalValue | None:
        """Parse a plain decimal string.

        Accepts "123", "0.25", "1." and similar. Rejects empty strings,
        signs, exponents, multiple dots and a redundant leading zero
        ("00", "00.5"); a single leading "0." is fine.

        Returns:
            DecimalValue, or None if the text is not a valid decimal
        """
        if not isinstance(text, str) or _NUMERIC_RE.fullmatch(text) is None:
            return None
        if text.startswith("00"):
            return None

        integer_part, _, fraction_part = text.partition(".")
        return cls(mantissa=int(integer_part + fraction_part), scale=len(fraction_part))

    @classmethod
    def from_int(cls, value: int) -> DecimalValue:
        """Create a whole-number value with scale 0."""
        return cls(mantissa=value, scale=0)

    def format(self, pad_to_scale: bool = False) -> str:
        """Render as decimal text.

        Args:
            pad_to_scale: If True, the fractional part has exactly `scale`
                digits. Otherwise trailing fractional zeros are trimmed
                ("1.50" renders as "1.5", "2.00" as "2").
        """
        sign = "-" if self.mantissa < 0 else ""
        digits = str(abs(self.mantissa))
        if self.scale == 0:
            return sign + digits

        digits = digits.rjust(self.scale + 1, "0")
        integer_part = digits[: -self.scale]
        fraction_part = digits[-self.scale :]
        if not pad_to_scale:
            fraction_part = fraction_part.rstrip("0")
        if not fraction_part:
            return sign + integer_part
        return f"{sign}{integer_part}.{fraction_part}"

    def to_float(self) -> float:
        """Approximate as float. Display only, never settlement arithmetic."""
        return self.mantissa / 10**self.scale

    def to_decimal(self) -> Decimal:
        """Convert exactly to Decimal."""
        return Decimal(f"{self.mantissa}E-{self.scale}")

    def can_align_to(self, target: int | DecimalValue) -> bool:
        """True if this value can be widened to the target scale."""
        return self.scale <= _target_scale(target)

    def align_to(self, target: int | DecimalValue) -> DecimalValue:
        """Widen to the target scale without changing the represented value.

        Raises:
            ScaleNarrowingError: If the target scale is smaller than this one
        """
        target_scale = _target_scale(target)
        if not self.can_align_to(target_scale):
            raise ScaleNarrowingError(
                f"Cannot align scale {self.scale} down to {target_scale} without truncation"
            )
        return DecimalValue(
            mantissa=self.mantissa * 10 ** (target_scale - self.scale),
            scale=target_scale,
        )

    def __str__(self) -> str:
        return self.format(pad_to_scale=True)


def _target_scale(target: int | DecimalValue) -> int:
    if isinstance(target, DecimalValue):
        return target.scale
    return target
