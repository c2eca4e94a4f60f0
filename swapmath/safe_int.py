"""Safe integer wrapper for pool arithmetic.

Coin amounts and LSP supplies are u64 on-chain, while the stable-swap curve
math runs in u128 intermediates. SafeInt wraps a Python int so that the
failure modes the settlement layer would abort on show up as exceptions:
- Division by zero raises DivisionByZero
- Subtraction underflow raises Underflow
- Values outside u64/u128 are caught on conversion

Usage pattern:
    from swapmath.safe_int import S

    def amount_out(dx: int, x: int, y: int) -> int:
        sdx, sx, sy = S(dx), S(x), S(y)
        return ((sy * sdx) // (sx + sdx)).value
"""

from __future__ import annotations

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class UintOverflow(SafeIntError):
    """Value does not fit the requested unsigned width."""

    pass


class SafeInt:
    """Integer with safe arithmetic operations.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division (operands are non-negative on every pool path).

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __rfloordiv__(self, other: int) -> SafeInt:
        if self._value == 0:
            raise DivisionByZero(f"Division by zero: {other} // 0")
        return SafeInt(other // self._value)

    def __abs__(self) -> SafeInt:
        return SafeInt(abs(self._value))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def min(self, other: SafeInt | int) -> SafeInt:
        """Return minimum of self and other."""
        return SafeInt(min(self._value, _extract_value(other)))

    def clamp(self, min_val: int, max_val: int) -> SafeInt:
        """Clamp value to range [min_val, max_val]."""
        return SafeInt(max(min_val, min(self._value, max_val)))

    def to_u64(self) -> int:
        """Convert to int, validating u64 bounds.

        Raises:
            UintOverflow: If value is negative or exceeds 2^64-1
        """
        return self._to_uint(U64_MAX, "u64")

    def to_u128(self) -> int:
        """Convert to int, validating u128 bounds.

        Raises:
            UintOverflow: If value is negative or exceeds 2^128-1
        """
        return self._to_uint(U128_MAX, "u128")

    def _to_uint(self, bound: int, name: str) -> int:
        if self._value < 0:
            raise UintOverflow(f"Negative value cannot be {name}: {self._value}")
        if self._value > bound:
            raise UintOverflow(f"Value exceeds {name} max: {self._value}")
        return self._value


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
