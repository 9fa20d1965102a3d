"""Value Objects for the product catalog.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
Each ``of()`` factory is the boundary where loosely-typed input (JSON
bodies, URL segments, CLI options) is checked and coerced.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from catalog.domain.exceptions import InvalidFieldError, InvalidIdentifierError

MAX_NAME_LENGTH = 255


def _is_number(value: object) -> bool:
    # bool is a subclass of int but never a valid quantity or amount
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class ProductId:
    """Storage-assigned integer primary key."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidIdentifierError(
                f"Product ID must be an integer, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(raw: str | int) -> ProductId:
        """Parse a path segment or option value into a ProductId."""
        if isinstance(raw, int) and not isinstance(raw, bool):
            return ProductId(raw)
        text = str(raw).strip()
        digits = text[1:] if text.startswith("-") else text
        # int() alone would also take "+1", "0_1" and non-ASCII digits
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidIdentifierError(f"Invalid product ID: {raw!r}")
        return ProductId(int(text))


@dataclass(frozen=True)
class ProductName:
    """Product name, 1-255 characters once surrounding whitespace is trimmed."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidFieldError("name", "Product name must be a string")
        if not self.value.strip():
            raise InvalidFieldError("name", "Product name is required")
        if len(self.value) > MAX_NAME_LENGTH:
            raise InvalidFieldError(
                "name", f"Product name cannot exceed {MAX_NAME_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def of(raw: object) -> ProductName:
        if not isinstance(raw, str):
            raise InvalidFieldError("name", "Product name must be a string")
        trimmed = raw.strip()
        if not trimmed:
            raise InvalidFieldError("name", "Product name is required")
        return ProductName(trimmed)


@dataclass(frozen=True)
class Price:
    """A finite, non-negative price.

    Stored as float because that is the representation returned to
    clients; storage keeps it as a NUMERIC column.
    """

    amount: float

    def __post_init__(self) -> None:
        if not isinstance(self.amount, float):
            raise InvalidFieldError(
                "price", f"Price must be a float, got {type(self.amount).__name__}"
            )
        if not math.isfinite(self.amount):
            raise InvalidFieldError("price", "Price must be a finite number")
        if self.amount < 0:
            raise InvalidFieldError("price", f"Price cannot be negative, got {self.amount}")

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(raw: object) -> Price:
        """Accept JSON numbers only; strings such as "9.99" are rejected."""
        if not _is_number(raw):
            raise InvalidFieldError("price", "Price must be a number")
        try:
            return Price(float(raw))
        except OverflowError as exc:
            raise InvalidFieldError("price", "Price must be a finite number") from exc


@dataclass(frozen=True)
class Stock:
    """A non-negative integer stock level."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidFieldError(
                "stock", f"Stock must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise InvalidFieldError("stock", f"Stock cannot be negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(raw: object) -> Stock:
        """Accept integers, and floats with no fractional part (e.g. 3.0)."""
        if isinstance(raw, float) and math.isfinite(raw) and raw.is_integer():
            raw = int(raw)
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise InvalidFieldError("stock", "Stock must be an integer")
        return Stock(raw)
