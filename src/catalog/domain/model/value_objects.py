"""Value Objects for the catalog domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
Strings are trimmed before they are validated and stored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.exceptions import ValidationError, ValidationErrorKind

NAME_MAX_LENGTH = 255


def _trimmed(value: object, label: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(
            f"{label} must be a string, got {type(value).__name__}",
            ValidationErrorKind.INVALID_STATE,
        )
    return value.strip()


def _validated_name(value: object, label: str) -> str:
    trimmed = _trimmed(value, label)
    if not trimmed:
        raise ValidationError(
            f"{label} cannot be empty", ValidationErrorKind.EMPTY_VALUE
        )
    if len(trimmed) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"{label} cannot exceed {NAME_MAX_LENGTH} characters",
            ValidationErrorKind.LENGTH_EXCEEDED,
        )
    return trimmed


@dataclass(frozen=True)
class CategoryId:
    """Typed reference to a category.

    Only non-emptiness is checked; whether the category exists is a
    repository concern.
    """

    value: str

    def __post_init__(self) -> None:
        trimmed = _trimmed(self.value, "Category ID")
        if not trimmed:
            raise ValidationError(
                "Category ID cannot be empty", ValidationErrorKind.EMPTY_VALUE
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryName:
    """A category name: 1 to 255 characters after trimming."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validated_name(self.value, "Category name"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductName:
    """A product name: 1 to 255 characters after trimming.

    Deliberately a separate type from CategoryName even though the
    rules currently coincide.
    """

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validated_name(self.value, "Product name"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Price:
    """A non-negative product price.

    Stored as a float.  ``format()`` is for display only and never
    takes part in comparisons.
    """

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(
            self.value, (int, float, Decimal)
        ):
            raise ValidationError(
                f"Price must be a number, got {type(self.value).__name__}",
                ValidationErrorKind.INVALID_NUMBER,
            )
        value = float(self.value)
        if not math.isfinite(value):
            raise ValidationError(
                f"Price must be a finite number, got {self.value!r}",
                ValidationErrorKind.INVALID_NUMBER,
            )
        if value < 0:
            raise ValidationError(
                "Price cannot be negative", ValidationErrorKind.NEGATIVE_VALUE
            )
        object.__setattr__(self, "value", value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    # --- Display --------------------------------------------------------------

    def format(
        self,
        symbol: str = "R$",
        thousands_sep: str = ".",
        decimal_sep: str = ",",
    ) -> str:
        """Render as e.g. ``R$ 1.299,99``."""
        raw = f"{self.value:,.2f}"
        whole, cents = raw.split(".")
        return f"{symbol} {whole.replace(',', thousands_sep)}{decimal_sep}{cents}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Price:
        """Convenient factory that coerces CLI or JSON input safely."""
        if isinstance(amount, str):
            try:
                amount = float(amount.strip())
            except ValueError as exc:
                raise ValidationError(
                    f"Invalid price: {amount!r}", ValidationErrorKind.INVALID_NUMBER
                ) from exc
        return Price(amount)
