"""Value Objects shared across the catalog domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Union

from catalog.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors in prices
    and price-range filters.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Comparison -----------------------------------------------------------

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot compare {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


# ── Sizes ────────────────────────────────────────────────────────────────────

MIN_NUMERIC_SIZE = 1
MAX_NUMERIC_SIZE = 50
MAX_LABEL_LENGTH = 10


@dataclass(frozen=True)
class NumericSize:
    """Shoe-like size: an integer between 1 and 50."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Numeric size must be an integer, got {type(self.value).__name__}"
            )
        if not MIN_NUMERIC_SIZE <= self.value <= MAX_NUMERIC_SIZE:
            raise ValidationError(
                f"Numeric size must be between {MIN_NUMERIC_SIZE} and "
                f"{MAX_NUMERIC_SIZE}, got {self.value}"
            )

    def to_raw(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class LabelSize:
    """Letter size such as S, M, L or XL."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Label size must be a string, got {type(self.value).__name__}"
            )
        if not self.value.strip() or len(self.value) > MAX_LABEL_LENGTH:
            raise ValidationError(
                "Size must be a number (1-50) or a non-empty string "
                f"(max {MAX_LABEL_LENGTH} characters)"
            )

    def to_raw(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# Dataclass equality compares the class first, so NumericSize(8) never
# equals LabelSize("8").
Size = Union[NumericSize, LabelSize]


def parse_size(raw: object) -> Size:
    """Build a Size from its native JSON shape (int or str)."""
    if isinstance(raw, (NumericSize, LabelSize)):
        return raw
    if isinstance(raw, bool):
        raise ValidationError("Size must be a number or a string")
    if isinstance(raw, int):
        return NumericSize(raw)
    if isinstance(raw, str):
        return LabelSize(raw)
    raise ValidationError("Size must be a number or a string")


# ── Product attributes ───────────────────────────────────────────────────────


class Gender(Enum):
    MEN = "men"
    WOMEN = "women"
    UNISEX = "unisex"
    KIDS = "kids"

    @staticmethod
    def of(raw: str | Gender) -> Gender:
        if isinstance(raw, Gender):
            return raw
        try:
            return Gender(raw)
        except ValueError as exc:
            allowed = ", ".join(g.value for g in Gender)
            raise ValidationError(
                f"Gender must be one of: {allowed}, got {raw!r}"
            ) from exc


@dataclass(frozen=True)
class Rating:
    """Average review score and number of reviews."""

    average: float = 0.0
    count: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.average <= 5:
            raise ValidationError("Rating average must be between 0 and 5")
        if self.count < 0:
            raise ValidationError("Rating count cannot be negative")


_SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")


@dataclass(frozen=True)
class Slug:
    """URL-friendly identifier (e.g. 'nike', 't-shirts')."""

    value: str

    def __post_init__(self) -> None:
        if not _SLUG_PATTERN.match(self.value):
            raise ValidationError(
                "Slug can only contain lowercase letters, numbers, and hyphens"
            )

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def of(raw: str) -> Slug:
        if not isinstance(raw, str):
            raise ValidationError("Slug must be a string")
        return Slug(raw.strip().lower())

    @staticmethod
    def from_name(name: str) -> Slug:
        """Derive a slug: lowercase, collapse non-alphanumerics to '-'."""
        slug = re.sub(r"[^a-z0-9]+", "-", name.lower().strip()).strip("-")
        if not slug:
            raise ValidationError(f"Cannot derive a slug from name {name!r}")
        return Slug(slug)
