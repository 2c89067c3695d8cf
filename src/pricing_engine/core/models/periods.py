"""Calendar month value object.

Month counters (subscriber month, coupon month) are computed with plain
integer arithmetic on ``year * 12 + month`` instead of date differences.
"""

import re
from datetime import date, datetime
from functools import total_ordering
from typing import Union

from pydantic import BaseModel, Field

from pricing_engine.shared.exceptions import InvalidYearMonthError
from pricing_engine.shared.formatters import format_month_label

_YEAR_MONTH_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


@total_ordering
class YearMonth(BaseModel):
    """A calendar month (e.g. 2025-03)."""

    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        """Parse a ``YYYY-MM`` string.

        Raises:
            InvalidYearMonthError: If the text is not a valid month reference
        """
        match = _YEAR_MONTH_RE.match(value) if isinstance(value, str) else None
        if not match:
            raise InvalidYearMonthError(f"Mês inválido (esperado AAAA-MM): {value!r}")

        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            raise InvalidYearMonthError(f"Mês fora do intervalo 1-12: {value!r}")
        return cls(year=year, month=month)

    @classmethod
    def from_date(cls, value: Union[date, datetime]) -> "YearMonth":
        return cls(year=value.year, month=value.month)

    @property
    def index(self) -> int:
        """Absolute month number, ``year * 12 + month``."""
        return self.year * 12 + self.month

    @property
    def label(self) -> str:
        """Short display label like "Dez/25"."""
        return format_month_label(self.year, self.month)

    def shift(self, months: int) -> "YearMonth":
        """Return the month ``months`` away (negative goes back)."""
        zero_based = self.year * 12 + (self.month - 1) + months
        return YearMonth(year=zero_based // 12, month=zero_based % 12 + 1)

    def months_since(self, other: "YearMonth") -> int:
        """Whole months from ``other`` to this month (0 when equal)."""
        return self.index - other.index

    def __lt__(self, other: "YearMonth") -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.index < other.index

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
