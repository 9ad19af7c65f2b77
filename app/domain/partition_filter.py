from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Iterator


@dataclass(frozen=True, order=True)
class PartitionFilter:
    """One OR-branch of a date partition predicate.

    Three shapes are legal:
    - year only: matches the whole year
    - year + months: matches the listed months in full
    - year + one month + days: matches the listed days of that month

    Months and days are two-character zero-padded strings ("01", "12").
    An empty tuple means the component is absent.
    """

    year: str
    months: tuple[str, ...] = ()
    days: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.year:
            raise ValueError("Partition filter year must not be empty")
        if self.days and len(self.months) != 1:
            raise ValueError(
                f"Day-level partition filter needs exactly one month, got {list(self.months)}"
            )

    def has_only_year(self) -> bool:
        return not self.months and not self.days

    def has_only_year_month(self) -> bool:
        return bool(self.months) and not self.days

    def has_year_month_day(self) -> bool:
        return bool(self.months) and bool(self.days)

    def dates(self) -> Iterator[date]:
        """Yield every calendar day selected by this filter, ascending."""
        year = int(self.year)
        months = self.months or tuple(f"{m:02d}" for m in range(1, 13))
        for month in months:
            if self.days:
                days = [int(d) for d in self.days]
            else:
                days = range(1, _days_in_month(year, int(month)) + 1)
            for day in days:
                yield date(year, int(month), day)


def _days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]
