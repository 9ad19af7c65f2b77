"""Date range to partition filter planning.

A table partitioned by ``year``/``month``/``day`` string columns is pruned
best when the date predicate names whole years or whole months wherever the
range allows it, and falls back to individual days only at the two edges
of the range that do not start or end on a natural boundary.

The range is classified into one of three shapes:

- multi-year: at least one whole calendar year (1 January to 31 December)
  lies inside the range
- multi-month: no whole year in between, but at least one whole month
  strictly between the start month and the end month
- single/adjacent-month: the range touches one month or two neighbouring
  months

Every shape produces filters that cover ``[start, end]`` exactly, with no
two filters selecting the same day.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Iterator

from app.domain.partition_filter import PartitionFilter
from app.errors import InvalidRangeError

logger = logging.getLogger(__name__)


def plan(start: date, end: date) -> frozenset[PartitionFilter]:
    """Return the partition filters whose disjunction covers ``[start, end]``.

    Raises:
        InvalidRangeError: If a bound is missing or ``start`` is after ``end``.
    """
    filters = frozenset(iter_partition_filters(start, end))
    logger.debug(
        "Planned %d partition filters for %s..%s", len(filters), start, end
    )
    return filters


def iter_partition_filters(start: date, end: date) -> Iterator[PartitionFilter]:
    """Yield the partition filters for ``[start, end]`` in emission order.

    For multi-year ranges the whole middle years come first, then the start
    year fragments, then the end year fragments. Consumers must treat the
    result as an unordered disjunction.
    """
    _validate_range(start, end)

    if _whole_years_between(start, end) > 0:
        yield from _multi_year(start, end)
        return

    months_between = _months_between(start, end)
    if months_between > 0:
        yield from _multi_month(start, end, months_between)
    else:
        yield from _single_or_adjacent_month(start, end)


def month_range(first: int, last: int) -> tuple[str, ...]:
    """Zero-padded months from ``first`` to ``last`` inclusive."""
    return tuple(f"{m:02d}" for m in range(first, last + 1))


def day_range(first: int, last: int) -> tuple[str, ...]:
    """Zero-padded days from ``first`` to ``last`` inclusive."""
    return tuple(f"{d:02d}" for d in range(first, last + 1))


def _validate_range(start: date | None, end: date | None) -> None:
    if start is None or end is None:
        raise InvalidRangeError("Both start and end dates are required")
    if start > end:
        raise InvalidRangeError(
            f"Start date ({start}) cannot be after end date ({end})"
        )


def _last_day_of_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def _is_last_day_of_month(day: date) -> bool:
    return day.day == _last_day_of_month(day)


def _whole_years_between(start: date, end: date) -> int:
    """Count calendar years lying entirely inside ``[start, end]``."""
    first = start.year if (start.month, start.day) == (1, 1) else start.year + 1
    last = end.year if (end.month, end.day) == (12, 31) else end.year - 1
    return max(0, last - first + 1)


def _months_between(start: date, end: date) -> int:
    """Count whole months strictly between the months of ``start`` and ``end``."""
    return max(0, (end.year * 12 + end.month) - (start.year * 12 + start.month) - 1)


def _year(year: int) -> PartitionFilter:
    return PartitionFilter(str(year))


def _months(year: int, first: int, last: int) -> Iterator[PartitionFilter]:
    # An empty month list would widen the filter to the whole year.
    if first <= last:
        yield PartitionFilter(str(year), month_range(first, last))


def _days(year: int, month: int, first: int, last: int) -> PartitionFilter:
    return PartitionFilter(str(year), month_range(month, month), day_range(first, last))


def _multi_year(start: date, end: date) -> Iterator[PartitionFilter]:
    if start.year == end.year:
        # Only reachable for 1 January .. 31 December of a single year.
        yield _year(start.year)
        return

    for year in range(start.year + 1, end.year):
        yield _year(year)

    if start.month == 1 and start.day == 1:
        yield _year(start.year)
    elif start.day == 1:
        yield from _months(start.year, start.month, 12)
    else:
        yield _days(start.year, start.month, start.day, _last_day_of_month(start))
        yield from _months(start.year, start.month + 1, 12)

    if end.month == 12 and end.day == 31:
        yield _year(end.year)
    elif _is_last_day_of_month(end):
        yield from _months(end.year, 1, end.month)
    else:
        yield _days(end.year, end.month, 1, end.day)
        yield from _months(end.year, 1, end.month - 1)


def _multi_month(start: date, end: date, months_between: int) -> Iterator[PartitionFilter]:
    if start.year != end.year:
        if start.month == 12:
            yield from _months(end.year, 1, months_between)
        else:
            yield from _months(start.year, start.month + 1, 12)
            months_in_next_year = abs((12 - start.month) - months_between)
            yield from _months(end.year, 1, months_in_next_year)
    else:
        yield from _months(start.year, start.month + 1, start.month + months_between)

    if start.day == 1:
        yield from _months(start.year, start.month, start.month)
    else:
        yield _days(start.year, start.month, start.day, _last_day_of_month(start))

    if _is_last_day_of_month(end):
        yield from _months(end.year, end.month, end.month)
    else:
        yield _days(end.year, end.month, 1, end.day)


def _single_or_adjacent_month(start: date, end: date) -> Iterator[PartitionFilter]:
    if (start.year, start.month) == (end.year, end.month):
        if start.day == 1 and _is_last_day_of_month(end):
            yield from _months(start.year, start.month, start.month)
        else:
            yield _days(start.year, start.month, start.day, end.day)
        return

    if start.day == 1:
        yield from _months(start.year, start.month, start.month)
    else:
        yield _days(start.year, start.month, start.day, _last_day_of_month(start))

    # The end month is always listed day by day, even when it is complete.
    yield _days(end.year, end.month, 1, end.day)
