"""Translate partition filters into a SQLAlchemy boolean expression."""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import ColumnElement, Select, and_, or_

from app.domain.partition_filter import PartitionFilter

logger = logging.getLogger(__name__)


def compile_partition_predicate(
    filters: Iterable[PartitionFilter],
    year_column: ColumnElement | None,
    month_column: ColumnElement | None,
    day_column: ColumnElement | None,
) -> tuple[ColumnElement[bool] | None, bool]:
    """
    Build ``(year = Y AND month IN (...) AND day IN (...)) OR ...`` for the given filters.

    Returns a ``(predicate, applied)`` pair. When any partition column is
    missing, or no clause could be built, the predicate is None and
    ``applied`` is False: callers carry on without date pruning.
    """
    if year_column is None or month_column is None or day_column is None:
        logger.warning(
            "Partition columns not configured (year=%s, month=%s, day=%s), "
            "skipping date partition filter",
            year_column is not None,
            month_column is not None,
            day_column is not None,
        )
        return None, False

    filters = sorted(filters)
    clauses = []
    for partition_filter in filters:
        clause = _partition_clause(partition_filter, year_column, month_column, day_column)
        if clause is not None:
            clauses.append(clause)

    if not clauses:
        logger.error(
            "No partition clause could be built from %d partition filters, "
            "query proceeds without date pruning",
            len(filters),
        )
        return None, False

    return or_(*clauses), True


def apply_date_filter(
    query: Select,
    filters: Iterable[PartitionFilter],
    year_column: ColumnElement | None,
    month_column: ColumnElement | None,
    day_column: ColumnElement | None,
) -> tuple[Select, bool]:
    """AND the compiled partition predicate into ``query``'s WHERE clause."""
    predicate, applied = compile_partition_predicate(
        filters, year_column, month_column, day_column
    )
    if applied:
        query = query.where(predicate)
    return query, applied


def _partition_clause(
    partition_filter: PartitionFilter,
    year_column: ColumnElement,
    month_column: ColumnElement,
    day_column: ColumnElement,
) -> ColumnElement[bool] | None:
    if partition_filter.has_only_year():
        return year_column == partition_filter.year
    if partition_filter.has_only_year_month():
        return and_(
            year_column == partition_filter.year,
            month_column.in_(partition_filter.months),
        )
    if partition_filter.has_year_month_day():
        return and_(
            year_column == partition_filter.year,
            month_column.in_(partition_filter.months),
            day_column.in_(partition_filter.days),
        )
    return None
