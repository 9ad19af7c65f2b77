import logging
from dataclasses import dataclass
from datetime import date

import app.repositories.stock as stock_repo
from app.core.config import Settings
from app.db.athena import render_query
from app.db.models.stock import stock_table
from app.errors import DomainValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockQueryResult:
    query: str
    date_filter_applied: bool


def get_query_string(
    settings: Settings,
    from_date: date,
    to_date: date,
    brands: list[str],
) -> StockQueryResult:
    """
    Generate an Athena compatible query retrieving stock data.

    - Restricts to the given brands and the configured product filters
    - Prunes partitions to the inclusive date range when the table has
      year/month/day partition columns configured
    - Orders by shipped timestamp, newest first

    Raises:
        InvalidRangeError: If from_date is after to_date.
        DomainValidationError: If no brand is given.
    """
    logger.debug("Generating stock query from_date=%s to_date=%s", from_date, to_date)

    brands = [b for b in brands if b and b.strip()]
    if not brands:
        raise DomainValidationError("At least one brand must be provided")

    partition_columns = stock_repo.PartitionColumns(
        year=settings.partition_year_column,
        month=settings.partition_month_column,
        day=settings.partition_day_column,
    )
    stock = stock_table(
        settings.athena_table,
        schema=settings.athena_schema,
        partition_columns=partition_columns.names(),
        quote=settings.quote_identifiers,
    )
    product_filter = stock_repo.ProductFilter(
        categories=tuple(settings.product_categories),
        featured_category=settings.featured_category,
        featured_product=settings.featured_product,
    )

    query, date_filter_applied = stock_repo.build_stock_query(
        stock,
        from_date,
        to_date,
        brands,
        product_filter,
        partition_columns,
    )
    if not date_filter_applied:
        logger.debug(
            "Stock query for %s..%s generated without date partition filter",
            from_date,
            to_date,
        )

    sql = render_query(query)
    logger.info("Generated stock query: %s", sql)
    return StockQueryResult(query=sql, date_filter_applied=date_filter_applied)
