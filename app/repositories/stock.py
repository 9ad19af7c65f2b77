from dataclasses import dataclass
from datetime import date

from sqlalchemy import ColumnElement, Select, TableClause, and_, or_

from app.db.athena import new_query
from app.db.models.stock import (
    BRAND_NAME,
    PRODUCT_CATEGORY,
    PRODUCT_NAME,
    SHIPPED_TIMESTAMP,
    STOCK_ID,
    partition_column,
)
from app.domain.date_partitions import plan
from app.domain.partition_predicate import apply_date_filter


@dataclass(frozen=True)
class ProductFilter:
    """Products a stock query is restricted to.

    Matches any product in ``categories``, or the single featured
    ``featured_product`` of ``featured_category``.
    """

    categories: tuple[str, ...] = ()
    featured_category: str | None = None
    featured_product: str | None = None


@dataclass(frozen=True)
class PartitionColumns:
    year: str | None = "year"
    month: str | None = "month"
    day: str | None = "day"

    def names(self) -> tuple[str | None, ...]:
        return (self.year, self.month, self.day)


def build_stock_query(
    stock: TableClause,
    from_date: date,
    to_date: date,
    brands: list[str],
    product_filter: ProductFilter,
    partition_columns: PartitionColumns,
) -> tuple[Select, bool]:
    """
    Build the stock query for the given brands and inclusive date range.

    Returns the query and whether a date partition predicate was applied.
    """
    query = new_query(
        stock.c[STOCK_ID],
        stock.c[PRODUCT_CATEGORY],
        stock.c[PRODUCT_NAME],
        stock.c[BRAND_NAME],
        stock.c[SHIPPED_TIMESTAMP],
    ).select_from(stock)

    query = query.where(stock.c[BRAND_NAME].in_(brands))

    query, date_filter_applied = apply_date_filter(
        query,
        plan(from_date, to_date),
        partition_column(stock, partition_columns.year),
        partition_column(stock, partition_columns.month),
        partition_column(stock, partition_columns.day),
    )

    product_predicate = _product_predicate(stock, product_filter)
    if product_predicate is not None:
        query = query.where(product_predicate)

    query = query.order_by(stock.c[SHIPPED_TIMESTAMP].desc())
    return query, date_filter_applied


def _product_predicate(
    stock: TableClause, product_filter: ProductFilter
) -> ColumnElement[bool] | None:
    predicates = []
    if product_filter.categories:
        predicates.append(stock.c[PRODUCT_CATEGORY].in_(product_filter.categories))
    if product_filter.featured_category and product_filter.featured_product:
        predicates.append(
            and_(
                stock.c[PRODUCT_CATEGORY] == product_filter.featured_category,
                stock.c[PRODUCT_NAME] == product_filter.featured_product,
            )
        )
    if not predicates:
        return None
    return or_(*predicates)
