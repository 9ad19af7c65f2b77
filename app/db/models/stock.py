from sqlalchemy import ColumnElement, String, TableClause, column, table
from sqlalchemy.sql.elements import quoted_name

# Column names of the Athena stock table.
STOCK_ID = "stockid"
BRAND_NAME = "brandname"
PRODUCT_NAME = "productname"
PRODUCT_CATEGORY = "productcategory"
SHIPPED_TIMESTAMP = "shippedtimestamp"

STOCK_COLUMNS = (STOCK_ID, BRAND_NAME, PRODUCT_NAME, PRODUCT_CATEGORY, SHIPPED_TIMESTAMP)


def stock_table(
    name: str,
    *,
    schema: str | None = None,
    partition_columns: tuple[str | None, ...] = (),
    quote: bool = True,
) -> TableClause:
    """
    Build the stock table for query generation.

    Partition columns configured as None are left out of the table, so
    looking them up with ``partition_column`` yields None.

    Raises:
        ValueError: If a partition column reuses the name of another column.
    """
    names = list(STOCK_COLUMNS)
    for partition in partition_columns:
        if not partition:
            continue
        if partition in names:
            raise ValueError(f"Partition column '{partition}' clashes with another column")
        names.append(partition)
    return table(
        _identifier(name, quote),
        *(column(_identifier(n, quote), String) for n in names),
        schema=_identifier(schema, quote) if schema else None,
    )


def partition_column(stock: TableClause, name: str | None) -> ColumnElement | None:
    """Return the partition column called ``name``, or None if the table lacks it."""
    if not name:
        return None
    return stock.c.get(name)


def _identifier(name: str, quote: bool) -> str:
    return quoted_name(name, True) if quote else name
