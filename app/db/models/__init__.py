from app.db.models.stock import (
    BRAND_NAME,
    PRODUCT_CATEGORY,
    PRODUCT_NAME,
    SHIPPED_TIMESTAMP,
    STOCK_ID,
    partition_column,
    stock_table,
)

__all__ = [
    "STOCK_ID",
    "BRAND_NAME",
    "PRODUCT_NAME",
    "PRODUCT_CATEGORY",
    "SHIPPED_TIMESTAMP",
    "partition_column",
    "stock_table",
]
