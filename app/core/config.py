from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Athena table
    athena_table: str = Field(alias="ATHENA_TABLE")
    athena_schema: str | None = Field(default=None, alias="ATHENA_SCHEMA")

    # Partition columns (set to an empty string when the table lacks one)
    partition_year_column: str | None = Field(default="year", alias="PARTITION_YEAR_COLUMN")
    partition_month_column: str | None = Field(default="month", alias="PARTITION_MONTH_COLUMN")
    partition_day_column: str | None = Field(default="day", alias="PARTITION_DAY_COLUMN")

    # Product filters
    product_categories: list[str] = Field(
        default=["toys", "mobiles", "essentials"], alias="PRODUCT_CATEGORIES"
    )
    featured_category: str | None = Field(default="furnitures", alias="FEATURED_CATEGORY")
    featured_product: str | None = Field(default="sofa", alias="FEATURED_PRODUCT")

    # SQL rendering
    quote_identifiers: bool = Field(default=True, alias="QUOTE_IDENTIFIERS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Frontend URL for CORS
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    @field_validator(
        "athena_schema",
        "partition_year_column",
        "partition_month_column",
        "partition_day_column",
        "featured_category",
        "featured_product",
        "frontend_url",
        mode="before",
    )
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
