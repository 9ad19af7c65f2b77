from pydantic import BaseModel, ConfigDict, Field


class StockQuery(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    query: str = Field(..., description="Athena compatible SQL text")
    date_filter_applied: bool = Field(
        ..., description="Whether the query prunes year/month/day partitions"
    )
