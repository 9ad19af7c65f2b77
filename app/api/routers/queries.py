from datetime import date

from fastapi import APIRouter, Body, Depends, Query

from app.api.deps import get_settings
from app.core.config import Settings
from app.schemas.stock_query import StockQuery
from app.services.stock_query import get_query_string

router = APIRouter(prefix="/generate", tags=["queries"])


@router.post("/athena/query", response_model=StockQuery)
def generate_athena_query(
    from_date: date = Query(..., alias="fromDate", description="fromDate ISO-8601 compliant"),
    to_date: date = Query(..., alias="toDate", description="toDate ISO-8601 compliant"),
    brands: list[str] = Body(..., description="List of brands"),
    settings: Settings = Depends(get_settings),
):
    """
    Generate a sample Athena compliant stock query.

    - fromDate/toDate: inclusive date range, used to prune year/month/day partitions
    - body: JSON list of brand names to restrict the query to
    """
    result = get_query_string(settings, from_date, to_date, brands)
    return StockQuery.model_validate(result)
