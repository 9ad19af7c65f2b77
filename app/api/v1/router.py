from fastapi import APIRouter

from app.api.routers import queries

api_router = APIRouter()

api_router.include_router(queries.router)
