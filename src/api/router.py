"""Main API router."""

from fastapi import APIRouter

from src.api.random import router as random_router

api_router = APIRouter()

api_router.include_router(random_router, tags=["movies"])
