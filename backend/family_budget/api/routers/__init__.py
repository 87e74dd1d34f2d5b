from fastapi import APIRouter

from family_budget.api.routers import categories, health

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(categories.router)
