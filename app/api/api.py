from fastapi import APIRouter
from ..core.exceptions import API_ENDPOINTS
from .endpoints import health, users, genres, movies

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(health.router, prefix=API_ENDPOINTS["HEALTH_CHECK"], tags=["API functions"])
api_router.include_router(users.router, prefix=API_ENDPOINTS["USERS"], tags=["API functions"])
api_router.include_router(genres.router, prefix=API_ENDPOINTS["GENRES"], tags=["Genres"])
api_router.include_router(movies.router, prefix=API_ENDPOINTS["MOVIES"], tags=["Movies"])
