"""
API Routes package.
"""
from fastapi import APIRouter

from app.api.routes.auth import router as auth_router
from app.api.routes.health import router as health_router
from app.api.routes.users import router as users_router
from app.api.routes.courses import router as courses_router
from app.api.routes.skills import router as skills_router
from app.api.routes.requests import router as requests_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(courses_router)
api_router.include_router(skills_router)
api_router.include_router(requests_router)

__all__ = [
    "api_router",
    "auth_router",
    "health_router",
    "users_router",
    "courses_router",
    "skills_router",
    "requests_router",
]
