"""
API package.
"""
from app.api.routes import api_router
from app.api.deps import (
    get_optional_actor,
)

__all__ = [
    "api_router",
    "get_optional_actor",
]
