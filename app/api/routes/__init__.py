"""
Route modules for the Blogverse API.

Each module defines a FastAPI APIRouter for a specific domain.
All routers served under the API prefix are collected in ``api_routers``.
"""

from app.api.routes.system import router as system_router, health_router
from app.api.routes.entries import router as entries_router
from app.api.routes.tags import router as tags_router

api_routers = [
    system_router,
    entries_router,
    tags_router,
]

__all__ = ["api_routers", "health_router"]
