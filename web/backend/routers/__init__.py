"""API route handlers."""

from .providers import router as providers_router
from .categories import router as categories_router
from .reports import router as reports_router
from .admin import router as admin_router
