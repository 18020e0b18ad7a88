from legal_catalog.api.http.health import router as health_router
from legal_catalog.api.http.categories import router as categories_router
from legal_catalog.api.http.documents import router as documents_router

__all__ = [
    "health_router",
    "categories_router",
    "documents_router"
]
