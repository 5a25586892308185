from mdow.api.http.health import router as health_router
from mdow.api.http.editor import router as editor_router
from mdow.api.http.documents import router as documents_router
from mdow.api.http.debug import router as debug_router

__all__ = [
    "health_router",
    "editor_router",
    "documents_router",
    "debug_router"
]
