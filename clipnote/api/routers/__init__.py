"""API routers."""

from clipnote.api.routers.meta import router as meta_router
from clipnote.api.routers.pages import router as pages_router
from clipnote.api.routers.summaries import router as summaries_router

__all__ = ["meta_router", "pages_router", "summaries_router"]
