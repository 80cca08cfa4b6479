from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from clipnote import __version__
from clipnote.api.routers import meta_router, pages_router, summaries_router
from clipnote.application.controller import SummaryGateway, gemini_gateway
from clipnote.application.pages import PageRegistry
from clipnote.core.config import Settings, get_settings
from clipnote.core.errors import AppError
from clipnote.core.handlers import handle_app_error, handle_validation_error
from clipnote.core.lifespan import lifespan
from clipnote.core.logging import setup_logging
from clipnote.core.middleware import log_requests


def create_app(settings: Settings | None = None, gateway: SummaryGateway | None = None) -> FastAPI:
    """
    Application factory for creating FastAPI instances.

    Args:
        settings: Optional settings override. If None, loads from environment.
        gateway: Optional summary gateway. If None, calls Gemini with ``settings``.
                 Tests pass a fake here.
    """
    if settings is None:
        settings = get_settings()
    if gateway is None:
        gateway = gemini_gateway(settings)

    middleware: list[Middleware] = []
    if settings.cors_allow_origins:
        middleware.append(
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_allow_origins,
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        )

    app = FastAPI(
        title="ClipNote",
        description="AI-powered article summarization",
        version=__version__,
        middleware=middleware,
        lifespan=lifespan,
    )
    app.include_router(pages_router)
    app.include_router(summaries_router)
    app.include_router(meta_router)
    app.state.settings = settings
    app.state.pages = PageRegistry(gateway, settings.max_pages)

    app.add_middleware(BaseHTTPMiddleware, dispatch=log_requests)
    app.add_exception_handler(AppError, handle_app_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]

    return app


load_dotenv()
# Initialize logging once at module load
setup_logging()

# Default app instance for uvicorn (uvicorn clipnote.api.app:app)
app = create_app()
