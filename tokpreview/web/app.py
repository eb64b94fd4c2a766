"""FastAPI application for the tokpreview metadata proxy."""

from fastapi import FastAPI

from .. import __version__
from ..models.config import get_settings
from ..resolver import build_resolver
from .routes import metadata, videos


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="TokPreview",
        description="TikTok preview metadata proxy",
        version=__version__,
    )

    # Resolver and settings live on app state so routes and tests can swap them
    settings = get_settings()
    app.state.settings = settings
    app.state.resolver = build_resolver(settings)

    app.include_router(metadata.router, prefix="/api")
    app.include_router(videos.router, prefix="/api")

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "ok", "version": __version__}

    return app
