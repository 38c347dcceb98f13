"""Main FastAPI application for the PlantUML UI."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..core import PlantUMLClient
from .errors import RenderAPIError
from .models.config import APIConfig
from .models.responses import ErrorCode
from .routes import health, render


logger = logging.getLogger(__name__)

BUNDLED_STATIC_DIR = Path(__file__).parent.parent / "static"


def create_app(config: APIConfig, plantuml_client: Optional[PlantUMLClient] = None) -> FastAPI:
    """
    Build the application for one PlantUML server.

    Args:
        config: API configuration
        plantuml_client: Client to render with (built from config if omitted)

    Raises:
        InvalidRendererAddressError: config.plantuml_server_addr is not an absolute URL
    """
    if plantuml_client is None:
        plantuml_client = PlantUMLClient(config.plantuml_server_addr)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting PlantUML UI v%s", app.version)
        logger.info("Configuration: %s", config.model_dump())
        logger.info("Rendering with PlantUML server %s (%s)",
                    plantuml_client.server_addr, plantuml_client.config.to_dict())
        yield
        logger.info("API shutdown complete")

    app = FastAPI(
        title="PlantUML UI",
        description="Web UI and HTTP API in front of a PlantUML server",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.config = config
    app.state.plantuml_client = plantuml_client

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RenderAPIError)
    async def render_error_handler(request: Request, exc: RenderAPIError):
        """Answer failed renders with the error envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response().model_dump()
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Request bodies that cannot be decoded are malformed requests."""
        logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
        return await render_error_handler(request, RenderAPIError(ErrorCode.MALFORMED_REQUEST))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception("Unexpected error handling %s", request.url.path)
        return await render_error_handler(request, RenderAPIError(ErrorCode.RENDER_FAILED))

    # Include routers
    app.include_router(health.router)
    app.include_router(render.router)

    # Everything else is the UI
    static_dir = Path(config.static_dir) if config.static_dir else BUNDLED_STATIC_DIR
    app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="ui")

    return app
