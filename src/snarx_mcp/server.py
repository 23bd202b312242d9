"""
Snarx MCP Server - Main FastAPI Application

Route table:
- /health for liveness
- / for service metadata
- /mcp/tools, /mcp/resources, /mcp/prompts for the MCP discovery catalogs

Unmatched requests (unknown path or wrong method) get a 404 listing the
available endpoints; failures while building a response get a 500.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import Settings, get_settings
from .handlers import prompts, resources, system, tools
from .middleware import install_middleware
from .models import (
    HealthResponse,
    NotFoundError,
    PromptListResponse,
    ResourceListResponse,
    RootResponse,
    ToolListResponse,
)

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = ["/", "/health", "/mcp/tools", "/mcp/resources", "/mcp/prompts"]

# Registered paths answer GET and its HEAD counterpart only
ROUTE_METHODS = ["GET", "HEAD"]

BANNER_RULE = "━" * 46


def log_startup_banner(settings: Settings) -> None:
    """Log the startup banner with the URLs being served."""
    base_url = f"http://localhost:{settings.port}"
    lines = [
        "",
        "🚀 Snarx MCP Server iniciado exitosamente!",
        BANNER_RULE,
        f"📡 Servidor: {base_url}",
        f"🏥 Health:   {base_url}/health",
        f"🛠️  Tools:    {base_url}/mcp/tools",
        f"📚 Resources: {base_url}/mcp/resources",
        f"💬 Prompts:   {base_url}/mcp/prompts",
        BANNER_RULE,
        f"🛠️  Environment: {settings.environment}",
        f"🏗️  Architecture: {system.ARCHITECTURE}",
        f"👨‍💻 Author: {system.AUTHOR}",
        BANNER_RULE,
    ]
    for line in lines:
        logger.info(line)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application: middleware chain, route table and fallback handlers."""
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_startup_banner(settings)
        yield

    app = FastAPI(
        title="Snarx MCP Server",
        description="Static health, metadata and MCP discovery endpoints",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    install_middleware(app, compression_min_size=settings.compression_min_size)

    # ========================================================================
    # Error Handlers
    # ========================================================================

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        """Answer unknown paths and unsupported methods with the endpoint catalog."""
        if exc.status_code not in (404, 405):
            return await http_exception_handler(request, exc)
        return JSONResponse(
            status_code=404,
            content=NotFoundError(availableEndpoints=list(AVAILABLE_ENDPOINTS)).model_dump()
        )

    # ========================================================================
    # Health & Root
    # ========================================================================

    @app.api_route("/health", methods=ROUTE_METHODS, response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return await system.get_health(settings.environment)

    @app.api_route("/", methods=ROUTE_METHODS, response_model=RootResponse, tags=["Root"])
    async def root():
        """Root endpoint with service information."""
        return await system.get_root()

    # ========================================================================
    # MCP Catalog Endpoints
    # ========================================================================

    @app.api_route("/mcp/tools", methods=ROUTE_METHODS, response_model=ToolListResponse, tags=["MCP"])
    async def list_tools_endpoint():
        """List available tools."""
        return await tools.list_tools()

    @app.api_route("/mcp/resources", methods=ROUTE_METHODS, response_model=ResourceListResponse, tags=["MCP"])
    async def list_resources_endpoint():
        """List available resources."""
        return await resources.list_resources()

    @app.api_route("/mcp/prompts", methods=ROUTE_METHODS, response_model=PromptListResponse, tags=["MCP"])
    async def list_prompts_endpoint():
        """List available prompts."""
        return await prompts.list_prompts()

    return app


app = create_app()


def build_server(settings: Optional[Settings] = None) -> uvicorn.Server:
    """Configure a uvicorn server bound to the configured host and port."""
    if settings is None:
        settings = get_settings()
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return uvicorn.Server(config)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    build_server(settings).run()


if __name__ == "__main__":
    main()
