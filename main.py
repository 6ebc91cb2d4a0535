"""
Color Engine MCP Server - FastAPI implementation
Provides endpoints for parsing, validating and converting color codes
"""

import sys
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for package imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

from colorengine import ColorConversionService, Settings, get_settings
from colorengine.logging_config import configure_logging
from routers import colorTools_router
from routers.colorTools import get_service


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI app with its routes bound to one service."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Color Engine MCP Server",
        description="Parse, validate and convert colors between RGB, Hex, HSL, HSV, CMYK and LAB",
        version="1.0.0"
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    # Mount routers (paths unchanged)
    app.include_router(colorTools_router)

    service = ColorConversionService(settings)
    app.dependency_overrides[get_service] = lambda: service
    return app


app = create_app()


def run():
    """Start the server, exposing the routes as MCP tools when enabled."""
    settings = get_settings()
    if settings.mcp_enabled:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
