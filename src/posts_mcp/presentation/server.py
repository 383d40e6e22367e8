"""Posts MCP Server.

Main MCP server setup.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from mcp.server import Server
from mcp.server.stdio import stdio_server

from posts_mcp.infrastructure.di import Container
from posts_mcp.presentation.tools import register_posts_tools
from posts_mcp.shared.config import settings
from posts_mcp.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_server(container: Container) -> Server:
    """Create and configure the MCP server.

    Args:
        container: Dependency container providing the view-model

    Returns:
        Configured MCP Server instance
    """
    server = Server(settings.app_name)

    register_posts_tools(server, container.get_view_model())

    return server


@asynccontextmanager
async def lifespan(container: Container) -> AsyncGenerator[None, None]:
    """Manage server lifecycle.

    Closes the HTTP transport on shutdown.
    """
    logger.info(
        "Starting Posts MCP Server",
        version=settings.app_version,
        environment=settings.environment,
        api_base_url=settings.api_base_url,
    )

    try:
        yield
    finally:
        await container.aclose()
        logger.info("HTTP transport closed")
        logger.info("Posts MCP Server stopped")


async def run_server() -> None:
    """Run the MCP server."""
    setup_logging()
    container = Container()
    server = create_server(container)

    async with lifespan(container):
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def main() -> None:
    """Entry point for the MCP server."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
