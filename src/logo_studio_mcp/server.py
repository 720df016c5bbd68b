"""Main FastMCP server, mounts the logo sub-server."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from . import tracing
from .client import GeminiClient
from .tools.logo import logo_server

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(server: FastMCP):
    """Startup/shutdown hook: tracing setup and shared client teardown."""
    tracing.setup()
    yield {}
    tracing.shutdown()
    closed = await GeminiClient.close_all()
    logger.info("Lifespan shutdown: closed %d client(s)", closed)


app = FastMCP(
    "logo-studio",
    instructions=(
        "Logo studio turns a short company brief into a minimalist, square "
        "logo image via a Gemini image model and presents it with a choice of "
        "reveal, float, or pulse animations."
    ),
    lifespan=_lifespan,
)

app.mount(logo_server)


def main() -> None:
    """Entry-point for ``logo-studio-mcp`` console script."""
    app.run()


if __name__ == "__main__":
    main()
