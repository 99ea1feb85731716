"""Entry point for the Places API.

Serves ``places_api.app.main:app`` with Uvicorn.  Configuration is read
from environment variables; ``DATABASE_URL`` is required and the server
refuses to start without it.

Usage:
    DATABASE_URL=places.db python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from places_api.app.core.config import Settings


async def main() -> None:
    """Start the API using Uvicorn on ``HOST:PORT``."""
    settings = Settings()
    config = Config(
        app="places_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
