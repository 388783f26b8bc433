"""Entry point for the registration service.

Launches the FastAPI application with Uvicorn.  Host and port come
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``registration_api.app.core.config``
for the full list of settings.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from registration_api.app.main import app


async def main() -> None:
    settings = app.state.settings
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
