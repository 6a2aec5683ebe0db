"""Entry point for the Exercise Tracker API.

Loads variables from a ``.env`` file in the working directory (if one
exists) and serves the application with uvicorn on ``HOST``/``PORT``.

Usage:
    python run.py
"""
import asyncio
import logging

from dotenv import load_dotenv

# Settings are read when the package is imported, so the environment
# must be populated first.
load_dotenv()

from uvicorn import Config, Server  # noqa: E402

from exercise_tracker_api.app.core.config import settings  # noqa: E402
from exercise_tracker_api.app.main import app  # noqa: E402


async def serve() -> None:
    """Run the API until the server is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on port %s", settings.port)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
