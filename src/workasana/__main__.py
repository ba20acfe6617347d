"""Serve the API with uvicorn."""

import structlog
import uvicorn

from workasana.config import Settings
from workasana.entrypoints.api.app import create_app
from workasana.logging_setup import configure_logging


def main() -> None:
    """Load settings, configure logging and run the server."""
    settings = Settings.from_env()
    configure_logging(settings.log_level, settings.log_format)

    structlog.get_logger().info(
        "server_starting",
        host=settings.host,
        port=settings.port,
        record_store=settings.record_store,
    )
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
