"""
Run the Miller notation API server.

Usage:
    python -m miller_notation
"""
import logging

import uvicorn

from .api import create_app
from .config import get_settings
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info("Miller notation server running on %s:%d", settings.host, settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
