"""
Run the Movie Catalog API with uvicorn.

Usage:
    python -m movie_catalog
"""

import logging

import uvicorn

from movie_catalog.api.config import (
    get_api_host,
    get_api_port,
    get_log_file,
    get_log_level,
)
from movie_catalog.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_api_logging(level=get_log_level(), log_file=get_log_file())
    host, port = get_api_host(), get_api_port()
    logger.info(f"Server running on http://{host}:{port}")
    uvicorn.run(
        "movie_catalog.api.main:app",
        host=host,
        port=port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
