"""Server module entry point for running with python -m server."""

import os

import uvicorn

from macrowiki.config import MACROWIKI_LOG_LEVEL
from macrowiki.utils.logging_config import configure_logging, get_logger
from server.server_config import DEFAULT_HOST, DEFAULT_PORT

configure_logging(MACROWIKI_LOG_LEVEL)
logger = get_logger(__name__)

if __name__ == "__main__":
    host = os.getenv("HOST", DEFAULT_HOST)
    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        "Starting macrowiki server",
        extra={
            "host": host,
            "port": port,
        },
    )

    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Disable uvicorn's default logging config
    )
