"""Main entry point for the RBL query service."""

import logging
import sys

import uvicorn

from rbl_query.api import create_app
from rbl_query.config import Config
from rbl_query.services.logger import setup_logging


logger = logging.getLogger(__name__)


def main() -> int:
    """Load configuration and serve the HTTP API until shutdown.

    Returns:
        int: Exit code (0 = clean shutdown, 1 = startup failure).
    """
    setup_logging()

    try:
        config = Config.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(verbose=config.verbose)
    logger.info(
        f"Configuration loaded: {len(config.rbl_zones)} RBL zones configured",
        extra={"rbl_zones": list(config.rbl_zones), "api_port": config.api_port},
    )

    app = create_app(config)
    uvicorn.run(app, host="0.0.0.0", port=config.api_port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
