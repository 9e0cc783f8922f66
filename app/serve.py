"""
CLI entrypoint that runs the web server:

  python -m app.serve

Host and port come from HOST / PORT (default 0.0.0.0:8080).
"""

import logging
import sys

import uvicorn

from app.core.config import get_settings


def main() -> int:
    """Configure logging and serve the app until interrupted."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logger = logging.getLogger(__name__)

    from app.main import create_app

    app = create_app(settings)
    logger.info("Server is running on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
