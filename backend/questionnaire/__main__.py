# questionnaire/__main__.py
"""
Run the questionnaire server.
Usage:
    python -m questionnaire
"""
import logging

import uvicorn

from questionnaire.config import Settings
from questionnaire.logs import setup_logging
from questionnaire.main import ENDPOINTS, create_app

logger = logging.getLogger("questionnaire")


def main() -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_json)

    app = create_app(settings)

    logger.info("Сервер запущен на http://localhost:%d", settings.port)
    logger.info("Доступные эндпоинты:")
    for method, path, description in ENDPOINTS:
        logger.info("  %-4s %-14s - %s", method, path, description)

    # log_config=None keeps the handlers installed by setup_logging
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
