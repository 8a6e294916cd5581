import logging
import sys

from app.core.config import settings


def configure_logging():
    level = settings.LOG_LEVEL.upper()
    logging.basicConfig(
        level=level,
        format='%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # uvicorn installs its own handlers; route everything through ours instead
    for name in ("uvicorn", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(level)

    # Redirect traffic is logged by the app itself
    logging.getLogger("uvicorn.access").disabled = True

    return logging.getLogger("app")
