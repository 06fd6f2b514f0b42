import logging

from taskplanner.config import settings

LOG_FORMAT = "[%(levelname)s] - %(name)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
