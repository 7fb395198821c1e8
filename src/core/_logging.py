import logging
from typing import Union

PACKAGE_LOGGER = "src"


def setup_logging(level: Union[str, int] = logging.DEBUG) -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    stream_handler = logging.StreamHandler()
    formatter = logging.Formatter("%(levelname)-8s %(name)s: %(message)s")
    stream_handler.setFormatter(formatter)

    logger.addHandler(stream_handler)
    logger.setLevel(level)
    return logger
