"""Sets up logging for activitystats"""
import logging

LOGGER_NAME = 'activitystats'


def setup_logger(level: str | int = logging.INFO) -> logging.Logger:
    """Attaches a colored stream handler to the package logger, once"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '\x1b[30;1m%(asctime)s\x1b[0m %(levelname)-8s\x1b[0m \x1b[35m%(name)s\x1b[0m %(message)s',
            '%Y-%m-%d %H:%M:%S')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
