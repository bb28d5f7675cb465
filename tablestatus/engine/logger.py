import logging
import os

PACKAGE_LOGGER = "tablestatus"

# Library loggers stay silent until an application configures the package root.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Module logger under the package root.

    No level or handler is set here; records propagate to whatever
    setup_logger attached to the package root.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logger(log_file: str = 'logs/tablestatus.log',
                 level: int = logging.INFO,
                 mode: str = 'a',
                 console_handler: bool = False,
                 formatter_input: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                 ) -> logging.Logger:
    """
    Configure the package root logger for an application run.

    Args:
        log_file: File receiving every record at `level` and above
        level: Level for the package root and its handlers
        mode: File open mode
        console_handler: Also echo records to stderr
        formatter_input: Format string shared by all handlers

    Returns:
        The configured package root logger

    Handlers from a previous call are closed before new ones are added.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    _close_handlers(logger)

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    formatter = logging.Formatter(formatter_input)

    if console_handler:
        ch = logging.StreamHandler()
        ch.setFormatter(formatter)
        ch.setLevel(level)
        logger.addHandler(ch)

    fh = logging.FileHandler(log_file, mode=mode)
    fh.setFormatter(formatter)
    fh.setLevel(level)
    logger.addHandler(fh)

    return logger


def teardown_logger() -> None:
    """Close the handlers setup_logger attached and restore the silent default."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    _close_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.addHandler(logging.NullHandler())
