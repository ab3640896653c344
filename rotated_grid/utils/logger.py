"""Global logging and error handling utilities"""
import logging
import sys

from rotated_grid.constants import LOG_FORMAT

_package_logger = logging.getLogger('rotated_grid')
_package_logger.addHandler(logging.NullHandler())


def configure_logging(verbose: bool = False, stream=None):
    """Route rotated_grid logging to a console stream.

    The package never configures logging on import; applications (or a
    debugging session) opt in here.

    Args:
        verbose: DEBUG level when True, WARNING otherwise
        stream: Output stream (default stdout)
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )
    _package_logger.setLevel(level)


def log_and_raise(logger: logging.Logger, e: Exception, user_message: str = None):
    """Log an exception with its message, then raise it

    Args:
        logger: Logger of the module that detected the problem
        e: The exception to raise
        user_message: Message to log instead of str(e) (optional)
    """
    logger.error(user_message if user_message else str(e))
    raise e
