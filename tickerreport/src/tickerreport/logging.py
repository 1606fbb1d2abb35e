import logging
import sys

_FORMAT = '[%(levelname)s] %(message)s'

def configure_logging(level=logging.WARNING, verbose: bool = False):
    """Send log records to stderr so stdout carries only the report."""
    if verbose:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace handlers left over from a previous call
    if root_logger.handlers:
        root_logger.handlers.clear()

    root_logger.addHandler(handler)
