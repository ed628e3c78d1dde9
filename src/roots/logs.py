"""
Logging helpers.
"""
import logging
from typing import Optional


def get_logger(
    name: str,
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Construct a logging.Logger instance with an appropriate configuration.
    :param name: name for the Logger instance.
    :param verbose: (optional) whether or not the logger should report failures and
        best-effort estimates (ie. log at the INFO level). Defaults to False.
    :param debug: (optional) whether or not the logger should also report convergence
        (ie. log at the DEBUG level). Defaults to False.
    :param log_file: (optional) path to a file where the log should be stored.
        The log is printed to stderr when 'None'.
    :returns: instance of logging.Logger.
    """

    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    logging.basicConfig(level=level, filename=log_file)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger
