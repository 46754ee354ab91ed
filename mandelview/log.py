"""Console logging for the mandelview package."""

import logging
import sys


def set_log_level(level=logging.INFO):
    """
    Send package logs at `level` and above to the console.

    Any handler installed by a previous call is removed first, so this
    can be called again to change verbosity.
    """
    logger = logging.getLogger("mandelview")

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    logger.setLevel(level)
    ch = logging.StreamHandler(sys.stderr if level >= logging.WARNING else sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(name)s: %(message)s'))
    logger.addHandler(ch)
    return logger
