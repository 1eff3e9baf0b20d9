"""
common.logging_setup

Set up standard logging for the project. Diagnostics go to stderr so the
holder report on stdout stays clean.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def setup_logging(level=logging.INFO):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
