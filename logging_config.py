"""Logging setup for the API server.

Output goes to stdout with the level taken from the LOG_LEVEL env var.
Default: INFO. Set LOG_LEVEL=DEBUG to see per-property skip decisions
made by the rent generators.
"""
import logging
import sys

from config import settings

# Map string level names to logging constants
LOG_LEVEL_MAP = {
     "DEBUG": logging.DEBUG,
     "INFO": logging.INFO,
     "WARNING": logging.WARNING,
     "ERROR": logging.ERROR,
     "CRITICAL": logging.CRITICAL,
}

_handler = None


def get_log_level() -> int:
     return LOG_LEVEL_MAP.get(settings.log_level, logging.INFO)


def setup_logging() -> None:
     """
     Configure the root logger.

     Safe to call more than once: the stdout handler is only attached the
     first time.
     """
     global _handler

     root_logger = logging.getLogger()
     root_logger.setLevel(get_log_level())

     if _handler is None:
          _handler = logging.StreamHandler(sys.stdout)
          _handler.setFormatter(logging.Formatter(
               fmt="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
               datefmt="%Y-%m-%d %H:%M:%S",
          ))
          root_logger.addHandler(_handler)
