"""Logging configuration.

Everything goes to stderr: stdout carries the MCP stdio transport and any stray
write there corrupts the protocol stream.
"""

import logging
import sys

LOGGER_NAME = "jira_markdown_mcp"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logger(name: str = LOGGER_NAME, level: str = "INFO") -> logging.Logger:
    """Configure the server logger with a single stderr handler.

    Safe to call once per server session; later calls only update the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
