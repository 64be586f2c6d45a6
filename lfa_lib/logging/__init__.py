"""
Logging module for LFA library.

This module provides JSON-formatted logging functionality for the LFA library.
"""

from lfa_lib.logging.logger import (
    JsonFormatter,
    setup_logger,
    get_logger,
    reset_logger,
    log_weights_summary,
)

__all__ = [
    "JsonFormatter",
    "setup_logger",
    "get_logger",
    "reset_logger",
    "log_weights_summary",
]
