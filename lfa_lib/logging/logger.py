"""
Logger implementation for the LFA library.

This module provides JSON-formatted logging functionality for the LFA library.
Logs are written to timestamped files in a 'logs' directory unless configured
otherwise through ``lfa_lib.config``.
"""

import os
import json
import logging
import datetime
from typing import Any, Optional
import numpy as np

from lfa_lib.config import LoggingConfig

LOGGER_NAME = "lfa_lib"


# Create a custom JSON formatter that can handle numpy arrays and other complex types
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""

    def __init__(self):
        super().__init__()

    def _serialize(self, obj: Any) -> Any:
        """Serialize objects to JSON-compatible format."""
        if isinstance(obj, np.ndarray):
            # Convert numpy arrays to lists with limited size
            if obj.size > 100:  # Only show a sample for large arrays
                shape_str = 'x'.join(str(dim) for dim in obj.shape)
                sample = obj.flatten()[:5].tolist()
                return f"ndarray({shape_str}): sample={sample}..."
            return obj.tolist()
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif isinstance(obj, (list, tuple)):
            # Handle lists and tuples recursively
            if len(obj) > 100:  # Only show a sample for large lists
                return [self._serialize(item) for item in list(obj)[:5]] + ["..."]
            return [self._serialize(item) for item in obj]
        elif isinstance(obj, dict):
            # Handle dictionaries recursively
            return {k: self._serialize(v) for k, v in obj.items()}
        return obj

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data = {
            'timestamp': datetime.datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # Handle the case where the message is already a dict
        if isinstance(record.msg, dict):
            log_data['data'] = self._serialize(record.msg)
        else:
            log_data['message'] = record.getMessage()

            # Add any extra attributes
            if hasattr(record, 'data'):
                log_data['data'] = self._serialize(record.data)

        return json.dumps(log_data)


# Global logger instance
_logger = None

def setup_logger(
    debug: Optional[bool] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up the logger with the specified configuration.

    Any argument left as None is taken from ``LoggingConfig.from_env()``.

    Args:
        debug: Whether to enable debugging
        log_level: The log level (debug, info, warning, error)
        log_file: Optional custom log file path

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    config = LoggingConfig.from_env()
    debug = config.debug if debug is None else debug
    log_level = config.log_level if log_level is None else log_level
    log_file = config.log_file if log_file is None else log_file

    # Create logger
    logger = logging.getLogger(LOGGER_NAME)

    # Set log level
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR
    }

    # Set the level based on debug flag and log_level
    if debug:
        logger.setLevel(level_map.get(log_level.lower(), logging.INFO))
    else:
        logger.setLevel(logging.WARNING)  # Minimal logging when debug is False

    # Create logs directory if it doesn't exist
    logs_dir = config.log_dir
    os.makedirs(logs_dir, exist_ok=True)

    # Create a timestamped log file if not specified
    if log_file is None:
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(logs_dir, f"lfa_lib_{timestamp}.json")
    elif not os.path.isabs(log_file):
        # If relative path, put it in the logs directory
        log_file = os.path.join(logs_dir, log_file)

    # Create file handler
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(JsonFormatter())

    # Add handler to logger
    logger.addHandler(file_handler)

    # Store the logger
    _logger = logger

    # Log initial setup
    if debug:
        logger.info({
            "event": "logger_initialized",
            "log_level": log_level,
            "log_file": log_file
        })

    return logger


def get_logger() -> logging.Logger:
    """
    Get the configured logger instance.

    Returns:
        Logger instance
    """
    global _logger

    if _logger is None:
        # Set up with default configuration if not already configured
        _logger = setup_logger()

    return _logger


def reset_logger() -> None:
    """Close the handlers of the configured logger so it can be set up again."""
    global _logger

    if _logger is None:
        return

    for handler in list(_logger.handlers):
        handler.close()
        _logger.removeHandler(handler)

    _logger = None


# Helper functions for common logging patterns

def log_weights_summary(weights, name: str = "weights") -> None:
    """
    Log a per-column summary of a weight table (mean, min, max, etc.).

    Args:
        weights: Weights object or 2-D numpy array (features x outputs)
        name: Name to identify these weights in the log
    """
    logger = get_logger()

    if not logger.isEnabledFor(logging.DEBUG):
        return

    # Handle Weights objects
    w_array = weights.values if hasattr(weights, 'values') else np.asarray(weights)
    if w_array.ndim == 1:
        w_array = w_array[:, None]

    summaries = []
    for j in range(w_array.shape[1]):
        column = w_array[:, j]
        summaries.append({
            "column": j,
            "mean": float(np.mean(column)),
            "std": float(np.std(column)),
            "min": float(np.min(column)),
            "max": float(np.max(column)),
            "nonzero": int(np.count_nonzero(column)),
        })

    logger.debug({
        "event": f"{name}_summary",
        "shape": w_array.shape,
        "columns": summaries
    })

