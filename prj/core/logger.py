"""Logging configuration and utilities."""

import os
import sys
import logging
from datetime import datetime
from typing import Optional


def setup_logging(
    command: str = "status",
    log_dir: Optional[str] = None,
    verbose: bool = False
) -> logging.Logger:
    """Configure logging to stderr and, optionally, a log file.

    Stdout is left to command output (the report, paths, lists).

    Args:
        command: Name of the command for the log filename
        log_dir: Directory for a timestamped log file (None = no file)
        verbose: Show INFO messages on the console instead of warnings only

    Returns:
        Configured logger instance
    """
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.INFO if verbose else logging.WARNING)
    handlers = [console]

    log_file = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = os.path.join(log_dir, f'prj_{command}_{timestamp}.log')
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True  # Reset any existing configuration
    )

    logger = logging.getLogger('prj')
    logger.info(f"Starting prj {command}")
    if log_file:
        logger.info(f"Log file: {log_file}")

    return logger

