"""Logging configuration for LedgerLens.

Sets up logging to both a dated log file and the console.
"""

import logging
from datetime import date
from config import Config

LOGGER_NAME = "ledgerlens"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Module loggers (analytics.*, ingestion.*) are routed through the same
    handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # File handler - logs to ledgerlens-{date}.log
    log_file_path = config.log_dir / f"ledgerlens-{date.today().isoformat()}.log"
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(detailed_formatter)

    # Console only shows the report text itself
    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    # Library modules only write to the log file
    for module_logger_name in ("analytics", "ingestion"):
        module_logger = logging.getLogger(module_logger_name)
        module_logger.setLevel(config.log_level)
        module_logger.handlers.clear()
        module_logger.addHandler(file_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The ledgerlens logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
