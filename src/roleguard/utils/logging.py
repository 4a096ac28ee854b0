import logging
import logging.handlers
import os
import sys
from roleguard.settings import settings


def setup_logging(
    log_file_path: str, enable_console_logging: bool = True, log_level: str = "INFO"
):
    """
    Set up file and console logging for the authorization layer.

    Args:
        log_file_path: Path to the log file
        enable_console_logging: Whether to also output logs to stderr
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Only add handlers not already present (avoid duplicates on reload)
    has_file_handler = any(
        isinstance(h, logging.handlers.RotatingFileHandler)
        and h.baseFilename == os.path.abspath(log_file_path)
        for h in root_logger.handlers
    )

    if not has_file_handler:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if enable_console_logging:
        has_console_handler = any(
            type(h) is logging.StreamHandler for h in root_logger.handlers
        )
        if not has_console_handler:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

    return root_logger


logger = setup_logging(
    settings.log_file_path,
    enable_console_logging=settings.enable_console_logging,
    log_level=settings.log_level,
)
