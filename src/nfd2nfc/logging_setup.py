# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/nfd2nfc/logging_setup.py

import sys
from pathlib import Path

from loguru import logger

from nfd2nfc.config import load_merged_user_config


def setup_logging(debug: bool = False) -> None:
    """Setup loguru logging for the entire application.

    Configures:
    - Console output: WARNING+ only (or the configured level; DEBUG with --debug)
    - File output: DEBUG+ if local_log is configured in user config
    """
    logger.remove()

    config_error = None
    try:
        user_config = load_merged_user_config()
    except Exception as e:
        user_config = None
        config_error = e

    console_level = "WARNING"
    if debug:
        console_level = "DEBUG"
    elif user_config is not None:
        console_level = user_config.console_log_level

    # Console handler: clean output, rich owns stdout
    logger.add(
        sys.stderr,
        level=console_level,
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    if user_config is None:
        logger.warning(f"Failed to load user config: {config_error}")
        return

    # File handler: DEBUG+ if configured
    try:
        if user_config.local_log:
            log_dir = Path(user_config.local_log).expanduser()
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / "nfd2nfc.log"

            logger.add(
                log_file,
                level="DEBUG",
                format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
                rotation="10 MB",
                retention="30 days",
                compression="gz"
            )
            logger.debug(f"File logging enabled: {log_file}")

    except Exception as e:
        # Don't fail the entire application if logging setup fails
        logger.warning(f"Failed to setup file logging: {e}")
