# logger.py
"""
Logging configuration for the Club Match Generator.

This module provides centralized logging setup. The setup_logging() function
should be called once at application startup (e.g., in 1_Setup.py).

All app modules should use the "app" namespace:
    import logging
    logger = logging.getLogger("app.module_name")

This keeps third-party library logs quiet while allowing granular control
over the app's own logging level via the LOG_LEVEL environment variable.
"""

import logging
import os
import sys

# App namespace prefix - all app loggers should use this
APP_LOGGER_NAME = "app"


def level_from_env(default: int = logging.INFO) -> int:
    """Reads LOG_LEVEL (e.g. 'DEBUG') from the environment."""
    name = os.environ.get("LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(app_level: int | None = None) -> None:
    """
    Configure logging for the application.

    - Root logger is set to WARNING (keeps third-party libraries quiet)
    - App namespace logger ("app.*") is set to the specified level

    This should be called ONCE at application startup (entry point).

    Args:
        app_level: The logging level for app modules (default: LOG_LEVEL or INFO)
    """
    if app_level is None:
        app_level = level_from_env()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    # Avoid adding duplicate handlers if setup is called multiple times
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)  # Handler accepts all; loggers filter

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)

        root_logger.addHandler(handler)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(app_level)


def log_match_summary(logger: logging.Logger, matches: list) -> None:
    """
    Log generated matches in a consistent format.

    Args:
        logger: Logger instance to use
        matches: List of MatchTemplate objects
    """
    logger.debug("Generated %d match(es)", len(matches))
    for match in matches:
        logger.debug(
            "  %s | %s | players=%d/%d | court=%s time=%s",
            match.id,
            match.title,
            len(match.participants),
            match.max_players,
            match.court_id or "-",
            match.time or "-",
        )
