"""Logging configuration with Rich."""

import logging.config


def configure_logging(verbose: bool = False) -> None:
    """Route all log records through a RichHandler.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    level = "DEBUG" if verbose else "WARNING"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(name)s - %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "default": {
                    "class": "rich.logging.RichHandler",
                    "formatter": "default",
                    "level": level,
                    "rich_tracebacks": True,
                    "show_path": False,
                    "log_time_format": "%Y-%m-%d %H:%M:%S",
                },
            },
            "loggers": {
                "urllib3": {
                    "level": "WARNING",
                },
                "": {
                    "handlers": ["default"],
                    "level": level,
                },
            },
        }
    )
