from __future__ import annotations

import logging.config

from family_budget.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    level = settings.log_level or ("INFO" if settings.is_production else "DEBUG")
    level = level.upper()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "family_budget": {"handlers": ["console"], "level": level, "propagate": False},
                # Statement logging is only useful while developing.
                "sqlalchemy.engine": {
                    "handlers": ["console"],
                    "level": "WARNING" if settings.is_production else "INFO",
                    "propagate": False,
                },
                "alembic": {"handlers": ["console"], "level": "INFO", "propagate": False},
            },
        }
    )
