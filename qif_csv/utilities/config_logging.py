# qif_csv/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional, Union

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
            # stdout may be carrying the CSV
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "qif_csv": {
            "level": "DEBUG",
            "handlers": ["console"],
            "propagate": True,
        },
    },
}

_FILE_HANDLER: Dict[str, Any] = {
    "class": "logging.handlers.RotatingFileHandler",
    "level": "DEBUG",
    "formatter": "verbose",
    "maxBytes": 5_000_000,
    "backupCount": 5,
    "encoding": "utf-8",
}


def build_logging_config(
    level: Union[int, str] = "INFO",
    log_file: Optional[Path] = None,
) -> Dict[str, Any]:
    """Return a copy of ``LOGGING`` with the console level set and an optional rotating log file."""
    config = copy.deepcopy(LOGGING)
    if isinstance(level, str):
        level = level.upper()
    config["handlers"]["console"]["level"] = level
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        config["handlers"]["file"] = dict(_FILE_HANDLER, filename=str(log_file))
        config["loggers"]["qif_csv"]["handlers"].append("file")
    return config


def configure_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[Path] = None,
) -> None:
    logging.config.dictConfig(build_logging_config(level, log_file))
