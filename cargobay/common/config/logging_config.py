import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any, List

from pythonjsonlogger import jsonlogger


ROOT_LOGGER = "cargobay"

# extra= keys copied onto JSON records when a LoggerAdapter supplies them
CONTEXT_FIELDS = ("request_kind", "target", "package", "executable")

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

_configured = False


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.update(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            level=record.levelname,
            logger=record.name,
            location=f"{record.module}.{record.funcName}:{record.lineno}",
        )
        log_record.update(
            {key: getattr(record, key) for key in CONTEXT_FIELDS if hasattr(record, key)}
        )
        if record.exc_info and "exc_info" not in log_record:
            log_record["exception"] = self.formatException(record.exc_info)


def _formatters() -> Dict[str, Any]:
    return {
        "text": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            "datefmt": "%H:%M:%S",
        },
        "json": {
            "()": CustomJsonFormatter,
            "format": "%(timestamp)s %(level)s %(name)s %(message)s",
        },
    }


def _handlers(log_level: str, formatter: str, log_file: Optional[str]) -> Dict[str, Any]:
    # stdout is left alone; callers may be piping build output through it
    handlers: Dict[str, Any] = {
        "stderr": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "level": log_level,
            "formatter": formatter,
        }
    }
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": LOG_FILE_MAX_BYTES,
            "backupCount": LOG_FILE_BACKUPS,
            "level": log_level,
            "formatter": formatter,
        }
    return handlers


def get_logging_config(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> Dict[str, Any]:
    handlers = _handlers(log_level, "json" if json_format else "text", log_file)
    handler_names: List[str] = list(handlers)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _formatters(),
        "handlers": handlers,
        "loggers": {
            ROOT_LOGGER: {
                "handlers": handler_names,
                "level": log_level,
                "propagate": False,
            },
        },
    }


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    force: bool = False,
) -> bool:
    """Install handlers on the ``cargobay`` logger once per process.

    Returns False when logging was already configured and ``force`` is not set.
    """
    global _configured
    if _configured and not force:
        return False

    logging.config.dictConfig(get_logging_config(log_level, log_file, json_format))
    _configured = True
    return True


def setup_logging_from_settings(settings: Any, force: bool = False) -> bool:
    return setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_format=settings.log_json,
        force=force,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Merge the adapter's context into each call's ``extra``."""

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_build_logger(
    request_kind: str,
    target: str,
    package: Optional[str] = None,
) -> LoggerAdapter:
    extra: Dict[str, Any] = {"request_kind": request_kind, "target": target}
    if package:
        extra["package"] = package
    return LoggerAdapter(get_logger(f"{ROOT_LOGGER}.build"), extra)


def get_discovery_logger(executable: str) -> LoggerAdapter:
    return LoggerAdapter(get_logger(f"{ROOT_LOGGER}.discovery"), {"executable": executable})
