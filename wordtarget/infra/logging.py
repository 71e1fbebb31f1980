"""Log4j-style logging setup for wordtarget.

- Hierarchical loggers (``wordtarget.<program>.<task>``)
- Console appender on stderr; stdout stays reserved for command output
- Pattern layout or JSON layout
- ``TRACE`` level (custom); ``WARN`` and ``FATAL`` accepted as level names
- MDC (Mapped Diagnostic Context) via ``contextvars``: the CLI records the
  running command and the document name

Environment variables (prefix ``WT_``):
- ``WT_LOG_LEVEL``: TRACE, DEBUG, INFO, WARN, ERROR, FATAL (default: WARNING)
- ``WT_LOG_JSON``: 1 to switch to the JSON layout
"""

from __future__ import annotations

import contextvars
import json
import logging
import logging.config
import os
import sys
from typing import Any, Dict, Optional

TRACE_LEVEL = 5
if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")


def _trace(self: logging.Logger, msg: str, *args: Any, **kwargs: Any) -> None:
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, msg, args, **kwargs)


if not hasattr(logging.Logger, "trace"):
    logging.Logger.trace = _trace  # type: ignore[attr-defined]


# ---------------- MDC ----------------

_MDC: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("MDC", default={})


def mdc_put(key: str, value: Any) -> None:
    d = dict(_MDC.get())
    d[key] = value
    _MDC.set(d)


class MDCFilter(logging.Filter):
    """Attach the MDC to each record as ``mdc`` and as a ``mdc_suffix`` string."""

    def filter(self, record: logging.LogRecord) -> bool:
        d = _MDC.get()
        record.mdc = d
        if d:
            mdc_str = " ".join(f"{k}={v}" for k, v in d.items())
            record.mdc_suffix = f" | MDC: {mdc_str}"
        else:
            record.mdc_suffix = ""
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        mdc = getattr(record, "mdc", None)
        if isinstance(mdc, dict) and mdc:
            payload["mdc"] = mdc
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# ---------------- Setup ----------------

_CONFIGURED = False


def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "on"}


def level_from_name(name: Optional[str], default: int = logging.WARNING) -> int:
    s = str(name or "").strip().upper()
    if not s:
        return default
    s = {"WARN": "WARNING", "FATAL": "CRITICAL"}.get(s, s)
    if s == "TRACE":
        return TRACE_LEVEL
    value = getattr(logging, s, None)
    return value if isinstance(value, int) else default


def build_logging_config(level: Optional[str] = None, json_layout: Optional[bool] = None) -> Dict[str, Any]:
    """dictConfig with a single stderr console appender."""
    if json_layout is None:
        json_layout = _env_bool("WT_LOG_JSON", False)
    lvl = level_from_name(level or os.getenv("WT_LOG_LEVEL"))

    formatters: Dict[str, Any] = {
        "pattern": {
            "()": logging.Formatter,
            "format": "[%(asctime)s][%(levelname)s][%(name)s] %(message)s%(mdc_suffix)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json": {
            "()": JSONFormatter,
        },
    }
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": lvl,
            "formatter": "json" if json_layout else "pattern",
            "filters": ["mdc"],
            "stream": "ext://sys.stderr",
        }
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"mdc": {"()": MDCFilter}},
        "formatters": formatters,
        "handlers": handlers,
        "loggers": {
            "wordtarget": {"level": lvl, "handlers": ["console"], "propagate": False},
        },
    }


def init_logging(level: Optional[str] = None, json_layout: Optional[bool] = None, force: bool = False) -> None:
    """Configure the ``wordtarget`` logger tree; no-op when done already unless ``force``."""
    global _CONFIGURED
    if _CONFIGURED and not force:
        return
    logging.config.dictConfig(build_logging_config(level, json_layout))
    _CONFIGURED = True


def _ensure_logging() -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return
    try:
        init_logging()
    except (ValueError, TypeError, AttributeError, ImportError):
        logging.basicConfig(
            level=logging.WARNING, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s"
        )
        _CONFIGURED = True


def get_unified_logger(program: str, task_type: str) -> logging.Logger:
    """Return ``wordtarget.<program>.<task_type>``, initializing logging on first use."""
    _ensure_logging()
    return logging.getLogger(f"wordtarget.{program}.{task_type}")


def log_processing_step(
    program: str, task_type: str, message: str, details: Optional[Dict[str, Any]] = None
) -> None:
    logger = get_unified_logger(program, task_type)
    if details:
        logger.info("%s | %s", message, json.dumps(details, ensure_ascii=False))
    else:
        logger.info("%s", message)


def log_error(program: str, task_type: str, error: Exception, context: str = "") -> None:
    logger = get_unified_logger(program, task_type)
    if context:
        logger.error("%s | %s", context, error)
    else:
        logger.error("%s", error)


__all__ = [
    "TRACE_LEVEL",
    "init_logging",
    "build_logging_config",
    "level_from_name",
    "mdc_put",
    "get_unified_logger",
    "log_processing_step",
    "log_error",
]
