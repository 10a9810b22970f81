"""Logging configuration for the cccedict CLI.

Library modules only call ``logging.getLogger(__name__)``; applications decide
where records go. Two setups are provided:

- configure_logging(): stdlib handlers, optional JSON lines via JsonFormatter
- route_to_loguru(): forward every stdlib record to loguru's sink
"""

import inspect
import json
import logging
import sys
import time
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger as loguru_logger

# Attributes every LogRecord has; anything else came in through ``extra=``
_STANDARD_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Format records as one JSON object per line.

    Keys: timestamp (ISO 8601 UTC), level, logger, message, plus ``extra``
    for context fields and ``exception`` when exc_info is set.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_fields = {
            k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS
        }
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, ensure_ascii=False, default=str)


def configure_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    json_format: bool = False,
    console_output: bool = True,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional file path for log output
        json_format: Use JsonFormatter instead of the plain text format
        console_output: Log to stderr (default: True)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.debug(
        f"Logging configured: level={logging.getLevelName(level)}, json_format={json_format}"
    )


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru, keeping the original call site."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Union[str, int] = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back past the logging module to the frame that logged
        frame, depth = inspect.currentframe(), 0
        while frame:
            filename = frame.f_code.co_filename
            is_logging = filename == logging.__file__
            is_frozen = "importlib" in filename and "_bootstrap" in filename
            if depth > 0 and not (is_logging or is_frozen):
                break
            frame = frame.f_back
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def route_to_loguru(level: Union[str, int] = logging.INFO, serialize: bool = False) -> None:
    """Send all stdlib logging through loguru, writing to stderr.

    Args:
        level: Minimum level to emit
        serialize: Emit loguru's JSON records instead of text
    """
    if isinstance(level, int):
        level = logging.getLevelName(level)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level, backtrace=True, diagnose=False, serialize=serialize)


@contextmanager
def timed_stage(stage_name: str, **context):
    """Log the start, end and duration of a unit of work.

    Example:
        >>> with timed_stage("load_cedict", source="cedict_ts.u8") as stage_logger:
        ...     stage_logger.info("Reading entries")
    """
    stage_logger = logging.getLogger(f"cccedict.{stage_name}")
    start = time.perf_counter()
    stage_logger.info(
        f"Starting {stage_name}",
        extra={"stage": stage_name, "status": "started", **context},
    )

    try:
        yield stage_logger
    except Exception as e:
        duration_ms = (time.perf_counter() - start) * 1000
        stage_logger.error(
            f"Failed {stage_name}: {e}",
            extra={
                "stage": stage_name,
                "status": "failed",
                "duration_ms": round(duration_ms, 2),
                **context,
            },
        )
        raise

    duration_ms = (time.perf_counter() - start) * 1000
    stage_logger.info(
        f"Completed {stage_name}",
        extra={
            "stage": stage_name,
            "status": "completed",
            "duration_ms": round(duration_ms, 2),
            **context,
        },
    )
