# Copyright 2026 Firefly Software Solutions Inc
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Logging for ProfileCraft.

All package loggers hang off the ``profilecraft`` logger, which owns a single
stderr handler so that stdout carries only command output (profiles,
reports, settings documents). Engine modules log through
``logging.getLogger(__name__)`` and never configure handlers themselves.

Three output formats are available:

- ``json``: one object per line, with the record's ``extra`` fields
  (platform, seed, hash, path, ...) under ``"extra"``
- ``human``: short colored lines with the extra fields appended as
  ``key=value`` pairs
- ``text``: classic ``asctime - name - level - message`` lines, extras
  appended the same way

At import time the logger is set up from ``PROFILECRAFT_LOG_LEVEL`` and
``PROFILECRAFT_LOG_FORMAT``; the CLI calls ``configure_logging`` again once
its flags are parsed.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, TextIO, Union

__all__ = [
    "logger",
    "setup_logger",
    "configure_logging",
    "get_log_level",
    "get_formatter",
    "parse_log_format",
    "LogFormat",
    "JsonFormatter",
    "HumanFormatter",
    "TextFormatter",
]

ROOT_LOGGER_NAME = "profilecraft"

LOG_LEVEL_ENV = "PROFILECRAFT_LOG_LEVEL"
LOG_FORMAT_ENV = "PROFILECRAFT_LOG_FORMAT"

# LogRecord attributes that are not user-supplied "extra" fields
_RESERVED_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "message", "taskName",
    "thread", "threadName", "asctime",
})


class LogFormat(str, Enum):
    """Log output formats accepted by ``--log-format``."""

    JSON = "json"
    HUMAN = "human"
    TEXT = "text"


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


def _format_pairs(fields: Dict[str, Any]) -> str:
    return " ".join(f"{key}={value}" for key, value in fields.items())


class JsonFormatter(logging.Formatter):
    """Single-line JSON records for machine consumption."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Source location only helps when chasing engine internals
        if record.levelno <= logging.DEBUG:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_fields = _extra_fields(record)
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str)


class HumanFormatter(logging.Formatter):
    """
    Compact colored lines for an interactive terminal.

    Colors are used only when asked for and the target stream is a TTY.
    """

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    def __init__(self, use_colors: bool = True, stream: Optional[TextIO] = None):
        super().__init__()
        target = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and hasattr(target, "isatty") and target.isatty()

    def _paint(self, text: str, *codes: str) -> str:
        if not self.use_colors:
            return text
        return "".join(codes) + text + self.RESET

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%H:%M:%S")
        level = record.levelname
        color = self.COLORS.get(level, "")

        parts = [
            self._paint(timestamp, self.DIM),
            self._paint(f"[{level:>8}]", color, self.BOLD),
            record.getMessage(),
        ]

        extra_fields = _extra_fields(record)
        if extra_fields:
            parts.append(self._paint(_format_pairs(extra_fields), self.DIM))

        output = " ".join(parts)

        if record.exc_info:
            output += "\n" + self._paint(self.formatException(record.exc_info), self.COLORS["ERROR"])

        return output


class TextFormatter(logging.Formatter):
    """Plain ``asctime - name - level - message`` lines."""

    def __init__(self):
        super().__init__(fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        output = super().format(record)
        extra_fields = _extra_fields(record)
        if not extra_fields:
            return output
        # Keep the traceback, if any, on the lines after the message
        head, sep, tail = output.partition("\n")
        return f"{head} [{_format_pairs(extra_fields)}]{sep}{tail}"


def get_log_level(level_str: str) -> int:
    """
    Convert a level name to a logging constant.

    Unknown names give INFO.
    """
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_str.upper(), logging.INFO)


def parse_log_format(value: Union[LogFormat, str, None]) -> LogFormat:
    """Resolve a format name, falling back to JSON for empty or unknown values."""
    if isinstance(value, LogFormat):
        return value
    try:
        return LogFormat((value or "").strip().lower())
    except ValueError:
        return LogFormat.JSON


def get_formatter(
    log_format: Union[LogFormat, str],
    use_colors: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Formatter:
    """Get the formatter for a log format."""
    log_format = parse_log_format(log_format)
    if log_format == LogFormat.HUMAN:
        return HumanFormatter(use_colors=use_colors, stream=stream)
    if log_format == LogFormat.TEXT:
        return TextFormatter()
    return JsonFormatter()


def _install_handler(
    log: logging.Logger,
    level: int,
    log_format: LogFormat,
    stream: Optional[TextIO],
) -> None:
    target = stream if stream is not None else sys.stderr

    log.setLevel(level)
    log.handlers.clear()

    handler = logging.StreamHandler(target)
    handler.setLevel(level)
    handler.setFormatter(get_formatter(log_format, stream=target))
    log.addHandler(handler)


def configure_logging(
    level: str = "INFO",
    log_format: Union[LogFormat, str] = LogFormat.JSON,
    human_readable: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Reconfigure the package logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: json, human or text
        human_readable: Force the human format regardless of ``log_format``
        stream: Destination stream, stderr by default
    """
    resolved = LogFormat.HUMAN if human_readable else parse_log_format(log_format)
    _install_handler(logger, get_log_level(level), resolved, stream)


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: int = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Create a logger with a single handler, honoring the environment.

    ``PROFILECRAFT_LOG_LEVEL`` overrides ``level`` when set and
    ``PROFILECRAFT_LOG_FORMAT`` picks the format (JSON by default).
    """
    env_level = os.environ.get(LOG_LEVEL_ENV, "")
    if env_level:
        level = get_log_level(env_level)

    log = logging.getLogger(name)
    _install_handler(log, level, parse_log_format(os.environ.get(LOG_FORMAT_ENV)), stream)
    return log


# Package logger; engine module loggers propagate to it
logger = setup_logger()
