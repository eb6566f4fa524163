import inspect
import logging
import os
import sys
from datetime import datetime
from typing import Any, NamedTuple

import requests
from loguru import logger
from loguru._logger import Logger

from app.core.config import settings


class InterceptHandler(logging.Handler):
    """Forward records from the standard logging module to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller from where the logged message originated
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def dynamic_formatter(record: Any) -> str:
    base = "[{time:HH:mm:ss}] [{level}] {name}:{function}:{line} - {message}"

    extras = record.get("extra", {})
    if extras:
        base += " ("
        base += ", ".join(f"{key}={value}" for key, value in extras.items())
        base += ")\n"
    else:
        base += "\n"

    if record["exception"]:
        base += "{exception}"

    return base


def dynamic_console_formatter(record: Any) -> str:
    base = "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> {name}:{function}:<blue>{line}</blue> - {message}\n"

    if record["exception"]:
        base += "{exception}"

    return base


def notify_on_error(message: Any) -> None:
    record = message.record
    text = f"Error in {record['name']}:{record['function']} at line {record['line']}\n\n{record['message']}"

    requests.post(
        f"https://api.telegram.org/bot{settings.TELEGRAM_BOT_TOKEN}/sendMessage",
        data={
            "chat_id": settings.TELEGRAM_USER_ID,
            "text": text,
        },
        timeout=10,
    )


class FileSink(NamedTuple):
    filename: str
    level: str
    retention: str | None
    diagnose: bool


def file_sinks(debug: bool) -> list[FileSink]:
    """Daily rotated log files, the verbose ones only when debugging."""
    sinks = [
        FileSink("error.log", "ERROR", "30 days", False),
        FileSink("info.log", "INFO", None, False),
    ]
    if debug:
        sinks = [
            FileSink("trace.log", "TRACE", "3 days", True),
            FileSink("debug.log", "DEBUG", "7 days", True),
            *sinks,
        ]
    return sinks


def setup_logger(name: str, log_dir: str = settings.LOG_DIR) -> Logger:
    """
    Configure loguru for one process (the api or the scheduler).

    Every process logs into its own folder per day, e.g. app/logs/2024-05-01/api/.
    Records from the standard logging module are routed through loguru as well.
    """
    today = datetime.now().strftime("%Y-%m-%d")
    log_path = os.path.join(log_dir, today, name)
    os.makedirs(log_path, exist_ok=True)

    logger.remove()

    for sink in file_sinks(settings.DEBUG):
        logger.add(
            os.path.join(log_path, sink.filename),
            format=dynamic_formatter,
            level=sink.level,
            rotation="00:00",
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=sink.diagnose,
            retention=sink.retention,
        )

    logger.add(
        sys.stderr,
        format=dynamic_console_formatter,
        level="DEBUG" if settings.DEBUG else "INFO",
        enqueue=True,
        backtrace=True,
        diagnose=settings.DEBUG,
        colorize=True,
    )

    if settings.ENABLE_TELEGRAM:
        logger.add(notify_on_error, level="ERROR")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    return logger  # type: ignore
