import os
import sys
from datetime import datetime
from typing import Any

from loguru import logger
from loguru._logger import Logger

from filmes_api.core.config import settings


def dynamic_formatter(record: Any) -> str:
    base = "[{time:HH:mm:ss}] [{level}] {module}:{function}:{line} - {message}"

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
    base = "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> {module}:{function}:<blue>{line}</blue> - {message}\n"

    if record["exception"]:
        base += "{exception}"

    return base


def setup_logger(name: str, log_dir: str | None = None) -> Logger:
    """
    Replace loguru's default handler with a console sink and, when
    LOG_TO_FILE is enabled, daily rotated files under <log_dir>/<date>/<name>.

    Parameters:
        name (str): Subdirectory for this process's log files.
        log_dir (str | None): Root log directory, defaults to settings.LOG_DIR.
    Returns:
        Logger: The configured loguru logger.
    """
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        format=dynamic_console_formatter,
        level="DEBUG" if settings.DEBUG else "INFO",
        backtrace=True,
        diagnose=settings.DEBUG,
        colorize=True,
    )

    if not settings.LOG_TO_FILE:
        return logger  # type: ignore

    today = datetime.now().strftime("%Y-%m-%d")
    log_path = os.path.join(log_dir or settings.LOG_DIR, today, name)
    os.makedirs(log_path, exist_ok=True)

    if settings.DEBUG:
        logger.add(
            os.path.join(log_path, "debug.log"),
            format=dynamic_formatter,
            level="DEBUG",
            rotation="00:00",  # Rotate daily at midnight
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=True,
            retention="7 days",
        )

    logger.add(
        os.path.join(log_path, "error.log"),
        format=dynamic_formatter,
        level="ERROR",
        rotation="00:00",
        compression="zip",
        enqueue=True,
        backtrace=True,
        diagnose=False,
        retention="30 days",
    )

    logger.add(
        os.path.join(log_path, "info.log"),
        format=dynamic_formatter,
        level="INFO",
        rotation="00:00",
        compression="zip",
        enqueue=True,
    )

    return logger  # type: ignore
