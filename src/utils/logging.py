"""Logging utilities module."""

import logging
import re
import sys
from functools import lru_cache
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import ClassVar

import colorama
from colorama import Fore, Style

__all__ = ["CleanFormatter", "ColorFormatter", "Logger", "get_logger"]

LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_FILE_BACKUPS = 5


class _MarkerFormatter(logging.Formatter):
    """Base formatter aware of the `$$'quoted'$$` and `$${braced}$$` markers.

    Subclasses decide what each marker is rewritten to. The record's message is
    restored after formatting so other handlers see the original text.
    """

    QUOTED_PATTERN = re.compile(r"\$\$'((?:[^']|'(?!\$\$))*)'\$\$")
    BRACED_PATTERN = re.compile(r"\$\$\{(.*?)\}\$\$")

    quoted_replacement: ClassVar[str] = "'\\1'"
    braced_replacement: ClassVar[str] = "{\\1}"

    def _rewrite(self, msg: str) -> str:
        msg = self.QUOTED_PATTERN.sub(self.quoted_replacement, msg)
        return self.BRACED_PATTERN.sub(self.braced_replacement, msg)

    def format(self, record: logging.LogRecord) -> str:
        """Formats a log record after rewriting the message markers.

        Args:
            record (logging.LogRecord): Log record to format

        Returns:
            str: Formatted log message
        """
        if not isinstance(record.msg, str):
            return super().format(record)

        orig_msg = record.msg
        record.msg = self._rewrite(orig_msg)
        try:
            return super().format(record)
        finally:
            record.msg = orig_msg


class CleanFormatter(_MarkerFormatter):
    """Formatter that strips color markers from log messages.

    Used for file output and terminals without color support. Keeps the
    content within the markers.
    """


class ColorFormatter(_MarkerFormatter):
    """Formatter that adds terminal colors to log messages.

    Color Scheme:
        DEBUG: Cyan
        INFO: Green
        SUCCESS: Bright Green
        WARNING: Yellow
        ERROR: Red
        CRITICAL: Bright Red
        Quoted values: Light Blue (e.g., $$'example'$$)
        Bracketed values: Dimmed (e.g., $${key: value}$$)
    """

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "SUCCESS": Fore.GREEN + Style.BRIGHT,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    quoted_replacement = f"{Fore.LIGHTBLUE_EX}'\\1'{Style.RESET_ALL}"
    braced_replacement = f"{Style.DIM}{{\\1}}{Style.RESET_ALL}"

    def format(self, record: logging.LogRecord) -> str:
        """Formats a log record with ANSI color codes.

        Args:
            record (logging.LogRecord): Log record to format

        Returns:
            str: Color-formatted log message
        """
        orig_levelname = record.levelname
        color = self.COLORS.get(orig_levelname, "")
        record.levelname = f"{color}{orig_levelname}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = orig_levelname


class Logger(logging.Logger):
    """Extended Logger class with class name prefixing and a SUCCESS level."""

    SUCCESS = logging.INFO + 5

    def __init__(self, name, level=logging.NOTSET):
        """Initialize the logger and register the SUCCESS level name.

        Args:
            name (str): Logger name
            level (int, optional): Initial logging level. Defaults to NOTSET.
        """
        super().__init__(name, level)

        if logging.getLevelName(self.SUCCESS) != "SUCCESS":
            logging.addLevelName(self.SUCCESS, "SUCCESS")

    def _log(
        self,
        level,
        msg,
        args,
        exc_info=None,
        extra=None,
        stack_info=False,
        stacklevel=1,
    ):
        """Prefix messages logged from within a class with the class name.

        Frame 0 is this method, frame 1 the public logging method (`debug`,
        `success`, ...) and frame 2 the caller whose `self` or `cls` is used.
        """
        try:
            caller_locals = sys._getframe(2).f_locals
            owner = caller_locals.get("self", caller_locals.get("cls"))
            if isinstance(owner, type):
                class_name = owner.__name__
            elif owner is not None and not isinstance(owner, logging.Logger):
                class_name = type(owner).__name__
            else:
                class_name = None

            if class_name and isinstance(msg, str):
                msg = f"{class_name}: {msg}"
        except (ValueError, AttributeError):
            pass

        super()._log(
            level,
            msg,
            args,
            exc_info=exc_info,
            extra=extra,
            stack_info=stack_info,
            stacklevel=stacklevel + 1,
        )

    def success(self, msg, *args, **kwargs):
        """Log a message with SUCCESS level."""
        self.log(self.SUCCESS, msg, *args, **kwargs)

    def level_for(self, log_level: str) -> int:
        """Translate a level name such as 'DEBUG' or 'SUCCESS' to its number."""
        if log_level == "SUCCESS":
            return self.SUCCESS
        return getattr(logging, log_level)

    def setup(self, log_level: str, log_dir: str | None = None) -> None:
        """Configure the logger with console and, optionally, file output.

        The console handler colors output when the terminal supports it; the
        rotating file handler always writes clean text. DEBUG output includes
        the source location of each record.

        Args:
            log_level (str): Logging level ('DEBUG', 'INFO', 'SUCCESS', etc.)
            log_dir (str | None, optional): Directory where log files will be
                stored. No file handler is attached when omitted.
        """
        has_color_support = False
        try:
            from src.utils.terminal import supports_color

            if supports_color():
                if sys.platform == "win32":
                    colorama.just_fix_windows_console()
                else:
                    colorama.init()
                has_color_support = True
        except (AttributeError, ImportError, OSError):
            has_color_support = False

        level = self.level_for(log_level)
        self.setLevel(level)

        for handler in self.handlers[:]:
            self.removeHandler(handler)
            handler.close()

        log_format = (
            "%(asctime)s - %(name)s - %(levelname)s\t%(filename)s:%(lineno)d\t"
            "%(message)s"
            if level <= logging.DEBUG
            else "%(asctime)s - %(name)s - %(levelname)s\t%(message)s"
        )
        formatter_cls = ColorFormatter if has_color_support else CleanFormatter

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter_cls(log_format, LOG_DATE_FORMAT))
        console_handler.setLevel(level)
        self.addHandler(console_handler)

        if log_dir is None:
            return

        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path / f"{self.name}.{log_level}.log",
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
        )
        file_handler.setFormatter(CleanFormatter(log_format, LOG_DATE_FORMAT))
        file_handler.setLevel(level)
        self.addHandler(file_handler)


logging.setLoggerClass(Logger)


def _get_logger(
    log_name: str, log_level: str = "INFO", log_dir: str | Path | None = None
) -> Logger:
    """Get a configured instance of Logger.

    Args:
        log_name (str): Name of the logger and base name for log file.
        log_level (str): Logging level. Defaults to "INFO".
        log_dir (str | Path | None): Directory where log files will be stored.

    Returns:
        Logger: Configured logger instance
    """
    logger = logging.getLogger(log_name)
    if not isinstance(logger, Logger):
        logger = Logger(log_name)

    logger.setup(log_level, str(log_dir) if log_dir is not None else None)
    return logger


@lru_cache(maxsize=1)
def get_logger() -> Logger:
    """Get the main CastMedia logger, configured from the application settings.

    Returns:
        Logger: Main application logger instance
    """
    from src.config.settings import get_config

    config = get_config()

    return _get_logger(
        log_name="CastMedia",
        log_level=str(config.log_level),
        log_dir=config.log_dir,
    )
