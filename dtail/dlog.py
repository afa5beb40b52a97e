"""The log handler formatting messages for the configured logger."""

from __future__ import annotations

import inspect
import os
import signal
import threading
from datetime import datetime
from enum import Enum

from .brush import FIELD_DELIMITER, colorfy
from .config import TermColors, hostname as default_hostname
from .level import Level
from .loggers import Logger, NoneLogger, factory_rotate


class Source(Enum):
    """Which kind of process or package a message comes from."""

    CLIENT = "CLIENT"
    SERVER = "SERVER"
    HEALTH_CHECK = "HEALTHCHECK"

    def __str__(self) -> str:
        return self.value


def _arg_string(arg: object) -> str:
    if isinstance(arg, str):
        return arg
    return str(arg)


def _go_duration(seconds: int) -> str:
    if seconds == 0:
        return "0s"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def _caller(depth: int = 2) -> inspect.FrameInfo | None:
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


class DLog:
    """Formats messages by level and source and hands them to a logger."""

    def __init__(self, source_process: Source, source_package: Source | None = None,
                 logger: Logger | None = None, max_level: Level = Level.INFO,
                 hostname: str | None = None, colors_enabled: bool = True,
                 term_colors: TermColors | None = None) -> None:
        self.source_process = source_process
        self.source_package = source_package if source_package is not None else source_process
        self.logger = logger if logger is not None else NoneLogger()
        self.max_level = max_level
        self.hostname = hostname if hostname is not None else default_hostname()
        self.colors_enabled = colors_enabled
        self.term_colors = term_colors if term_colors is not None else TermColors()

    def _use_colors(self) -> bool:
        return self.colors_enabled and self.logger.supports_colors()

    def _log(self, level: Level, args) -> str:
        if self.max_level < level:
            return ""
        now = datetime.now()
        if self.source_process is Source.CLIENT:
            head = [str(self.source_package), self.hostname, str(level)]
        else:
            head = [str(level), now.strftime("%m%d-%H%M%S")]
        message = FIELD_DELIMITER.join(head) + FIELD_DELIMITER + self._args_string(args)
        if self._use_colors():
            self.logger.log_with_colors(now, message, colorfy(message, self.term_colors))
        else:
            self.logger.log(now, message)
        return message

    @staticmethod
    def _args_string(args) -> str:
        return FIELD_DELIMITER.join(_arg_string(arg) for arg in args)

    def fatal_panic(self, *args) -> None:
        """Log a fatal message, flush, and raise RuntimeError."""
        self._log(Level.FATAL, args)
        self.flush()
        raise RuntimeError(self._args_string(args))

    def fatal(self, *args) -> str:
        return self._log(Level.FATAL, args)

    def error(self, *args) -> str:
        return self._log(Level.ERROR, args)

    def warn(self, *args) -> str:
        return self._log(Level.WARN, args)

    def info(self, *args) -> str:
        return self._log(Level.INFO, args)

    def verbose(self, *args) -> str:
        return self._log(Level.VERBOSE, args)

    def debug(self, *args) -> str:
        return self._log(Level.DEBUG, args)

    def _with_caller(self, args) -> tuple:
        frame = _caller(3)
        if frame is None:
            return args
        return (*args, f"at {frame.f_code.co_filename}:{frame.f_lineno}")

    def trace(self, *args) -> str:
        """Log at trace level, adding where it was called from."""
        return self._log(Level.TRACE, self._with_caller(args))

    def devel(self, *args) -> str:
        """Log at development level, adding where it was called from."""
        return self._log(Level.DEVEL, self._with_caller(args))

    def raw(self, message: str) -> str:
        """Log a message unformatted and without a newline."""
        now = datetime.now()
        if self._use_colors():
            self.logger.raw_with_colors(now, message, colorfy(message, self.term_colors))
        else:
            self.logger.raw(now, message)
        return message

    def mapreduce(self, table: str, data: dict) -> str:
        """Log a line of key=value pairs tagged with a mapreduce table."""
        if self.source_process is Source.SERVER:
            load_avg = ""
            try:
                with open("/proc/loadavg", encoding="ascii") as fd:
                    load_avg = fd.read().split(" ", 1)[0]
            except OSError:
                pass
            uptime = ""
            try:
                with open("/proc/uptime", encoding="ascii") as fd:
                    whole = fd.read().split(".", 1)[0]
                uptime = _go_duration(int(whole) if whole.isdigit() else 0)
            except OSError:
                pass
            frame = _caller(2)
            caller = (f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
                      if frame is not None else "?:0")
            first = (f"{os.getpid()}|{caller}|{os.cpu_count() or 1}|"
                     f"{threading.active_count()}|0|{load_avg}|{uptime}|"
                     f"MAPREDUCE:{table.upper()}")
        else:
            first = f"STATS:{table.upper()}"
        args = [first, *(f"{key}={value}" for key, value in data.items())]
        return self._log(Level.INFO, args)

    def flush(self) -> None:
        self.logger.flush()

    def pause(self) -> None:
        self.logger.pause()

    def resume(self) -> None:
        self.logger.resume()


def install_rotation_handler():
    """Rotate all factory loggers on SIGHUP; return the previous handler.

    Returns None where the platform has no SIGHUP.
    """
    sighup = getattr(signal, "SIGHUP", None)
    if sighup is None:
        return None

    def _rotate(signum, frame):
        factory_rotate()

    return signal.signal(sighup, _rotate)