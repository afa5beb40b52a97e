"""Log sinks: nothing, stdout, a log file, or both."""

from __future__ import annotations

import os
import sys
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TextIO


class Rotation(Enum):
    """When log files are rotated."""

    DAILY = "daily"
    """A new file each day, and on a rotation signal."""
    SIGNAL = "signal"
    """A new file only on a rotation signal."""


@dataclass(frozen=True)
class Strategy:
    """A rotation kind together with the file base used for signal rotation."""

    rotation: Rotation
    file_base: str = ""


def new_strategy(name: str) -> Strategy:
    """Return the rotation strategy for a name; anything but "daily" is signal."""
    if name.lower() == "daily":
        return Strategy(Rotation.DAILY, "")
    return Strategy(Rotation.SIGNAL, os.path.basename(sys.argv[0]))


class Logger(ABC):
    """A destination for log messages."""

    @abstractmethod
    def log(self, now: datetime, message: str) -> None:
        """Log a message followed by a newline."""

    @abstractmethod
    def log_with_colors(self, now: datetime, message: str, colored_message: str) -> None:
        """Log a message that also comes in a colored version."""

    @abstractmethod
    def raw(self, now: datetime, message: str) -> None:
        """Log a message as it is, without adding a newline."""

    @abstractmethod
    def raw_with_colors(self, now: datetime, message: str, colored_message: str) -> None:
        """Log a raw message that also comes in a colored version."""

    @abstractmethod
    def flush(self) -> None:
        """Write out what is buffered."""

    @abstractmethod
    def pause(self) -> None:
        """Hold back output until resumed."""

    @abstractmethod
    def resume(self) -> None:
        """Continue output after a pause."""

    @abstractmethod
    def rotate(self) -> None:
        """Reopen the log file on the next write."""

    @abstractmethod
    def supports_colors(self) -> bool:
        """Return whether colored messages are shown."""

    def close(self) -> None:
        """Flush and release resources."""
        self.flush()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class NoneLogger(Logger):
    """Discards everything."""

    def log(self, now, message):
        return None

    def log_with_colors(self, now, message, colored_message):
        return None

    def raw(self, now, message):
        return None

    def raw_with_colors(self, now, message, colored_message):
        return None

    def flush(self):
        return None

    def pause(self):
        return None

    def resume(self):
        return None

    def rotate(self):
        return None

    def supports_colors(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoneLogger)

    def __hash__(self) -> int:
        return hash(NoneLogger)


class StdoutLogger(Logger):
    """Writes to standard output (or a given stream), colored when asked."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self._running = threading.Event()
        self._running.set()

    def _write(self, message: str, newline: bool) -> None:
        with self._lock:
            self._running.wait()
            out = self._stream if self._stream is not None else sys.stdout
            out.write(message + "\n" if newline else message)
            out.flush()

    def log(self, now, message):
        self._write(message, True)

    def log_with_colors(self, now, message, colored_message):
        self._write(colored_message, True)

    def raw(self, now, message):
        self._write(message, False)

    def raw_with_colors(self, now, message, colored_message):
        self._write(colored_message, False)

    def flush(self):
        out = self._stream if self._stream is not None else sys.stdout
        out.flush()

    def pause(self):
        self._running.clear()

    def resume(self):
        self._running.set()

    def rotate(self):
        return None

    def supports_colors(self) -> bool:
        return True


class FileLogger(Logger):
    """Appends to a log file in a directory, named by day or by file base."""

    def __init__(self, strategy: Strategy, log_dir: str = "log") -> None:
        self._strategy = strategy
        self._log_dir = log_dir
        self._lock = threading.RLock()
        self._fd: TextIO | None = None
        self._file_name: str | None = None
        self._paused = False
        self._pending: list[tuple[datetime, str, bool]] = []

    def _enqueue(self, now: datetime, message: str, newline: bool) -> None:
        with self._lock:
            if self._paused:
                self._pending.append((now, message, newline))
                return
            self._write(now, message, newline)

    def _write(self, now: datetime, message: str, newline: bool) -> None:
        if self._strategy.rotation is Rotation.DAILY:
            name = now.strftime("%Y%m%d")
        else:
            name = self._strategy.file_base
        fd = self._writer(name)
        fd.write(message)
        if newline:
            fd.write("\n")
        fd.flush()

    def _writer(self, name: str) -> TextIO:
        if self._fd is not None and self._file_name == name:
            return self._fd
        os.makedirs(self._log_dir, exist_ok=True)
        path = os.path.join(self._log_dir, f"{name}.log")
        new_fd = open(path, "a", encoding="utf-8")
        if self._fd is not None:
            self._fd.flush()
            self._fd.close()
        self._fd = new_fd
        self._file_name = name
        return new_fd

    def _drain(self) -> None:
        pending, self._pending = self._pending, []
        for now, message, newline in pending:
            self._write(now, message, newline)

    def log(self, now, message):
        self._enqueue(now, message, True)

    def log_with_colors(self, now, message, colored_message):
        self.raw_with_colors(now, message, colored_message)

    def raw(self, now, message):
        self._enqueue(now, message, False)

    def raw_with_colors(self, now, message, colored_message):
        raise RuntimeError("Colors not supported in file logger")

    def flush(self):
        with self._lock:
            if not self._paused:
                self._drain()
            if self._fd is not None:
                self._fd.flush()

    def pause(self):
        with self._lock:
            self._paused = True

    def resume(self):
        with self._lock:
            self._paused = False
            self._drain()

    def rotate(self):
        with self._lock:
            self._file_name = None

    def supports_colors(self) -> bool:
        return False

    def close(self) -> None:
        with self._lock:
            self._drain()
            if self._fd is not None:
                self._fd.close()
                self._fd = None
                self._file_name = None


class FoutLogger(Logger):
    """Logs to both a file and standard output."""

    def __init__(self, strategy: Strategy, log_dir: str = "log",
                 stream: TextIO | None = None) -> None:
        self.file = FileLogger(strategy, log_dir)
        self.stdout = StdoutLogger(stream)

    def log(self, now, message):
        self.stdout.log(now, message)
        self.file.log(now, message)

    def log_with_colors(self, now, message, colored_message):
        self.stdout.log_with_colors(now, "", colored_message)
        self.file.log(now, message)

    def raw(self, now, message):
        self.stdout.raw(now, message)
        self.file.raw(now, message)

    def raw_with_colors(self, now, message, colored_message):
        self.stdout.raw_with_colors(now, "", colored_message)
        self.file.raw(now, message)

    def flush(self):
        self.stdout.flush()
        self.file.flush()

    def pause(self):
        self.stdout.pause()
        self.file.pause()

    def resume(self):
        self.stdout.resume()
        self.file.resume()

    def rotate(self):
        self.file.rotate()

    def supports_colors(self) -> bool:
        return True

    def close(self) -> None:
        self.stdout.flush()
        self.file.close()


_registry: dict[tuple[str, str, str, str], Logger] = {}
_registry_lock = threading.Lock()


def factory(source_name: str, logger_name: str, strategy: Strategy,
            log_dir: str = "log") -> Logger:
    """Return the shared logger for these settings, creating it on first use."""
    key = (source_name, strategy.file_base, logger_name, log_dir)
    with _registry_lock:
        existing = _registry.get(key)
        if existing is not None:
            return existing
        kind = logger_name.lower()
        if kind == "none":
            return NoneLogger()
        if kind == "stdout":
            logger: Logger = StdoutLogger()
        elif kind == "file":
            logger = FileLogger(strategy, log_dir)
        elif kind == "fout":
            logger = FoutLogger(strategy, log_dir)
        else:
            raise ValueError(f"Unsupported logger type '{logger_name}'")
        _registry[key] = logger
        return logger


def factory_rotate() -> None:
    """Rotate the logs of every logger the factory has handed out."""
    with _registry_lock:
        loggers = list(_registry.values())
    for logger in loggers:
        logger.rotate()