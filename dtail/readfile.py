"""Read, follow and filter log files line by line."""

from __future__ import annotations

import gzip
import io
import logging
import os
import re
import sys
import time
from collections import deque
from collections.abc import Callable, Iterator
from typing import Any, BinaryIO

import zstandard

from .config import ServerConfig
from .dlog import DLog
from .fsstats import ReadStats
from .lcontext import LContext
from .line import Line

_log = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024
_LONG_LINE_WARNING = "Long log line, splitting into multiple lines"

Matcher = Callable[[bytes], bool]


class TruncatedError(OSError):
    """Raised when a followed file got truncated while being read."""


def _make_matcher(regex: Any) -> Matcher:
    """Turn a pattern, compiled regex or predicate into a bytes predicate."""
    if regex is None:
        return lambda content: True
    if isinstance(regex, str):
        regex = re.compile(regex.encode("utf-8"))
    elif isinstance(regex, bytes):
        regex = re.compile(regex)
    if isinstance(regex, re.Pattern):
        pattern = regex
        if isinstance(pattern.pattern, str):
            return lambda content: pattern.search(
                content.decode("utf-8", errors="replace")) is not None
        return lambda content: pattern.search(content) is not None
    if callable(regex):
        predicate = regex
        return lambda content: bool(predicate(content))
    raise TypeError(f"unsupported regex type {type(regex).__name__}")


def _stopped(stop: Any) -> bool:
    if stop is None:
        return False
    is_done = getattr(stop, "is_done", None)
    if is_done is not None:
        return bool(is_done())
    return bool(stop.is_set())


class ReadFile:
    """Reads a log file (or standard input) and yields the lines that match.

    A file path of "" together with the glob id "-" reads standard input.
    Files ending in .gz/.gzip or .zst are decompressed on the fly.
    """

    poll_interval = 0.1
    """Seconds to wait at the end of a followed file before reading again."""
    truncate_check_interval = 3.0
    """Seconds between checks whether a followed file got truncated."""

    def __init__(self, file_path: str, glob_id: str,
                 server_messages: Callable[[str], None] | None = None, *,
                 retry: bool = False, can_skip_lines: bool = False,
                 seek_eof: bool = False,
                 max_line_length: int = ServerConfig().max_line_length,
                 log: DLog | None = None) -> None:
        self.file_path = file_path
        self.glob_id = glob_id
        self.server_messages = server_messages
        self.retry = retry
        self.can_skip_lines = can_skip_lines
        self.seek_eof = seek_eof
        self.max_line_length = max_line_length
        self.log = log

    def __str__(self) -> str:
        return (
            f"readFile(filePath:{self.file_path},globID:{self.glob_id},"
            f"retry:{str(self.retry).lower()},"
            f"canSkipLines:{str(self.can_skip_lines).lower()},"
            f"seekEOF:{str(self.seek_eof).lower()})"
        )

    def start(self, ltx: LContext | None = None, regex: Any = None,
              stop: Any = None) -> Iterator[Line]:
        """Open the file and return an iterator over the matching lines.

        ``regex`` may be a pattern string, a compiled regex or a predicate on
        the raw line bytes; None matches every line. ``stop`` is a Done or
        threading.Event that ends following a file once set. Opening errors
        are raised here; read and truncation errors while iterating.
        """
        ltx = ltx if ltx is not None else LContext()
        matcher = _make_matcher(regex)
        raw, reader = self._open()
        return self._run(raw, reader, ltx, matcher, stop)

    def _run(self, raw: BinaryIO | None, reader: BinaryIO, ltx: LContext,
             matcher: Matcher, stop: Any) -> Iterator[Line]:
        raw_lines = self._raw_lines(raw, reader, stop)
        stats = ReadStats()
        try:
            if ltx.has():
                yield from self._filter_with_lcontext(raw_lines, ltx, matcher, stats)
            else:
                yield from self._filter_without_lcontext(raw_lines, matcher, stats)
        finally:
            raw_lines.close()
            if raw is not None:
                reader.close()
                raw.close()

    def _open(self) -> tuple[BinaryIO | None, BinaryIO]:
        if self.file_path == "" and self.glob_id == "-":
            return None, sys.stdin.buffer
        raw = open(self.file_path, "rb", buffering=0)
        try:
            if self.seek_eof:
                raw.seek(0, os.SEEK_END)
            reader = self._decompressing_reader(raw)
        except BaseException:
            raw.close()
            raise
        return raw, reader

    def _decompressing_reader(self, raw: BinaryIO) -> BinaryIO:
        if self.file_path.endswith((".gz", ".gzip")):
            _log.info("%s Detected gzip compression format", self.file_path)
            return gzip.GzipFile(fileobj=raw, mode="rb")
        if self.file_path.endswith(".zst"):
            _log.info("%s Detected zstd compression format", self.file_path)
            return zstandard.ZstdDecompressor().stream_reader(raw)
        return io.BufferedReader(raw)

    def _truncated(self, raw: BinaryIO | None) -> None:
        """Raise TruncatedError if the file at the path is now shorter."""
        if raw is None:
            return
        _log.debug("%s File truncation check", self.file_path)
        current = raw.tell()
        size = os.path.getsize(self.file_path)
        if current > size:
            raise TruncatedError("File got truncated")

    def _warn_long_line(self) -> None:
        if self.log is not None:
            message = self.log.warn(self.file_path, _LONG_LINE_WARNING)
        else:
            message = f"{self.file_path}|{_LONG_LINE_WARNING}"
        _log.warning("%s %s", self.file_path, _LONG_LINE_WARNING)
        if self.server_messages is not None:
            self.server_messages(message + "\n")

    def _raw_lines(self, raw: BinaryIO | None, reader: BinaryIO,
                   stop: Any) -> Iterator[bytes]:
        """Yield raw lines, newline included, splitting overlong ones."""
        read = getattr(reader, "read1", None) or reader.read
        limit = max(1, self.max_line_length)
        buf = bytearray()
        warned = False
        last_check = time.monotonic()

        while True:
            chunk = read(_CHUNK_SIZE)
            if not chunk:
                if _stopped(stop):
                    return
                if time.monotonic() - last_check >= self.truncate_check_interval:
                    last_check = time.monotonic()
                    self._truncated(raw)
                if not self.seek_eof:
                    _log.info("%s End of file reached", self.file_path)
                    if buf:
                        yield bytes(buf)
                    return
                time.sleep(self.poll_interval)
                continue

            pos = 0
            while pos < len(chunk):
                room = limit - len(buf)
                newline = chunk.find(b"\n", pos, pos + room)
                if newline != -1:
                    buf += chunk[pos:newline + 1]
                    pos = newline + 1
                    yield bytes(buf)
                    buf.clear()
                    warned = False
                elif len(chunk) - pos >= room:
                    buf += chunk[pos:pos + room]
                    pos += room
                    if not warned:
                        self._warn_long_line()
                        warned = True
                    buf += b"\n"
                    yield bytes(buf)
                    buf.clear()
                else:
                    buf += chunk[pos:]
                    pos = len(chunk)

    def _filter_without_lcontext(self, raw_lines: Iterator[bytes], matcher: Matcher,
                                 stats: ReadStats) -> Iterator[Line]:
        for raw_line in raw_lines:
            stats.update_position()
            if not matcher(raw_line):
                stats.update_line_not_matched()
                stats.update_line_not_transmitted()
                continue
            stats.update_line_matched()
            stats.update_line_transmitted()
            yield Line(raw_line, stats.total_line_count(), stats.transmitted_perc(),
                       self.glob_id)

    def _filter_with_lcontext(self, raw_lines: Iterator[bytes], ltx: LContext,
                              matcher: Matcher, stats: ReadStats) -> Iterator[Line]:
        max_count = ltx.max_count
        process_max = max_count > 0
        max_reached = False
        process_before = ltx.before_context > 0
        before_buf: deque[bytes] = deque(maxlen=max(ltx.before_context, 1))
        after = 0
        process_after = ltx.after_context > 0

        for raw_line in raw_lines:
            stats.update_position()

            if not matcher(raw_line):
                stats.update_line_not_matched()
                if process_after and after > 0:
                    after -= 1
                    yield Line(raw_line, stats.total_line_count(), 100, self.glob_id)
                elif process_before:
                    before_buf.append(raw_line)
                continue

            stats.update_line_matched()

            if process_after:
                if max_reached:
                    return
                after = ltx.after_context

            if process_before:
                offset = len(before_buf)
                while before_buf:
                    yield Line(before_buf.popleft(), stats.total_line_count() - offset,
                               100, self.glob_id)
                    offset -= 1

            yield Line(raw_line, stats.total_line_count(), 100, self.glob_id)

            if process_max:
                max_count -= 1
                if max_count == 0:
                    if not process_after or after == 0:
                        return
                    max_reached = True


class CatFile(ReadFile):
    """Reads a whole file from the beginning to the end."""

    def __init__(self, file_path: str, glob_id: str,
                 server_messages: Callable[[str], None] | None = None, *,
                 max_line_length: int = ServerConfig().max_line_length,
                 log: DLog | None = None) -> None:
        super().__init__(file_path, glob_id, server_messages, retry=False,
                         can_skip_lines=False, seek_eof=False,
                         max_line_length=max_line_length, log=log)


class TailFile(ReadFile):
    """Follows a file from its end, yielding new lines as they are written."""

    def __init__(self, file_path: str, glob_id: str,
                 server_messages: Callable[[str], None] | None = None, *,
                 max_line_length: int = ServerConfig().max_line_length,
                 log: DLog | None = None) -> None:
        super().__init__(file_path, glob_id, server_messages, retry=True,
                         can_skip_lines=True, seek_eof=True,
                         max_line_length=max_line_length, log=log)