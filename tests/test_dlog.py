import re
import signal
from datetime import datetime

import pytest

from dtail.brush import colorfy
from dtail.dlog import DLog, Source, install_rotation_handler
from dtail.level import Level
from dtail.loggers import Logger, Rotation, Strategy, factory


class Recorder(Logger):
    def __init__(self, colors=False):
        self.colors = colors
        self.logged = []
        self.colored = []
        self.raws = []
        self.events = []

    def log(self, now, message):
        self.logged.append(message)

    def log_with_colors(self, now, message, colored_message):
        self.colored.append((message, colored_message))

    def raw(self, now, message):
        self.raws.append(message)

    def raw_with_colors(self, now, message, colored_message):
        self.colored.append((message, colored_message))

    def flush(self):
        self.events.append("flush")

    def pause(self):
        self.events.append("pause")

    def resume(self):
        self.events.append("resume")

    def rotate(self):
        self.events.append("rotate")

    def supports_colors(self):
        return self.colors


def make(source=Source.CLIENT, level=Level.INFO, colors=False):
    rec = Recorder(colors)
    return DLog(source, logger=rec, max_level=level, hostname="myhost"), rec


def test_client_format():
    log, rec = make()
    msg = log.info("hello", 42)
    assert msg == "CLIENT|myhost|INFO|hello|42"
    assert rec.logged == [msg]


def test_server_format_has_timestamp():
    log, rec = make(Source.SERVER)
    msg = log.warn("disk")
    assert re.fullmatch(r"WARN\|\d{4}-\d{6}\|disk", msg)
    assert rec.logged == [msg]


def test_level_filter():
    log, rec = make(level=Level.WARN)
    assert log.info("skip") == ""
    assert log.debug("skip") == ""
    assert log.error("keep").endswith("|ERROR|keep")
    assert len(rec.logged) == 1


def test_exception_argument():
    log, _ = make()
    assert log.error(ValueError("boom")).endswith("|boom")


def test_colors_used_when_supported():
    log, rec = make(colors=True)
    msg = log.info("x")
    assert rec.logged == []
    assert rec.colored == [(msg, colorfy(msg))]


def test_colors_disabled():
    rec = Recorder(colors=True)
    log = DLog(Source.CLIENT, logger=rec, hostname="h", colors_enabled=False)
    msg = log.info("x")
    assert rec.logged == [msg]


def test_fatal_panic_raises_and_flushes():
    log, rec = make()
    with pytest.raises(RuntimeError, match=r"^a\|b$"):
        log.fatal_panic("a", "b")
    assert rec.logged == ["CLIENT|myhost|FATAL|a|b"]
    assert "flush" in rec.events


def test_trace_adds_caller():
    log, _ = make(level=Level.ALL)
    msg = log.trace("here")
    assert "|here|at " in msg
    assert "test_dlog.py:" in msg


def test_raw_passes_message_unchanged():
    log, rec = make()
    assert log.raw("plain text") == "plain text"
    assert rec.raws == ["plain text"]


def test_mapreduce_client():
    log, _ = make()
    msg = log.mapreduce("foo", {"k": 1})
    assert msg == "CLIENT|myhost|INFO|STATS:FOO|k=1"


def test_mapreduce_server():
    log, _ = make(Source.SERVER)
    msg = log.mapreduce("foo", {"k": 1, "j": "v"})
    assert msg.startswith("INFO|")
    assert "|MAPREDUCE:FOO|k=1|j=v" in msg
    assert "test_dlog.py:" in msg


def test_pause_resume_delegate():
    log, rec = make()
    log.pause()
    log.resume()
    log.flush()
    assert rec.events == ["pause", "resume", "flush"]


def test_rotation_handler_reopens_file(tmp_path):
    logger = factory("ROTTEST", "file", Strategy(Rotation.SIGNAL, "rot"), str(tmp_path))
    previous = install_rotation_handler()
    try:
        now = datetime.now()
        logger.log(now, "one")
        (tmp_path / "rot.log").rename(tmp_path / "old.log")
        handler = signal.getsignal(signal.SIGHUP)
        handler(signal.SIGHUP, None)
        logger.log(now, "two")
        assert (tmp_path / "rot.log").read_text() == "two\n"
        assert (tmp_path / "old.log").read_text() == "one\n"
    finally:
        signal.signal(signal.SIGHUP, previous)
        logger.close()