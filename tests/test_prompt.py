import io

import pytest

from dtail.dlog import DLog, Source
from dtail.loggers import Logger
from dtail.prompt import Answer, Prompt


class Recorder(Logger):
    def __init__(self):
        self.events = []

    def log(self, now, message):
        pass

    def log_with_colors(self, now, message, colored_message):
        pass

    def raw(self, now, message):
        pass

    def raw_with_colors(self, now, message, colored_message):
        pass

    def flush(self):
        pass

    def pause(self):
        self.events.append("pause")

    def resume(self):
        self.events.append("resume")

    def rotate(self):
        pass

    def supports_colors(self):
        return False


def yes_no_prompt(calls):
    prompt = Prompt("Trust host")
    prompt.add(Answer("yes", "y", callback=lambda: calls.append("yes"),
                      end_callback=lambda: calls.append("end")))
    prompt.add(Answer("no", "n", callback=lambda: calls.append("no")))
    return prompt


def test_ask_string():
    assert yes_no_prompt([]).ask_string() == "Trust host? (y=yes,n=no): "


def test_unknown_answer_asks_again():
    calls = []
    prompt = yes_no_prompt(calls)
    out = io.StringIO()
    answer = prompt.ask(io.StringIO("maybe\ny\n"), out)
    assert answer.long == "yes"
    assert calls == ["yes", "end"]
    assert out.getvalue() == prompt.ask_string() * 2


def test_long_answer_matches():
    calls = []
    answer = yes_no_prompt(calls).ask(io.StringIO("  no \n"), io.StringIO())
    assert answer.short == "n"
    assert calls == ["no"]


def test_ask_again_answer():
    calls = []
    prompt = yes_no_prompt(calls)
    prompt.add(Answer("all", "a", callback=lambda: calls.append("all"), ask_again=True))
    answer = prompt.ask(io.StringIO("a\nn\n"), io.StringIO())
    assert answer.long == "no"
    assert calls == ["all", "no"]


def test_eof_raises():
    with pytest.raises(EOFError):
        yes_no_prompt([]).ask(io.StringIO(""), io.StringIO())


def test_logging_paused_and_resumed():
    rec = Recorder()
    prompt = yes_no_prompt([])
    prompt.log = DLog(Source.CLIENT, logger=rec, hostname="h")
    prompt.ask(io.StringIO("y\n"), io.StringIO())
    assert rec.events == ["pause", "resume"]