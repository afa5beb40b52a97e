"""Interactive questions answered on standard input."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

from .dlog import DLog


@dataclass
class Answer:
    """A possible answer to a prompt question."""

    long: str
    short: str
    callback: Callable[[], None] | None = None
    """Runs when the user input matches."""
    end_callback: Callable[[], None] | None = None
    """Runs after the callback, once logging has resumed."""
    ask_again: bool = False
    """Ask the question again after this answer."""


@dataclass
class Prompt:
    """A question with a set of accepted answers."""

    question: str
    answers: list[Answer] = field(default_factory=list)
    log: DLog | None = None
    """Logging to pause while the question is asked."""

    def add(self, answer: Answer) -> None:
        """Add an accepted answer."""
        self.answers.append(answer)

    def ask_string(self) -> str:
        """Return the question text with its answer choices."""
        choices = ",".join(f"{a.short}={a.long}" for a in self.answers)
        return f"{self.question}? ({choices}): "

    def _match(self, text: str) -> Answer | None:
        return next((a for a in self.answers if text in (a.long, a.short)), None)

    def ask(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> Answer:
        """Ask until a final answer is given and return it.

        Raises EOFError when input ends first.
        """
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout
        if self.log is not None:
            self.log.pause()
        while True:
            stdout.write(self.ask_string())
            stdout.flush()
            line = stdin.readline()
            if not line:
                if self.log is not None:
                    self.log.resume()
                raise EOFError("input ended before an answer was given")
            answer = self._match(line.strip())
            if answer is None:
                continue
            if answer.callback is not None:
                answer.callback()
            if answer.ask_again:
                continue
            if self.log is not None:
                self.log.resume()
            if answer.end_callback is not None:
                answer.end_callback()
            return answer