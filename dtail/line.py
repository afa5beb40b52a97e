"""A log line read from a file, with its position and transmission stats."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Line:
    """A read log line.

    ``count`` is how many lines were processed up to this one,
    ``transmitted_perc`` the share of matching lines that could be sent to
    the client, and ``source_id`` identifies the file the line came from.
    """

    content: bytes | None = None
    count: int = 0
    transmitted_perc: int = 0
    source_id: str = ""

    @classmethod
    def null(cls) -> "Line":
        """Return a line with every field at its null value."""
        return cls()

    def __str__(self) -> str:
        if self.content is None:
            content = "<nil>"
        else:
            content = self.content.decode("utf-8", errors="replace")
        return (
            f"Line(Content:{content},TransmittedPerc:{self.transmitted_perc},"
            f"Count:{self.count},SourceID:{self.source_id})"
        )