"""Match and transmission statistics over the last 100 lines read."""

from __future__ import annotations

_WINDOW = 100


def percent_of(total: float, value: float) -> float:
    """Return value as a percentage of total; 100 when total is 0 or equal."""
    if total == 0 or total == value:
        return 100.0
    return value / (total / 100.0)


class ReadStats:
    """Counts matched and transmitted lines within a sliding window."""

    def __init__(self) -> None:
        self.pos = 0
        self.line_count = 0
        self.matched = [False] * _WINDOW
        self.match_count = 0
        self.transmitted = [False] * _WINDOW
        self.transmit_count = 0

    def total_line_count(self) -> int:
        """Return how many lines have been read in total."""
        return self.line_count

    def transmitted_perc(self) -> int:
        """Return the percentage of matched lines that were transmitted."""
        return int(percent_of(float(self.match_count), float(self.transmit_count)))

    def update_position(self) -> None:
        """Move to the next bucket and count one more line."""
        self.pos = (self.pos + 1) % _WINDOW
        self.line_count += 1

    def update_line_matched(self) -> None:
        if not self.matched[self.pos]:
            self.match_count += 1
            self.matched[self.pos] = True

    def update_line_transmitted(self) -> None:
        if not self.transmitted[self.pos]:
            self.transmit_count += 1
            self.transmitted[self.pos] = True

    def update_line_not_matched(self) -> None:
        if self.matched[self.pos]:
            self.match_count -= 1
            self.matched[self.pos] = False

    def update_line_not_transmitted(self) -> None:
        if self.transmitted[self.pos]:
            self.transmit_count -= 1
            self.transmitted[self.pos] = False