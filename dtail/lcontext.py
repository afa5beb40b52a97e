"""Line context settings for context aware grep queries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LContext:
    """Lines of trailing and leading context and a match limit."""

    after_context: int = 0
    before_context: int = 0
    max_count: int = 0

    def has(self) -> bool:
        """Return True if any setting is positive."""
        return self.after_context > 0 or self.before_context > 0 or self.max_count > 0