"""File read permission checks for users."""

from __future__ import annotations

import logging

_log = logging.getLogger(__name__)


def to_read(user: str, file_path: str) -> bool:
    """Return whether the user may read the file.

    No access control list check is made, so every file is readable.
    """
    _log.debug("%s %s Not performing ACL check as not compiled in", user, file_path)
    return True