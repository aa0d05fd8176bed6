"""Helpers shared by the resources and data sources."""

from __future__ import annotations

import hashlib
import re
from datetime import datetime, timezone

DEFAULT_FILE_MODE = 0o644

_OCTAL_PREFIX = re.compile(r"\s*\+?([0-7]+)")
_UINT32_MAX = 0xFFFFFFFF


def parse_file_mode(mode: str) -> int:
    """Parse the leading octal digits of ``mode``; fall back to 0o644."""
    match = _OCTAL_PREFIX.match(mode)
    if match is None:
        return DEFAULT_FILE_MODE
    value = int(match.group(1), 8)
    if value > _UINT32_MAX:
        return DEFAULT_FILE_MODE
    return value


def _rfc3339_utc(timestamp: datetime) -> str:
    return timestamp.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _digest(subject: str, timestamp: datetime) -> str:
    digest = hashlib.md5(usedforsecurity=False)
    digest.update(subject.encode("utf-8"))
    digest.update(_rfc3339_utc(timestamp).encode("ascii"))
    return digest.hexdigest()


def generate_file_id(path: str, timestamp: datetime) -> str:
    """Return an identifier for a file derived from its path and the time, to the second."""
    return _digest(path, timestamp)


def generate_exec_id(command: str, timestamp: datetime) -> str:
    """Return an identifier for a command derived from its text and the time, to the second."""
    return _digest(command, timestamp)