"""Module-level convenience over a shared default ``Formatter``."""

from __future__ import annotations

from typing import Any

from .engine import Formatter
from .factory import build_default_formatter

# built at import; never rebound
_default = build_default_formatter()


def default_formatter() -> Formatter:
    """Return the shared formatter."""
    return _default


def format(template: str, *args: Any) -> str:  # noqa: A001
    """``format("{:>5}", 42)`` → ``"   42"``.  See ``Formatter.format``."""
    return _default.format(template, *args)
