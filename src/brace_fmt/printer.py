"""Container pretty-printer — recursive rendering of mappings and sequences.

Used both on its own (``pretty`` / ``debug_print``) and by the container
renderer when a composite value is substituted into a template.

Output shape::

    flat      {a = 1, b = {c = 2}}
    indent=2  {
                a = 1,
                b = {
                  c = 2,
                },
              }

Exports
-------
PrettyPrintOptions
    Per-call options (indent, starting depth, identity tags).

is_composite
    Whether a value is rendered by this module.

pretty
    Render a single value.

pretty_join
    Space-joined renderings of several values.

debug_print
    Write space-joined renderings of several values to stdout.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Tuple

SELF_MARKER = "(self)"


@dataclass(frozen=True)
class PrettyPrintOptions:
    """Options for one ``pretty`` call.

    Attributes:
        indent:        Spaces per nesting level; ``0`` renders on one line.
        depth:         Nesting level the top-level value starts at.
        show_identity: Prefix every non-empty container with a
                       ``<type>: 0x<id>`` tag.
    """

    indent: int = 0
    depth: int = 0
    show_identity: bool = False


def is_composite(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _entries(value: Any) -> Iterator[Tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return iter(value.items())
    return enumerate(value)


class _Printer:
    """Holds the options and the visited set for a single top-level call.

    ``_active`` contains the ``id`` of every container currently on the
    render path; a child that is one of them renders as ``(self)``.
    """

    def __init__(self, options: PrettyPrintOptions) -> None:
        self._options = options
        self._active: set[int] = set()

    def render(self, value: Any, depth: int) -> str:
        if not is_composite(value):
            return str(value)
        if id(value) in self._active:
            return SELF_MARKER
        if len(value) == 0:
            return "{}"

        indent = self._options.indent
        line_end = "\n" if indent > 0 else ""
        pad = " " * (indent * (depth + 1))
        separator = "," + line_end if indent > 0 else ", "

        self._active.add(id(value))
        try:
            parts = [
                f"{pad}{self._key(k, depth + 1)} = {self.render(v, depth + 1)}"
                for k, v in _entries(value)
            ]
        finally:
            self._active.discard(id(value))

        head = f"{type(value).__name__}: {id(value):#x} " if self._options.show_identity else ""
        body = separator.join(parts)
        if indent > 0:
            body += ","
        return f"{head}{{{line_end}{body}{line_end}{' ' * (indent * depth)}}}"

    def _key(self, key: Any, depth: int) -> str:
        if isinstance(key, str):
            return key
        return "[" + self.render(key, depth) + "]"


def pretty(value: Any, options: Optional[PrettyPrintOptions] = None) -> str:
    """Render *value*; containers recursively, everything else via ``str``.

    Entry order follows the container's own iteration order.
    """
    options = options or PrettyPrintOptions()
    return _Printer(options).render(value, options.depth)


def pretty_join(*values: Any, options: Optional[PrettyPrintOptions] = None) -> str:
    """``pretty`` of every value, space separated."""
    return " ".join(pretty(v, options) for v in values)


def debug_print(*values: Any, options: Optional[PrettyPrintOptions] = None) -> None:
    """Write ``pretty_join(*values)`` plus a newline in a single write."""
    sys.stdout.write(pretty_join(*values, options=options) + "\n")
