"""Composite values — mappings, lists and tuples — via the pretty-printer.

Exports
-------
ContainerKind
    Fires on every value ``printer.is_composite`` accepts.

ContainerRenderer
    Flat rendering by default.  With ``#`` the field width becomes the
    indent size (or *default_indent* when no width was given) and no padding
    is applied.
"""

from __future__ import annotations

from typing import Any, Optional

from ..core import ConvType, FormatSpec, KindRenderer, Rendered, ValueKind
from ..printer import PrettyPrintOptions, is_composite, pretty


class ContainerKind(ValueKind):
    def matches(self, value: Any) -> bool:
        return is_composite(value)


class ContainerRenderer(KindRenderer):
    kind = "container"
    supported = frozenset({ConvType.NONE, ConvType.STRING, ConvType.DEBUG})

    def __init__(self, *, default_indent: int = 4) -> None:
        self._default_indent = default_indent

    def convert(self, value: Any, spec: FormatSpec, width: int, precision: Optional[int]) -> Rendered:
        if spec.alternate:
            options = PrettyPrintOptions(indent=width or self._default_indent)
            return Rendered("", pretty(value, options), 0)
        return Rendered("", pretty(value), width)
