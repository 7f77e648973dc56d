"""Fallback (catch-all) kind — the bottom of the kind registry."""

from __future__ import annotations

from typing import Any, Optional

from ..core import ConvType, FormatSpec, KindRenderer, Rendered, ValueKind


class AnyKind(ValueKind):
    def matches(self, value: Any) -> bool:
        return True


class FallbackRenderer(KindRenderer):
    """``str()`` of the value, ``repr()`` under ``?``.

    Mounted at the lowest priority (typically -999) so that every value
    that does not match a more specific kind still renders.
    """

    kind = "object"
    supported = frozenset({ConvType.NONE, ConvType.DEBUG})

    def convert(self, value: Any, spec: FormatSpec, width: int, precision: Optional[int]) -> Rendered:
        text = repr(value) if spec.type is ConvType.DEBUG else str(value)
        return Rendered("", text, width)
