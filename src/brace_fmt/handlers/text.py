"""Text values.

The precision of a text field is a *skip offset*, not a maximum length:
``{:.2}`` applied to ``"abcdef"`` yields ``"cdef"``.
"""

from __future__ import annotations

from typing import Any, Optional

from ..core import ConvType, FormatSpec, KindRenderer, Rendered, ValueKind


class TextKind(ValueKind):
    def matches(self, value: Any) -> bool:
        return isinstance(value, str)


class TextRenderer(KindRenderer):
    kind = "str"
    supported = frozenset({ConvType.NONE, ConvType.STRING, ConvType.DEBUG})
    precision_types = supported

    def convert(self, value: Any, spec: FormatSpec, width: int, precision: Optional[int]) -> Rendered:
        text = value[precision or 0:]
        if spec.type is ConvType.DEBUG:
            text = repr(text)
        return Rendered("", text, width)
