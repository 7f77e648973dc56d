"""Handlers sub-package — concrete ValueKind + KindRenderer implementations,
one module per kind.

numeric   – integers and floats, every numeric conversion
text      – strings (precision is a skip offset)
container – mappings / lists / tuples through the pretty-printer
fallback  – catch-all ``str`` / ``repr``
"""

from .container import ContainerKind, ContainerRenderer
from .fallback import AnyKind, FallbackRenderer
from .numeric import NumberKind, NumberRenderer, sign_glyph
from .text import TextKind, TextRenderer

__all__ = [
    "AnyKind",
    "ContainerKind",
    "ContainerRenderer",
    "FallbackRenderer",
    "NumberKind",
    "NumberRenderer",
    "TextKind",
    "TextRenderer",
    "sign_glyph",
]
