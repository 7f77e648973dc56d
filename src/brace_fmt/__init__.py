from .api import default_formatter, format
from .core import (
    Align,
    ArgumentRef,
    Case,
    ConvType,
    FormatSpec,
    IntLiteral,
    KindNode,
    KindRegistry,
    KindRenderer,
    Rendered,
    ReplacementField,
    Sign,
    ValueKind,
)
from .digits import is_infinite, is_nan, to_binary_digits, to_hex_digits, to_octal_digits
from .engine import Formatter, pad
from .errors import (
    ArgumentResolutionError,
    FormatError,
    InvalidSpec,
    MalformedField,
    RangeError,
    TypeMismatch,
)
from .factory import build_default_formatter
from .parser import parse_field, scan_literal
from .printer import PrettyPrintOptions, debug_print, pretty, pretty_join

__all__ = [
    # entry points
    "format",
    "pretty",
    "pretty_join",
    "debug_print",
    "default_formatter",
    "build_default_formatter",
    "Formatter",
    "parse_field",
    "scan_literal",
    "pad",
    # data model
    "FormatSpec",
    "ReplacementField",
    "IntLiteral",
    "ArgumentRef",
    "Align",
    "Sign",
    "ConvType",
    "Case",
    "PrettyPrintOptions",
    # kind system
    "ValueKind",
    "KindRenderer",
    "KindNode",
    "KindRegistry",
    "Rendered",
    # helpers
    "to_binary_digits",
    "to_octal_digits",
    "to_hex_digits",
    "is_nan",
    "is_infinite",
    # errors
    "FormatError",
    "MalformedField",
    "InvalidSpec",
    "TypeMismatch",
    "RangeError",
    "ArgumentResolutionError",
]
