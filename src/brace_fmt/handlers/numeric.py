"""Numbers — integers and floats (``bool`` is deliberately not a number here).

Exports
-------
NumberKind
    Matches ``int`` / ``float`` values that are not ``bool``.

NumberRenderer
    Every numeric conversion: decimal, the integer bases, the float
    notations, percent, char and debug.
"""

from __future__ import annotations

from typing import Any, Optional

from ..core import Case, ConvType, FormatSpec, KindRenderer, Rendered, Sign, ValueKind
from ..digits import is_infinite, is_nan, to_binary_digits, to_hex_digits, to_octal_digits
from ..errors import RangeError, TypeMismatch

_MAX_CODEPOINT = 0x10FFFF

_INTEGER_ONLY = frozenset({ConvType.BINARY, ConvType.OCTAL, ConvType.HEX, ConvType.CHAR})
_FLOAT_NOTATIONS = frozenset({ConvType.SCIENTIFIC, ConvType.FIXED, ConvType.GENERAL})
_PREFIXES = {ConvType.BINARY: "0b", ConvType.OCTAL: "0o", ConvType.HEX: "0x"}


def _builtin_format(value: Any, format_spec: str, spec: FormatSpec) -> str:
    try:
        return format(value, format_spec)
    except OverflowError:
        raise RangeError(f"value too large for {spec.type_letter!r}", position=None) from None


def sign_glyph(sign: Sign, negative: bool) -> str:
    """``+`` / ``' '`` / ``''`` for non-negative values, ``-`` otherwise."""
    if negative:
        return "-"
    if sign is Sign.PLUS:
        return "+"
    if sign is Sign.SPACE:
        return " "
    return ""


class NumberKind(ValueKind):
    def matches(self, value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)


class NumberRenderer(KindRenderer):
    """Render a number as ``(sign + prefix, digits)``.

    The body is always built from the magnitude; the sign is computed
    separately so that ``=`` padding can go between the two.  Char never
    shows a sign glyph; percent shows only the minus.
    """

    kind = "number"
    numeric = True
    supported = frozenset(ConvType) - {ConvType.STRING}
    precision_types = _FLOAT_NOTATIONS

    def __init__(self, *, default_precision: int = 6) -> None:
        self._default_precision = default_precision

    def convert(self, value: Any, spec: FormatSpec, width: int, precision: Optional[int]) -> Rendered:
        conv = spec.type
        if conv in _INTEGER_ONLY and not isinstance(value, int):
            raise TypeMismatch(spec.type_letter, type(value).__name__)

        if conv is ConvType.CHAR:
            if value < 0 or value > _MAX_CODEPOINT:
                raise RangeError(f"codepoint {value} out of range for 'c'", position=value)
            return Rendered("", chr(value), width)

        if conv is ConvType.PERCENT:
            # "+" and " " are never shown; a minus stays left of any "=" fill
            body = _builtin_format(abs(value) * 100, f".{self._default_precision}f", spec) + "%"
            return Rendered("-" if value < 0 else "", body, width)

        negative = value < 0
        magnitude = abs(value)
        prefix = ""

        if conv in _PREFIXES:
            upper = spec.case is Case.UPPER
            if conv is ConvType.BINARY:
                body = to_binary_digits(magnitude)
            elif conv is ConvType.OCTAL:
                body = to_octal_digits(magnitude)
            else:
                body = to_hex_digits(magnitude, upper)
            if spec.alternate:
                prefix = _PREFIXES[conv].upper() if upper else _PREFIXES[conv]
        elif conv in _FLOAT_NOTATIONS:
            body = self._float_notation(magnitude, spec, precision)
        elif conv is ConvType.DEBUG:
            body = repr(magnitude)
        else:
            body = str(magnitude)

        return Rendered(sign_glyph(spec.sign, negative) + prefix, body, width)

    def _float_notation(self, magnitude: Any, spec: FormatSpec, precision: Optional[int]) -> str:
        upper = spec.case is Case.UPPER
        if upper and is_nan(magnitude):
            return "NAN"
        if upper and is_infinite(magnitude):
            return "INF"
        digits = self._default_precision if precision is None else precision
        alt = "#" if spec.alternate else ""
        # "g" switches to scientific when exponent < -4 or >= precision
        body = _builtin_format(magnitude, f"{alt}.{digits}{spec.type.value}", spec)
        return body.upper() if upper else body
