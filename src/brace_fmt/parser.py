"""Field parser — recursive descent over one replacement field.

Grammar::

    field      ::= "{" [position] [":" spec] "}"
    position   ::= digit+
    spec       ::= [[fill] align] [sign] ["#"] ["0"] [width] ["." precision] [type]
    fill       ::= <any character except "{" and "}">
    align      ::= "<" | ">" | "^" | "="
    sign       ::= "+" | "-" | " "
    width      ::= digit+ | "{" [position] "}"
    precision  ::= digit+ | "{" [position] "}"
    type       ::= "b" | "c" | "d" | "e" | "E" | "f" | "F" | "g" | "G"
                 | "o" | "s" | "x" | "X" | "%" | "?"

Literal text between fields is scanned by ``scan_literal``; ``{{`` and
``}}`` stand for single braces.

Exports
-------
parse_field
    ``(text, start) → (ReplacementField, consumed)``.

scan_literal
    ``(text, start) → (literal, consumed)``.
"""

from __future__ import annotations

from typing import Optional, Tuple

import regex

from .core import (
    Align,
    ArgumentRef,
    Case,
    ConvType,
    Count,
    FormatSpec,
    IntLiteral,
    ReplacementField,
    Sign,
)
from .errors import MalformedField
from .logs import get_logger

log = get_logger("brace_fmt.parser")

_DIGITS = regex.compile(r"[0-9]+")
_LITERAL_RUN = regex.compile(r"[^{}]+")

_ALIGNS = {a.value: a for a in Align}
_SIGNS = {"+": Sign.PLUS, "-": Sign.MINUS, " ": Sign.SPACE}
_TYPES = {
    "b": (ConvType.BINARY, Case.LOWER),
    "c": (ConvType.CHAR, Case.LOWER),
    "d": (ConvType.DECIMAL, Case.LOWER),
    "e": (ConvType.SCIENTIFIC, Case.LOWER),
    "E": (ConvType.SCIENTIFIC, Case.UPPER),
    "f": (ConvType.FIXED, Case.LOWER),
    "F": (ConvType.FIXED, Case.UPPER),
    "g": (ConvType.GENERAL, Case.LOWER),
    "G": (ConvType.GENERAL, Case.UPPER),
    "o": (ConvType.OCTAL, Case.LOWER),
    "s": (ConvType.STRING, Case.LOWER),
    "x": (ConvType.HEX, Case.LOWER),
    "X": (ConvType.HEX, Case.UPPER),
    "%": (ConvType.PERCENT, Case.LOWER),
    "?": (ConvType.DEBUG, Case.LOWER),
}


class _Cursor:
    """Single-character lookahead over *text* starting at *pos*."""

    def __init__(self, text: str, pos: int) -> None:
        self.text = text
        self.pos = pos

    def peek(self, ahead: int = 0) -> Optional[str]:
        i = self.pos + ahead
        return self.text[i] if i < len(self.text) else None

    def match(self, ch: str) -> bool:
        if self.peek() == ch:
            self.pos += 1
            return True
        return False

    def consume(self, ch: str) -> None:
        if not self.match(ch):
            raise MalformedField(repr(ch), self.peek(), self.pos)

    def digits(self) -> Optional[int]:
        m = _DIGITS.match(self.text, self.pos)
        if m is None:
            return None
        self.pos = m.end()
        return int(m.group())


# ─────────────────────────────────────────────────────────────────────────────
# Grammar productions
# ─────────────────────────────────────────────────────────────────────────────


def _fill_align(cur: _Cursor) -> Tuple[Optional[str], Optional[Align]]:
    # commit to a fill only if the character after it is an alignment
    first, second = cur.peek(), cur.peek(1)
    if first is not None and first not in "{}" and second in _ALIGNS:
        cur.pos += 2
        return first, _ALIGNS[second]
    if first in _ALIGNS:
        cur.pos += 1
        return None, _ALIGNS[first]
    return None, None


def _count(cur: _Cursor) -> Optional[Count]:
    if cur.match("{"):
        ref = ArgumentRef(cur.digits())
        cur.consume("}")
        return ref
    n = cur.digits()
    return None if n is None else IntLiteral(n)


def _type(cur: _Cursor) -> Tuple[ConvType, Case]:
    ch = cur.peek()
    if ch is not None and ch in _TYPES:
        cur.pos += 1
        return _TYPES[ch]
    # anything else is left for the closing-delimiter check
    return ConvType.NONE, Case.LOWER


def _format_spec(cur: _Cursor) -> FormatSpec:
    fill, align = _fill_align(cur)
    sign = _SIGNS.get(cur.peek() or "", Sign.NONE)
    if sign is not Sign.NONE:
        cur.pos += 1
    alternate = cur.match("#")
    zero_pad = cur.match("0")
    width = _count(cur) or IntLiteral(0)
    precision = None
    if cur.match("."):
        precision = _count(cur)
        if precision is None:
            raise MalformedField("digit or '{' after '.'", cur.peek(), cur.pos)
    conv, case = _type(cur)

    if zero_pad and align is None:
        fill, align = "0", Align.AFTER_SIGN

    return FormatSpec(
        fill=fill if fill is not None else " ",
        align=align,
        sign=sign,
        alternate=alternate,
        zero_pad=zero_pad,
        width=width,
        precision=precision,
        type=conv,
        case=case,
    )


def parse_field(text: str, start: int = 0) -> Tuple[ReplacementField, int]:
    """Parse the replacement field that opens at ``text[start]``.

    Returns the field and the number of characters it spans (always at
    least 2).  Raises ``MalformedField`` on any grammar violation.
    """
    cur = _Cursor(text, start)
    cur.consume("{")
    position = cur.digits()
    spec = _format_spec(cur) if cur.match(":") else FormatSpec.DEFAULT
    cur.consume("}")
    field = ReplacementField(position=position, spec=spec)
    log.debug("parsed field {!r} at {}: {!r}", text[start:cur.pos], start, field)
    return field, cur.pos - start


def scan_literal(text: str, start: int = 0) -> Tuple[str, int]:
    """Scan literal text from *start* up to the next replacement field.

    ``{{`` and ``}}`` collapse to one brace; a lone ``}`` is kept as is.
    Returns the literal and the number of characters consumed (``0`` when
    *start* is at a field opener or at end of text).
    """
    out = []
    pos = start
    while pos < len(text):
        m = _LITERAL_RUN.match(text, pos)
        if m is not None:
            out.append(m.group())
            pos = m.end()
            continue
        ch = text[pos]
        nxt = text[pos + 1] if pos + 1 < len(text) else None
        if nxt == ch:
            out.append(ch)
            pos += 2
        elif ch == "}":
            out.append(ch)
            pos += 1
        else:
            break
    return "".join(out), pos - start
