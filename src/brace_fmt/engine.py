"""Formatter — the template walk, argument addressing, validation and padding.

Execution flow (``Formatter.format``)::

    for each piece of the template:
        literal run   → copied (``{{`` / ``}}`` collapsed)
        ``{`` field   → parse_field
                        → argument  (explicit position or auto-index)
                        → width / precision references
                        → render(spec, width, precision, argument)

Argument addressing
-------------------
Positions are 0-based.  Fields without a position consume the next slot of
an auto-index counter; explicit positions never move that counter, so both
modes can be mixed freely::

    format("{1} {} {0}", "a", "b")   # → "b a a"

Within one field the argument itself is resolved first, then the width
reference, then the precision reference.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from .core import Align, Count, FormatSpec, IntLiteral, KindRegistry, ReplacementField, Sign
from .errors import ArgumentResolutionError, InvalidSpec, RangeError, TypeMismatch
from .logs import get_logger
from .parser import parse_field, scan_literal

log = get_logger("brace_fmt.engine")


# ─────────────────────────────────────────────────────────────────────────────
# Padding
# ─────────────────────────────────────────────────────────────────────────────


def pad(sign: str, body: str, width: int, fill: str, align: Align) -> str:
    """Pad ``sign + body`` to at least *width* characters.

    Width is a minimum: nothing is ever truncated.  ``AFTER_SIGN`` puts the
    fill between *sign* and *body*; ``CENTER`` gives the odd character to
    the right side.
    """
    deficit = max(width - len(sign) - len(body), 0)
    if align is Align.LEFT:
        return sign + body + fill * deficit
    if align is Align.RIGHT:
        return fill * deficit + sign + body
    if align is Align.CENTER:
        left = deficit // 2
        return fill * left + sign + body + fill * (deficit - left)
    return sign + fill * deficit + body


# ─────────────────────────────────────────────────────────────────────────────
# Argument addressing
# ─────────────────────────────────────────────────────────────────────────────


class _Arguments:
    """Positional arguments of one ``format`` call plus the auto-index."""

    def __init__(self, args: Sequence[Any]) -> None:
        self._args = args
        self._next = 0

    def take(self, position: Optional[int], what: str) -> Tuple[int, Any]:
        count = len(self._args)
        if position is None:
            if self._next >= count:
                raise RangeError(
                    f"not enough positional arguments for {what} ({count} given)",
                    position=None, available=count,
                )
            position = self._next
            self._next += 1
        elif position >= count:
            raise RangeError(
                f"{what} position {position} out of range ({count} given)",
                position=position, available=count,
            )
        value = self._args[position]
        log.debug("{} -> argument {}: {!r}", what, position, value)
        return position, value

    def count(self, count: Optional[Count], what: str) -> Optional[int]:
        if count is None:
            return None
        if isinstance(count, IntLiteral):
            return count.value
        position, value = self.take(count.position, what)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ArgumentResolutionError(what, position, value)
        if isinstance(value, float):
            if not value.is_integer():
                raise ArgumentResolutionError(what, position, value)
            value = int(value)
        if value < 0:
            raise ArgumentResolutionError(what, position, value)
        return value


# ─────────────────────────────────────────────────────────────────────────────
# Formatter
# ─────────────────────────────────────────────────────────────────────────────


class Formatter:
    """Template formatter over a ``KindRegistry``.

    Use ``factory.build_default_formatter`` to get one with the standard
    kinds wired in.

    Attributes:
        registry: Kind dispatch table consulted by ``render``.
    """

    def __init__(self, registry: KindRegistry) -> None:
        self.registry = registry

    def format(self, template: str, *args: Any) -> str:
        """Render *template* against positional *args*.

        Raises a ``FormatError`` subclass on the first problem; no partial
        result is ever returned.
        """
        arguments = _Arguments(args)
        out = []
        pos = 0
        while pos < len(template):
            literal, consumed = scan_literal(template, pos)
            if consumed:
                out.append(literal)
                pos += consumed
                continue
            field, consumed = parse_field(template, pos)
            pos += consumed
            out.append(self._render_field(field, arguments))
        return "".join(out)

    def render(self, spec: FormatSpec, width: int, precision: Optional[int], argument: Any) -> str:
        """Render one already-resolved argument according to *spec*.

        Checks, in order: sign and ``=`` alignment on non-numeric kinds
        (``InvalidSpec``), unsupported conversion letter (``TypeMismatch``),
        precision on a conversion that takes none (``InvalidSpec``).
        """
        renderer = self.registry.resolve(argument)
        if renderer is None:
            raise TypeMismatch(spec.type_letter, type(argument).__name__)
        kind = renderer.kind

        if not renderer.numeric:
            if spec.sign is not Sign.NONE:
                raise InvalidSpec("sign not allowed", kind)
            if spec.align is Align.AFTER_SIGN:
                raise InvalidSpec("'=' alignment not allowed", kind)
        if spec.type not in renderer.supported:
            raise TypeMismatch(spec.type_letter, kind)
        if precision is not None and spec.type not in renderer.precision_types:
            letter = spec.type_letter
            raise InvalidSpec(
                "precision not allowed" + (f" with type {letter!r}" if letter else ""),
                kind,
            )

        out = renderer.convert(argument, spec, width, precision)
        align = spec.align or (Align.RIGHT if renderer.numeric else Align.LEFT)
        return pad(out.sign, out.body, out.width, spec.fill, align)

    def _render_field(self, field: ReplacementField, arguments: _Arguments) -> str:
        _, argument = arguments.take(field.position, "field")
        width = arguments.count(field.spec.width, "width") or 0
        precision = arguments.count(field.spec.precision, "precision")
        return self.render(field.spec, width, precision, argument)