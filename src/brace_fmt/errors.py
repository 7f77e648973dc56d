"""Error taxonomy for template formatting.

Every error raised while formatting derives from ``FormatError`` and aborts
the whole ``format`` call — there is no partial output.

Exports
-------
FormatError
    Root of the hierarchy (a ``ValueError``).

MalformedField
    Parse-time failure: unmatched or unexpected delimiter.

InvalidSpec
    Well-formed spec whose options conflict with the argument's kind.

TypeMismatch
    Conversion letter with no defined conversion for the argument's kind.

RangeError
    Out-of-range argument position or codepoint.

ArgumentResolutionError
    A ``{N}`` width / precision reference that is not a usable integer.
"""

from __future__ import annotations

from typing import Any


class FormatError(ValueError):
    """Base class for every formatting failure."""


class MalformedField(FormatError):
    """The template text does not follow the replacement-field grammar.

    Attributes:
        expected: Human readable description of what the parser wanted.
        found:    The character actually present, ``None`` at end of text.
        offset:   Absolute index in the template where parsing failed.
    """

    def __init__(self, expected: str, found: str | None, offset: int) -> None:
        self.expected = expected
        self.found = found
        self.offset = offset
        shown = "end of template" if found is None else repr(found)
        super().__init__(f"expected {expected} at offset {offset}, found {shown}")


class InvalidSpec(FormatError):
    """Spec options conflict with the kind of the argument being rendered."""

    def __init__(self, message: str, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{message} (argument kind: {kind})")


class TypeMismatch(FormatError):
    """A conversion letter was requested for a kind that cannot honour it."""

    def __init__(self, type_letter: str, kind: str) -> None:
        self.type_letter = type_letter
        self.kind = kind
        super().__init__(f"unknown format code {type_letter!r} for argument of kind {kind}")


class RangeError(FormatError):
    """Argument position (or codepoint) outside the permitted range.

    Attributes:
        position:  The offending position or codepoint; ``None`` when the
                   auto-index ran past the end of the argument list.
        available: Number of positional arguments supplied, when relevant.
    """

    def __init__(self, message: str, position: int | None = None, available: int | None = None) -> None:
        self.position = position
        self.available = available
        super().__init__(message)


class ArgumentResolutionError(FormatError):
    """A width / precision reference resolved to something unusable."""

    def __init__(self, what: str, position: int, value: Any) -> None:
        self.what = what
        self.position = position
        self.value = value
        super().__init__(
            f"{what} argument {position} must be a non-negative integer, "
            f"got {type(value).__name__} {value!r}"
        )
