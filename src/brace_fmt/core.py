"""Core data model and kind-dispatch abstractions.

This module owns every *interface* in the system.  Nothing here depends on a
concrete renderer — those live in the ``handlers`` sub-package and are wired
together by ``factory``.

Rendering flow (``Formatter.format`` entry point)::

    template
      │
      ▼
    scan_literal / parse_field          ← parser: text → ReplacementField
      │
      ▼
    resolve argument, width, precision  ← Formatter: positions → values
      │
      ▼
    KindRegistry.resolve(argument)      ← select (priority, first-match)
      │
      ▼
    KindRenderer.convert(...)           ← (sign, body) for that kind
      │
      ▼
    pad / align                         ← Formatter
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, FrozenSet, List, Optional, Union


# ─────────────────────────────────────────────────────────────────────────────
# Spec enums
# ─────────────────────────────────────────────────────────────────────────────


class Align(Enum):
    LEFT = "<"
    RIGHT = ">"
    CENTER = "^"
    AFTER_SIGN = "="


class Sign(Enum):
    """Sign option.  ``NONE`` means no sign character was given at all;
    ``MINUS`` is an explicit ``-`` and renders exactly like ``NONE``.
    """

    NONE = ""
    MINUS = "-"
    PLUS = "+"
    SPACE = " "


class ConvType(Enum):
    DECIMAL = "d"
    BINARY = "b"
    OCTAL = "o"
    HEX = "x"
    SCIENTIFIC = "e"
    FIXED = "f"
    GENERAL = "g"
    PERCENT = "%"
    STRING = "s"
    CHAR = "c"
    DEBUG = "?"
    NONE = ""


class Case(Enum):
    LOWER = "lower"
    UPPER = "upper"


# ─────────────────────────────────────────────────────────────────────────────
# Width / precision: literal or argument reference
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class IntLiteral:
    """A count written directly in the spec: ``{:8}``."""

    value: int


@dataclass(frozen=True)
class ArgumentRef:
    """A count taken from an argument: ``{:{2}}``, or ``{:{}}`` (auto-index
    when *position* is ``None``).
    """

    position: Optional[int] = None


Count = Union[IntLiteral, ArgumentRef]


# ─────────────────────────────────────────────────────────────────────────────
# FormatSpec / ReplacementField
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FormatSpec:
    """Parsed option block of one replacement field.

    Attributes:
        fill:      Padding character.
        align:     Explicit alignment, ``None`` → kind default (right for
                   numbers, left otherwise).
        sign:      Sign option.
        alternate: ``#`` flag.
        zero_pad:  ``0`` flag as written; already folded into *fill* and
                   *align* by the parser when no alignment was given.
        width:     Minimum field width.
        precision: ``None`` → kind default.
        type:      Conversion selector.
        case:      Letter case for conversions that produce letters.
    """

    fill: str = " "
    align: Optional[Align] = None
    sign: Sign = Sign.NONE
    alternate: bool = False
    zero_pad: bool = False
    width: Count = IntLiteral(0)
    precision: Optional[Count] = None
    type: ConvType = ConvType.NONE
    case: Case = Case.LOWER

    DEFAULT: ClassVar['FormatSpec']

    @property
    def type_letter(self) -> str:
        """The conversion letter as written (``X`` for upper-case hex)."""
        letter = self.type.value
        return letter.upper() if self.case is Case.UPPER else letter


FormatSpec.DEFAULT = FormatSpec()


@dataclass(frozen=True)
class ReplacementField:
    """One ``{…}`` occurrence: optional explicit position + its spec."""

    position: Optional[int] = None
    spec: FormatSpec = field(default_factory=FormatSpec)


# ─────────────────────────────────────────────────────────────────────────────
# Kind system — closed set of renderable kinds
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Rendered:
    """Output of a ``KindRenderer`` before padding.

    ``sign`` is the part that stays left of ``=`` padding (sign glyph and,
    for integers, the base prefix); ``body`` is everything else.  ``width``
    is the padding width that should actually be applied.
    """

    sign: str
    body: str
    width: int


class ValueKind(ABC):
    """Predicate: does this *value* belong to the given kind?"""

    @abstractmethod
    def matches(self, value: Any) -> bool: ...


class KindRenderer(ABC):
    """Convert a single argument of one kind.

    Class attributes (set in subclass)::

        kind:            str        – name used in error messages
        numeric:         bool       – sign / ``=`` alignment allowed
        supported:       frozenset  – conversion types with a definition
        precision_types: frozenset  – conversion types that take a precision
    """

    kind: str
    numeric: bool = False
    supported: FrozenSet[ConvType] = frozenset({ConvType.NONE})
    precision_types: FrozenSet[ConvType] = frozenset()

    @abstractmethod
    def convert(self, value: Any, spec: FormatSpec, width: int, precision: Optional[int]) -> Rendered:
        """Return the unpadded rendering of *value*.

        Validation common to every kind has already run; the renderer only
        has to reject what is specific to itself.
        """


@dataclass
class KindNode:
    """One entry of the kind registry."""

    name: str
    priority: int
    matcher: ValueKind
    renderer: KindRenderer


class KindRegistry:
    """Priority-ordered registry with first-match dispatch.

    ::

        registry = KindRegistry()
        registry.register(KindNode("text", 20, TextKind(), TextRenderer()))
        registry.resolve("abc")   # → TextRenderer instance
    """

    def __init__(self) -> None:
        self._nodes: List[KindNode] = []

    def register(self, node: KindNode) -> None:
        """Add a node.  A node with an existing name replaces it."""
        nodes = [n for n in self._nodes if n.name != node.name] + [node]
        # kept sorted by descending priority; resolve walks it as is
        self._nodes = sorted(nodes, key=lambda n: n.priority, reverse=True)

    def resolve(self, value: Any) -> Optional[KindRenderer]:
        """Return the renderer of the highest-priority matching node."""
        for node in self._nodes:
            if node.matcher.matches(value):
                return node.renderer
        return None

    def nodes(self) -> List[KindNode]:
        """Return nodes sorted by descending priority."""
        return list(self._nodes)
