"""Formatter factory — the single place where all pieces are assembled.

``build_default_formatter`` is the recommended entry point for users who
want a working ``Formatter`` without hand-wiring the kind registry.

Customisation points:

* **default_precision** – digits for ``e``/``f``/``g``/``%`` when the field
                          gives none (default 6).
* **default_indent**    – indent of ``{:#}`` container fields without a
                          width (default 4).
* **kinds**             – extra ``KindNode``s, mounted next to (or, by
                          name, instead of) the built-in ones.
"""

from __future__ import annotations

from typing import Iterable

from .core import KindNode, KindRegistry
from .engine import Formatter
from .handlers import (
    AnyKind,
    ContainerKind,
    ContainerRenderer,
    FallbackRenderer,
    NumberKind,
    NumberRenderer,
    TextKind,
    TextRenderer,
)


def build_default_formatter(
        *,
        default_precision: int = 6,
        default_indent: int = 4,
        kinds: Iterable[KindNode] | None = None,
) -> Formatter:
    """Assemble a Formatter with the standard kinds.

    What gets wired
    ---------------
    * ``container`` (priority  30) – mappings, lists, tuples.
    * ``text``      (priority  20) – ``str``.
    * ``number``    (priority  10) – ``int`` / ``float`` (not ``bool``).
    * ``fallback``  (priority -999, catch-all).

    Args:
        default_precision: Precision used by float notations and percent.
        default_indent:    Indent used by ``{:#}`` on containers.
        kinds:             Extra nodes; a node whose name matches a built-in
                           one replaces it.

    Returns:
        Fully wired ``Formatter`` ready for use.

    Example::

        fmt = build_default_formatter(default_precision=2)
        fmt.format("{:f}", 3.14159)
        # → "3.14"
    """
    registry = KindRegistry()
    registry.register(KindNode(
        name="container", priority=30,
        matcher=ContainerKind(),
        renderer=ContainerRenderer(default_indent=default_indent),
    ))
    registry.register(KindNode(
        name="text", priority=20,
        matcher=TextKind(), renderer=TextRenderer(),
    ))
    registry.register(KindNode(
        name="number", priority=10,
        matcher=NumberKind(),
        renderer=NumberRenderer(default_precision=default_precision),
    ))
    registry.register(KindNode(
        name="fallback", priority=-999,
        matcher=AnyKind(), renderer=FallbackRenderer(),
    ))

    for node in kinds or ():
        registry.register(node)

    return Formatter(registry)
