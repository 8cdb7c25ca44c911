"""The atoms the linebreaker works with.

Unlike classic Knuth-Plass, there is no separate notion of boxes, glue and
penalties: everything is a node. Any node may stretch or shrink (a little),
any node may carry a penalty, and any node may be a place to break.
A node can also offer *alternates*: other renderings of the same position,
e.g. a hyphenated form of a word fragment, or a wider glyph variant.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from .common import AlreadyPrepared, Pos, Pt, add_slots

_UNIT_WEIGHT = (1.0,)


@add_slots
@dataclass(eq=False)
class Node:
    """A single layout atom.

    Parameters
    ----------
    width
        The natural width of the node.
    stretch
        How much the node may grow beyond its natural width.
    shrink
        How much the node may shrink below its natural width.
    penalty
        The cost of ending a line with this node. Very negative values
        encourage (or force) a break, positive values discourage it.
    substitution_penalty
        Charged whenever this particular rendering is used in a line.
        Useful on alternates which should only be chosen if they help.
    breakable
        Whether a line may break at this node. After preparation, this
        is true if the node *or any of its alternates* is breakable.
        A line breaking at an unbreakable node ends with the first
        breakable alternate, e.g. a hyphenated form.
    stretch_contribution
        How the stretch is divided over successive levels of
        justification. For example, kashidas with ``(1, 0)`` and spaces with
        ``(0, 1)`` means kashidas are stretched to their limit before
        spaces start to stretch. Defaults to a single level.
    shrink_contribution
        The same, for shrinking.
    alternates
        Other renderings of this position.
    text
        An opaque reference to the host's content. Never inspected.
    debug_text
        A label used in diagnostic output.
    """

    width: Pt = 0
    stretch: Pt = 0
    shrink: Pt = 0
    penalty: int = 0
    substitution_penalty: int = 0
    breakable: bool = False
    stretch_contribution: Sequence[float] = ()
    shrink_contribution: Sequence[float] = ()
    alternates: Sequence[Node] = ()
    text: Any = None
    debug_text: str = ""

    # set by `prepare`
    original_index: Optional[Pos] = None
    any_negative_penalties: bool = False
    break_alternate: Optional[Node] = None

    @property
    def prepared(self) -> bool:
        return self.original_index is not None

    @staticmethod
    def box(width: Pt, text: Any = None, debug_text: str = "") -> Node:
        "A rigid, unbreakable node, e.g. a word"
        return Node(width, text=text, debug_text=debug_text)

    @staticmethod
    def glue(
        width: Pt,
        stretch: Pt,
        shrink: Pt,
        text: Any = None,
        debug_text: str = " ",
    ) -> Node:
        "An elastic place to break, e.g. an inter-word space"
        return Node(
            width,
            stretch,
            shrink,
            breakable=True,
            text=text,
            debug_text=debug_text,
        )

    @staticmethod
    def sentinel() -> Node:
        "The zero-width break which closes every paragraph"
        return Node(breakable=True)


def prepare(n: Node, ix: Pos) -> None:
    """Assign the position of the node and aggregate the properties
    of its alternates. Must run exactly once per node."""
    if n.prepared:
        raise AlreadyPrepared(
            f"Node {n.debug_text!r} was already prepared "
            f"at position {n.original_index}"
        )
    n.original_index = ix
    n.any_negative_penalties = n.penalty < 0 or any(
        a.penalty < 0 for a in n.alternates
    )
    if not n.breakable:
        n.break_alternate = next(
            (a for a in n.alternates if a.breakable), None
        )
        n.breakable = n.break_alternate is not None
    if not n.stretch_contribution:
        n.stretch_contribution = _UNIT_WEIGHT
    if not n.shrink_contribution:
        n.shrink_contribution = _UNIT_WEIGHT


def prepare_all(ns: Iterable[Node]) -> None:
    "Prepare every node and every alternate. Alternates share their position."
    for ix, n in enumerate(ns):
        prepare(n, ix)
        for a in n.alternates:
            prepare(a, ix)
