from __future__ import annotations

from functools import partial
from typing import Iterable, List, Sequence

from pytest import approx as _approx

from newbreak import Line, Node
from newbreak.params import BreakOptions

WORD_WIDTH = 100
SPACE = (10, 15, 3)  # width, stretch, shrink
# Trailing glue which can fill any amount of space on the last line
FINAL_STRETCH = 1_000_000

OPTIONS = BreakOptions(False, 0, 100, 500, 10)


def words_and_spaces(
    count: int, final_stretch: float = FINAL_STRETCH
) -> List[Node]:
    """Alternating words and spaces. The last space is very stretchy,
    so the last line can be as short as needed."""
    ns: List[Node] = []
    for i in range(count):
        ns.append(Node.box(WORD_WIDTH, debug_text=f"laa{i}"))
        width, stretch, shrink = SPACE
        ns.append(
            Node.glue(
                width, final_stretch if i == count - 1 else stretch, shrink
            )
        )
    return ns


def paragraph(widths: Iterable[float], final_stretch: float = 10_000):
    "Words of the given widths, separated by spaces"
    ns: List[Node] = []
    for i, w in enumerate(widths):
        ns.append(Node.box(w, debug_text=f"w{i}"))
        ns.append(Node.glue(*SPACE))
    if ns:
        ns[-1].stretch = final_stretch
    return ns


def positions(ns: Iterable[Node]) -> List[int]:
    return [n.original_index for n in ns]  # type: ignore[misc]


def unbreakable_positions(ns: Iterable[Node]) -> List[int]:
    return [n.original_index for n in ns if not n.breakable]  # type: ignore


def assert_nodes_conserved(ns: Sequence[Node], lines: Iterable[Line]):
    "All unbreakable positions end up on exactly one line, in order"
    assert unbreakable_positions(ns) == [
        pos for ln in lines for pos in unbreakable_positions(ln.nodes)
    ]


approx = partial(_approx, abs=1e-6)
