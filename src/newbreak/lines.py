from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import ClassVar, Iterator, Sequence

from .common import Badness, Pos, Pt, add_slots
from .nodes import Node
from .params import BreakOptions

MAX_BADNESS: Badness = sys.maxsize


@add_slots
@dataclass(frozen=True)
class Line:
    """One line of a solution.

    The nodes are the renderings chosen for each position on the line,
    which may include alternates. The node at which the line breaks
    is not part of the line.
    """

    nodes: Sequence[Node]
    ratio: float
    total_stretch: Pt
    total_shrink: Pt
    shortfall: Pt
    options: BreakOptions
    target: Pt
    break_at: Pos
    badness: Badness = 0
    # only set when full justification is requested
    target_widths: Sequence[Pt] = ()

    def describe(self) -> str:
        return f"{self.ratio:.3f} " + "".join(
            n.debug_text for n in self.nodes
        )


@add_slots
@dataclass(frozen=True)
class Solution:
    lines: Sequence[Line]
    total_badness: Badness

    INFEASIBLE: ClassVar[Solution]

    @property
    def feasible(self) -> bool:
        return bool(self.lines)

    def breakpoints(self) -> Sequence[Pos]:
        "The positions of the nodes at which the lines are broken"
        return [ln.break_at for ln in self.lines]

    def describe(self) -> str:
        return "\n".join(ln.describe() for ln in self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


Solution.INFEASIBLE = Solution((), MAX_BADNESS)
