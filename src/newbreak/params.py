from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .common import Pos, add_slots


@add_slots
@dataclass(frozen=True)
class BreakOptions:
    """Describes one sub-problem of the search: break the nodes in
    ``[start, end)``. Hashable, so it can be used in cache keys."""

    full_justify: bool
    start: Pos
    end: Pos
    unacceptable_ratio: int  # per mille
    line_penalty: int


@add_slots
@dataclass(frozen=True)
class BreakParams:
    """Parameters for tweaking the linebreaking algorithm.

    Parameters
    ----------
    unacceptable_ratio
        How far (in per mille) the fill ratio of a line may deviate from 1
        before a break is no longer considered. The default of 500 allows
        lines between 50% and 150% of their target width.
        The last line may always be underfull.
    line_penalty
        Added to the badness of every line. Higher values favor fewer lines.
    full_justify
        Whether to calculate the justified width of every node.
    """

    unacceptable_ratio: int = 500
    line_penalty: int = 10
    full_justify: bool = False

    DEFAULT: ClassVar["BreakParams"]

    def resolve(
        self, full_justify: bool, unacceptable_ratio: int, line_penalty: int
    ) -> BreakParams:
        """Fill in values given as zero with the values of this object"""
        return BreakParams(
            unacceptable_ratio or self.unacceptable_ratio,
            line_penalty or self.line_penalty,
            full_justify or self.full_justify,
        )

    def options(self, start: Pos, end: Pos) -> BreakOptions:
        return BreakOptions(
            self.full_justify,
            start,
            end,
            self.unacceptable_ratio,
            self.line_penalty,
        )


BreakParams.DEFAULT = BreakParams()
