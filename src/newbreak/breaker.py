from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Sequence, final

from .cache import Cache
from .common import AlreadyFinalized, NotFinalized, Pos, Pt
from .justify import assign_target_widths
from .lines import Solution
from .nodes import Node, prepare_all
from .params import BreakParams
from .search import BreakpointSearch, Key
from .widths import TargetWidths

__all__ = [
    "Linebreaker",
    "create",
    "add_node",
    "finalize",
    "compute_breaks",
]


@final
class Linebreaker:
    """Breaks a paragraph of nodes into lines.

    Add nodes with :meth:`add_node`, then call :meth:`finalize` once.
    Afterwards, :meth:`compute_breaks` may be called as often as needed:
    results are cached between calls.

    Parameters
    ----------
    first_line
        The target width of the first line.
    more
        Target widths of subsequent lines. The last width given
        applies to all further lines.
    params
        Used for arguments of :meth:`compute_breaks` which are left at zero.

    Example
    -------

    .. code-block:: python

        breaker = Linebreaker(220)
        for word in ["lorem", "ipsum"]:
            breaker.add_node(Node.box(measure(word), text=word))
            breaker.add_node(Node.glue(10, 15, 3))
        breaker.finalize()
        solution = breaker.compute_breaks()
    """

    __slots__ = ("nodes", "widths", "params", "cache", "debugging", "_done")

    def __init__(
        self,
        first_line: Pt,
        *more: Pt,
        params: BreakParams = BreakParams.DEFAULT,
        debugging: bool = False,
    ) -> None:
        self.nodes: List[Node] = []
        self.widths = TargetWidths(first_line, *more)
        self.params = params
        self.cache: Cache[Key, Solution] = Cache()
        self.debugging = debugging
        self._done = False

    @staticmethod
    def from_nodes(
        nodes: Iterable[Node],
        widths: Sequence[Pt],
        params: BreakParams = BreakParams.DEFAULT,
    ) -> Linebreaker:
        "Create a finalized linebreaker for the given nodes"
        breaker = Linebreaker(*TargetWidths.of(tuple(widths)), params=params)
        breaker.add_nodes(nodes)
        breaker.finalize()
        return breaker

    @property
    def finalized(self) -> bool:
        return self._done

    def add_node(self, n: Node) -> None:
        if self._done:
            raise AlreadyFinalized("Cannot add nodes after finalizing")
        self.nodes.append(n)

    def add_nodes(self, ns: Iterable[Node]) -> None:
        for n in ns:
            self.add_node(n)

    def add_width(self, *ws: Pt) -> None:
        """Add target widths for subsequent lines. Cached results are
        discarded, since they may depend on the previous last width."""
        self.widths = self.widths.extend(*ws)
        self.cache.clear()

    def finalize(self) -> None:
        "Close the paragraph and prepare the nodes for searching"
        if self._done:
            raise AlreadyFinalized("Linebreaker is already finalized")
        self.nodes.append(Node.sentinel())
        prepare_all(self.nodes)
        self._done = True

    def compute_breaks(
        self,
        full_justify: bool = False,
        start: Pos = 0,
        end: Pos = 0,
        unacceptable_ratio: int = 0,
        line_penalty: int = 0,
    ) -> Solution:
        """Find the best way to break the nodes in ``[start, end)``.

        Parameters
        ----------
        full_justify
            Whether to calculate the justified width of every node on
            every line (see :attr:`~newbreak.lines.Line.target_widths`).
        start
            The position of the first node to break.
        end
            The position after the last node to break.
            Zero means up to and including the closing sentinel.
        unacceptable_ratio
            See :class:`~newbreak.params.BreakParams`. Zero means default.
        line_penalty
            See :class:`~newbreak.params.BreakParams`. Zero means default.

        Returns
        -------
        Solution
            The least-bad solution, or :attr:`Solution.INFEASIBLE` if
            the nodes can't be broken within the given tolerance.
        """
        if not self._done:
            raise NotFinalized("Call finalize() before computing breaks")
        end = end or len(self.nodes)
        if not 0 <= start < end <= len(self.nodes):
            raise ValueError(
                f"Invalid range [{start}, {end}) "
                f"for {len(self.nodes)} nodes"
            )
        params = self.params.resolve(
            full_justify, unacceptable_ratio, line_penalty
        )
        solution = BreakpointSearch(
            self.nodes, self.widths, self.cache, self.debugging
        ).solve(params.options(start, end))
        if params.full_justify and solution.feasible:
            return replace(
                solution,
                lines=tuple(map(assign_target_widths, solution.lines)),
            )
        return solution


def create(first_line: Pt) -> Linebreaker:
    return Linebreaker(first_line)


def add_node(breaker: Linebreaker, n: Node) -> None:
    breaker.add_node(n)


def finalize(breaker: Linebreaker) -> None:
    breaker.finalize()


def compute_breaks(
    breaker: Linebreaker,
    full_justify: bool = False,
    start: Pos = 0,
    end: Pos = 0,
    unacceptable_ratio: int = 0,
    line_penalty: int = 0,
) -> Solution:
    return breaker.compute_breaks(
        full_justify, start, end, unacceptable_ratio, line_penalty
    )
