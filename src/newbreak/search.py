"""The breakpoint search.

The principle is simple: to find the best way to break a paragraph,

* find the feasible breakpoints for the first line;
* for each of them, find the best way to break the rest of the paragraph;
* compare the resulting solutions and pick the best one.

The best way to break "the rest of the paragraph" only depends on where the
rest starts and which target width its first line has. These sub-problems
are memoized, which keeps the search polynomial.

Instead of recursing, each sub-problem is solved by a generator which
yields the sub-problems it depends on. A small driver loop keeps these
generators on an explicit stack, so that long paragraphs don't exhaust
the Python call stack.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from operator import attrgetter
from typing import Callable, Generator, List, Optional, Sequence, Tuple

from .badness import improve, new_line
from .cache import Cache
from .common import Badness, LineNum, Pos, prefix_counts
from .lines import Solution
from .nodes import Node
from .params import BreakOptions
from .widths import TargetWidths

logger = logging.getLogger(__name__)

# The line number is clamped to the width table (see TargetWidths.line_class)
# so results are only shared between lines with the same target width.
Key = Tuple[LineNum, BreakOptions]
Request = Tuple[LineNum, BreakOptions]
_Scan = Generator[Request, Solution, Solution]

_total_badness: Callable[[Solution], int] = attrgetter("total_badness")


class BreakpointSearch:
    """Finds the least-bad way to break a prepared node sequence.

    The last node of the sequence must be the paragraph's closing
    sentinel, and all nodes must have been prepared.
    """

    __slots__ = ("nodes", "widths", "cache", "debugging", "_negatives")

    def __init__(
        self,
        nodes: Sequence[Node],
        widths: TargetWidths,
        cache: Cache[Key, Solution],
        debugging: bool = False,
    ) -> None:
        self.nodes = nodes
        self.widths = widths
        self.cache = cache
        self.debugging = debugging
        self._negatives = prefix_counts(
            n.any_negative_penalties for n in nodes
        )

    def solve(self, options: BreakOptions, line: LineNum = 0) -> Solution:
        key = self._key(line, options)
        cached = self.cache.get(key)
        if cached is not None:
            self._debug(line, "Returned from cache")
            return cached

        stack: List[Tuple[Key, _Scan]] = [(key, self._scan(line, options))]
        result: Solution | None = None
        while stack:
            key, scan = stack[-1]
            try:
                sub_line, sub_options = scan.send(result)  # type: ignore
            except StopIteration as done:
                stack.pop()
                result = self.cache.setdefault(key, done.value)
                continue

            sub_key = self._key(sub_line, sub_options)
            result = self.cache.get(sub_key)
            if result is None:
                stack.append((sub_key, self._scan(sub_line, sub_options)))
            else:
                self._debug(sub_line, "Returned from cache")

        assert result is not None
        return result

    def _key(self, line: LineNum, options: BreakOptions) -> Key:
        return (self.widths.line_class(line), options)

    def _is_last_line(self, n: Node) -> bool:
        # The last line may be underfull. The sentinel is always last.
        last: Pos = self.nodes[-1].original_index  # type: ignore[assignment]
        return n.original_index >= last - 2  # type: ignore[operator]

    def _has_negatives(self, start: Pos, end: Pos) -> bool:
        return self._negatives[end] - self._negatives[start] > 0

    def _scan(self, line: LineNum, options: BreakOptions) -> _Scan:
        target = self.widths.target_for(line)
        start, end = options.start, options.end
        self._debug(
            line,
            "Looking for breakpoints %d->%d to fill %g on line %d",
            start,
            end,
            target,
            line,
        )
        min_ratio = options.unacceptable_ratio / 1000
        max_ratio = 2 - min_ratio

        width = stretch = shrink = 0.0
        seen_alternate = False
        best: Optional[Badness] = None
        considerations: List[Solution] = []

        for pos in range(start, end):
            node = self.nodes[pos]
            if node.breakable:
                ratio = width / target
                if ratio > max_ratio:
                    # Widths are never negative, so the ratio only grows
                    self._debug(line, "Too far, stopping at %d", pos)
                    break
                elif ratio < min_ratio and not self._is_last_line(node):
                    self._debug(line, "Too far at %d", pos)
                elif end - start == 1:
                    # A single node can't be split into a line and a rest
                    pass
                else:
                    ns = tuple(self.nodes[start:pos])
                    alt = node.break_alternate
                    if alt is None:
                        candidate = new_line(
                            ns, target, options, pos, width, stretch, shrink
                        )
                    else:
                        # The line ends with the breaking rendering, e.g.
                        # a hyphenated form of the word fragment.
                        candidate = new_line(
                            (*ns, alt),
                            target,
                            options,
                            pos,
                            width + alt.width,
                            stretch + alt.stretch,
                            shrink + alt.shrink,
                        )
                    if seen_alternate:
                        candidate = improve(candidate)
                    self._debug(
                        line,
                        "Possible break at %d with badness %d",
                        pos,
                        candidate.badness,
                    )

                    if (
                        best is not None
                        and best < candidate.badness
                        and self._has_negatives(pos + 1, end)
                    ):
                        self._debug(line, "Pruned break at %d", pos)
                    elif pos + 1 < end:
                        rest = yield line + 1, replace(options, start=pos + 1)
                        if rest.feasible:
                            total = candidate.badness + rest.total_badness
                            considerations.append(
                                Solution((candidate, *rest.lines), total)
                            )
                        else:
                            self._debug(
                                line, "No way to break after %d", pos
                            )
                    else:
                        considerations.append(
                            Solution((candidate,), candidate.badness)
                        )
                    if considerations and (
                        best is None
                        or considerations[-1].total_badness < best
                    ):
                        best = considerations[-1].total_badness

            width += node.width
            stretch += node.stretch
            shrink += node.shrink
            seen_alternate = seen_alternate or bool(node.alternates)

        if not considerations:
            self._debug(line, "No feasible breaks %d->%d", start, end)
            return Solution.INFEASIBLE

        chosen = min(considerations, key=_total_badness)
        if self.debugging:
            self._debug(
                line,
                "Best of %d for %d->%d has badness %d:\n%s",
                len(considerations),
                start,
                end,
                chosen.total_badness,
                chosen.describe(),
            )
        return chosen

    def _debug(self, line: LineNum, msg: str, *args: object) -> None:
        if self.debugging:
            logger.debug(" + " * line + msg, *args)
