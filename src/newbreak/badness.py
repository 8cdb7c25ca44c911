"""Scoring of candidate lines.

The badness of a line grows with the cube of how far its content has to
stretch or shrink to reach the target width, as in TeX. On top of this
come the penalty of the last node, a flat penalty per line, and the
substitution penalties of any alternates in use.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from itertools import product
from math import floor, prod
from typing import Sequence

from .common import Badness, Pos, Pt
from .lines import Line
from .nodes import Node
from .params import BreakOptions

logger = logging.getLogger(__name__)

# Prevents division by zero for lines without any stretch or shrink
_EPSILON = 0.001
# Above this number of rendering combinations, alternates are not tried.
MAX_COMBINATIONS = 4096


def badness(line: Line) -> Badness:
    s = line.shortfall
    if s == 0:
        bad = 0
    elif s > 0:
        bad = floor(100 * (s / (line.total_stretch + _EPSILON)) ** 3)
    else:
        bad = floor(100 * (-s / (line.total_shrink + _EPSILON)) ** 3)
    if line.nodes:
        bad += line.nodes[-1].penalty
    bad += line.options.line_penalty
    return bad + sum(n.substitution_penalty for n in line.nodes)


def new_line(
    nodes: Sequence[Node],
    target: Pt,
    options: BreakOptions,
    break_at: Pos,
    width: Pt,
    stretch: Pt,
    shrink: Pt,
) -> Line:
    "Create a scored line from its (already summed) totals"
    line = Line(
        nodes,
        width / target,
        stretch,
        shrink,
        target - width,
        options,
        target,
        break_at,
    )
    return replace(line, badness=badness(line))


def measure(
    nodes: Sequence[Node], target: Pt, options: BreakOptions, break_at: Pos
) -> Line:
    width = stretch = shrink = 0.0
    for n in nodes:
        width += n.width
        stretch += n.stretch
        shrink += n.shrink
    return new_line(
        nodes, target, options, break_at, width, stretch, shrink
    )


def improve(line: Line) -> Line:
    """Try every combination of alternates on the line, and return the one
    with the least badness. The primary renderings win ties."""
    choices = [(n, *n.alternates) for n in line.nodes]
    count = prod(map(len, choices))
    if count == 1:
        return line
    elif count > MAX_COMBINATIONS:
        logger.debug(
            "Not trying %d combinations of alternates on line %r",
            count,
            line.describe(),
        )
        return line

    best = line
    for combination in product(*choices):
        candidate = measure(
            combination, line.target, line.options, line.break_at
        )
        if candidate.badness < best.badness:
            best = candidate
    return best
