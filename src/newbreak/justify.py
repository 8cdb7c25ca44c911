from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Sequence

from .common import Pt
from .lines import Line
from .nodes import Node


def _weight(contribution: Sequence[float], level: int) -> float:
    return contribution[level] if level < len(contribution) else 0


def _stretch_at(n: Node, level: int) -> Pt:
    return n.stretch * _weight(n.stretch_contribution, level)


def _shrink_at(n: Node, level: int) -> Pt:
    return n.shrink * _weight(n.shrink_contribution, level)


def assign_target_widths(line: Line) -> Line:
    """Determine the width of every node so that the line is justified.

    The shortfall is distributed level by level: the first level of every
    node's stretch (or shrink) is used up before the second one is touched,
    and so on. Lines which can't be justified completely are justified
    as far as their elasticity allows.
    """
    widths = [n.width for n in line.nodes]
    shortfall = line.shortfall
    if shortfall > 0:
        widths = _distribute(line.nodes, widths, shortfall, _stretch_at)
    elif shortfall < 0:
        widths = _distribute(line.nodes, widths, -shortfall, _shrink_at, -1)
    return replace(line, target_widths=tuple(widths))


def _distribute(
    ns: Sequence[Node],
    widths: List[Pt],
    amount: Pt,
    capacity: Callable[[Node, int], Pt],
    sign: int = 1,
) -> List[Pt]:
    level = 0
    while amount > 0:
        available = [capacity(n, level) for n in ns]
        total = sum(available)
        if total == 0:
            break
        ratio = min(amount / total, 1)
        widths = [w + sign * ratio * a for w, a in zip(widths, available)]
        amount -= total * ratio
        level += 1
    return widths
