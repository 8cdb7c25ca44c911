from __future__ import annotations

from typing import List

from newbreak import Node
from newbreak.badness import measure
from newbreak.justify import assign_target_widths
from newbreak.nodes import prepare_all

from .common import OPTIONS, approx


def _prepared(*ns: Node) -> List[Node]:
    nodes = list(ns)
    prepare_all(nodes)
    return nodes


def _kashida_and_space() -> List[Node]:
    return _prepared(
        Node(
            20,
            stretch=10,
            shrink=4,
            stretch_contribution=(1, 0),
            shrink_contribution=(1, 0),
            debug_text="-",
        ),
        Node(
            10,
            stretch=20,
            shrink=2,
            stretch_contribution=(0, 1),
            shrink_contribution=(0, 1),
            debug_text=" ",
        ),
    )


class TestAssignTargetWidths:
    def test_stretch_spaces(self):
        nodes = _prepared(Node.box(100), Node.glue(10, 15, 3), Node.box(100))
        line = assign_target_widths(measure(nodes, 220, OPTIONS, 3))
        assert line.target_widths == approx((100, 20, 100))
        assert sum(line.target_widths) == approx(220)

    def test_shrink_spaces(self):
        nodes = _prepared(Node.box(100), Node.glue(10, 15, 3), Node.box(100))
        line = assign_target_widths(measure(nodes, 209, OPTIONS, 3))
        assert line.target_widths == approx((100, 9, 100))

    def test_exact_fit_is_unchanged(self):
        nodes = _prepared(Node.box(100), Node.glue(10, 15, 3), Node.box(110))
        line = assign_target_widths(measure(nodes, 220, OPTIONS, 3))
        assert line.target_widths == (100, 10, 110)

    def test_levels_are_used_in_order(self):
        # the kashida stretches to its limit before the space stretches
        line = assign_target_widths(
            measure(_kashida_and_space(), 45, OPTIONS, 2)
        )
        assert line.target_widths == approx((30, 15))

    def test_levels_when_shrinking(self):
        line = assign_target_widths(
            measure(_kashida_and_space(), 25, OPTIONS, 2)
        )
        assert line.target_widths == approx((16, 9))

    def test_partial_first_level(self):
        line = assign_target_widths(
            measure(_kashida_and_space(), 35, OPTIONS, 2)
        )
        assert line.target_widths == approx((25, 10))

    def test_no_capacity(self):
        nodes = _prepared(Node.box(100))
        line = assign_target_widths(measure(nodes, 200, OPTIONS, 1))
        assert line.target_widths == (100,)

    def test_not_enough_capacity(self):
        # justified as far as possible
        nodes = _prepared(Node.box(100), Node.glue(10, 15, 3))
        line = assign_target_widths(measure(nodes, 200, OPTIONS, 2))
        assert line.target_widths == approx((100, 25))

    def test_other_fields_untouched(self):
        nodes = _prepared(Node.box(100), Node.glue(10, 15, 3), Node.box(100))
        line = measure(nodes, 220, OPTIONS, 3)
        justified = assign_target_widths(line)
        assert justified.nodes is line.nodes
        assert justified.badness == line.badness
        assert line.target_widths == ()
