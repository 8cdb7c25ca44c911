from __future__ import annotations

import pytest

from newbreak import AlreadyPrepared, Node
from newbreak.nodes import prepare, prepare_all


class TestPrepare:
    def test_defaults(self):
        n = Node.box(40)
        prepare(n, 3)
        assert n.original_index == 3
        assert n.prepared
        assert not n.breakable
        assert not n.any_negative_penalties
        assert n.stretch_contribution == (1.0,)
        assert n.shrink_contribution == (1.0,)

    def test_keeps_given_contributions(self):
        n = Node(10, 4, 2, stretch_contribution=(0.5, 0.5))
        prepare(n, 0)
        assert n.stretch_contribution == (0.5, 0.5)
        assert n.shrink_contribution == (1.0,)

    @pytest.mark.parametrize(
        "penalty, alternate_penalties, expect",
        [
            (0, [], False),
            (-1, [], True),
            (5, [3, -100], True),
            (5, [0, 1], False),
        ],
    )
    def test_negative_penalties(self, penalty, alternate_penalties, expect):
        n = Node(
            10,
            penalty=penalty,
            alternates=[Node(10, penalty=p) for p in alternate_penalties],
        )
        prepare(n, 0)
        assert n.any_negative_penalties is expect

    def test_breakable_through_alternate(self):
        n = Node(20, alternates=[Node(25), Node(30, breakable=True)])
        prepare(n, 0)
        assert n.breakable
        assert n.break_alternate is n.alternates[1]

    def test_breakable_node_breaks_itself(self):
        n = Node.glue(10, 1, 1)
        n.alternates = [Node(12, breakable=True)]
        prepare(n, 0)
        assert n.breakable
        assert n.break_alternate is None

    def test_twice(self):
        n = Node.glue(10, 1, 1)
        prepare(n, 0)
        with pytest.raises(AlreadyPrepared, match="position 0"):
            prepare(n, 1)
        assert n.original_index == 0


def test_prepare_all():
    hyphenated = Node(35, breakable=True, penalty=50, debug_text="com-")
    ns = [
        Node.box(30, debug_text="com", text=object()),
        Node(0, alternates=[hyphenated]),
        Node.box(40, debug_text="plex"),
        Node.sentinel(),
    ]
    prepare_all(ns)
    assert [n.original_index for n in ns] == [0, 1, 2, 3]
    assert hyphenated.original_index == 1
    assert [n.breakable for n in ns] == [False, True, False, True]
    assert ns[1].break_alternate is hyphenated


class TestConstructors:
    def test_box(self):
        text = object()
        n = Node.box(12, text=text, debug_text="foo")
        assert n.width == 12
        assert n.text is text
        assert not n.breakable
        assert n.stretch == n.shrink == 0

    def test_glue(self):
        n = Node.glue(10, 15, 3)
        assert (n.width, n.stretch, n.shrink) == (10, 15, 3)
        assert n.breakable
        assert n.debug_text == " "

    def test_sentinel(self):
        n = Node.sentinel()
        assert n.width == 0
        assert n.breakable
        assert n.penalty == 0

    def test_identity(self):
        # nodes are compared by identity, not by value
        assert Node.box(10) != Node.box(10)
