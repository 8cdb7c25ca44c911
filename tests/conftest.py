from __future__ import annotations

import pytest

from newbreak import Linebreaker

from .common import words_and_spaces


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        # --runslow given in cli: do not skip slow tests
        return
    skip_slow = pytest.mark.skip(reason="need --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def four_pairs() -> Linebreaker:
    return Linebreaker.from_nodes(words_and_spaces(4), [220])
