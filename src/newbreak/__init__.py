"""Optimal paragraph linebreaking for variable fonts and non-Latin scripts.

Based loosely on the Knuth-Plass algorithm, but simpler: everything is a
node which may stretch, shrink, carry a penalty, or offer alternates.
"""
from __future__ import annotations

from .breaker import Linebreaker, add_node, compute_breaks, create, finalize
from .common import (
    AlreadyFinalized,
    AlreadyPrepared,
    EmptyWidthTable,
    LinebreakError,
    NotFinalized,
)
from .lines import Line, Solution
from .nodes import Node
from .params import BreakOptions, BreakParams
from .widths import TargetWidths

__version__ = __import__("importlib.metadata").metadata.version(__name__)

__all__ = [
    # main API
    "Linebreaker",
    "Node",
    "Line",
    "Solution",
    "BreakParams",
    "BreakOptions",
    "TargetWidths",
    # functional API
    "create",
    "add_node",
    "finalize",
    "compute_breaks",
    # errors
    "LinebreakError",
    "EmptyWidthTable",
    "NotFinalized",
    "AlreadyFinalized",
    "AlreadyPrepared",
]
