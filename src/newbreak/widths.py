from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .common import EmptyWidthTable, LineNum, Pt, add_slots, setattr_frozen


@add_slots
@dataclass(frozen=True, init=False)
class TargetWidths:
    """The widths lines should be set to, by line number.

    As with TeX, the last width is propagated to all further lines.
    For example, with widths ``(70, 50)`` the first line of the paragraph
    is set 70 units wide, and all further lines 50 units.
    """

    widths: Tuple[Pt, ...]

    def __init__(self, first: Pt, *more: Pt) -> None:
        widths = (first, *more)
        if any(w <= 0 for w in widths):
            raise ValueError(f"Line widths must be positive, got {widths}")
        setattr_frozen(self, "widths", widths)

    @staticmethod
    def of(ws: Tuple[Pt, ...]) -> TargetWidths:
        try:
            first, *more = ws
        except ValueError:
            raise EmptyWidthTable(
                "At least one line width is required"
            ) from None
        return TargetWidths(first, *more)

    def target_for(self, line: LineNum) -> Pt:
        return self.widths[self.line_class(line)]

    def line_class(self, line: LineNum) -> LineNum:
        """The line number, clamped to the table. Lines with the same class
        have the same target width."""
        return min(line, len(self.widths) - 1)

    def extend(self, *more: Pt) -> TargetWidths:
        return TargetWidths(*self.widths, *more)

    def __len__(self) -> int:
        return len(self.widths)

    def __iter__(self) -> Iterator[Pt]:
        return iter(self.widths)
