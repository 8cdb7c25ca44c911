from __future__ import annotations

from dataclasses import fields
from itertools import accumulate
from typing import Iterable, List, TypeVar

Pt = float  # a length in the host's units. Not allowed to be inf or nan.
Pos = int  # position within the node sequence (index)
LineNum = int  # zero-based line number within a paragraph
Badness = int

setattr_frozen = object.__setattr__

Tclass = TypeVar("Tclass", bound=type)


def prefix_counts(flags: Iterable[bool]) -> List[int]:
    """Running count of true flags. ``result[j] - result[i]`` counts
    the flags within ``[i, j)``."""
    return [0, *accumulate(map(int, flags))]


# adapted from github.com/ericvsmith/dataclasses
# under its Apache 2.0 license.
def add_slots(cls: Tclass) -> Tclass:  # pragma: no cover
    if "__slots__" in cls.__dict__:
        raise TypeError(f"{cls.__name__} already specifies __slots__")
    cls_dict = dict(cls.__dict__)
    field_names = tuple(f.name for f in fields(cls))
    cls_dict["__slots__"] = field_names
    for field_name in field_names:
        cls_dict.pop(field_name, None)
    cls_dict.pop("__dict__", None)
    qualname = getattr(cls, "__qualname__", None)
    cls = type(cls)(cls.__name__, cls.__bases__, cls_dict)
    if qualname is not None:
        cls.__qualname__ = qualname
    return cls


class LinebreakError(Exception):
    "Base class for errors raised by the linebreaker."


class EmptyWidthTable(LinebreakError, ValueError):
    "Raised when a width table is created without any widths."


class NotFinalized(LinebreakError):
    "Raised when breaks are requested before the node list is finalized."


class AlreadyFinalized(LinebreakError):
    "Raised when the node list is changed after it was finalized."


class AlreadyPrepared(LinebreakError):
    "Raised when a node is prepared a second time."
