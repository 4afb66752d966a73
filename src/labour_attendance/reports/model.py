from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import TextKind
from ..stats.model import StatsResult


@dataclass(frozen=True)
class PlaceText:
    """Put one line of text at a table coordinate on a page."""

    text: str
    column: float
    row: float
    page_index: int
    kind: TextKind = TextKind.BODY


@dataclass(frozen=True)
class PageBreak:
    """Start a new page; following PlaceText items use the next page index."""


DrawInstruction = Union[PlaceText, PageBreak]


@dataclass(frozen=True)
class GeneratedReport:
    filename: str
    result: StatsResult
    instructions: tuple[DrawInstruction, ...]
