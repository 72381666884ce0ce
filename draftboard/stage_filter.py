# draftboard/stage_filter.py
"""Stage filter shared by every reducer: either no filter or one exact stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union

from draftboard.cells import as_string, cell
from draftboard.config import ALL_STAGES
from draftboard.schema import STAGE_COL


@dataclass(frozen=True)
class NoFilter:
    def matches(self, row: Sequence[Any]) -> bool:
        return True

    @property
    def label(self) -> str:
        return ALL_STAGES


@dataclass(frozen=True)
class ByStage:
    name: str

    def matches(self, row: Sequence[Any]) -> bool:
        # Exact and case-sensitive on the stored stage cell.
        return as_string(cell(row, STAGE_COL)) == self.name

    @property
    def label(self) -> str:
        return self.name


StageFilter = Union[NoFilter, ByStage]


def parse_stage_filter(stage: Union[str, StageFilter, None]) -> StageFilter:
    """Map a caller-supplied stage value to a filter. None, "" and "All" disable filtering."""
    if isinstance(stage, (NoFilter, ByStage)):
        return stage
    if stage is None or stage == "" or stage == ALL_STAGES:
        return NoFilter()
    return ByStage(str(stage))


def filter_rows(rows: Sequence[Sequence[Any]], stage_filter: StageFilter) -> list:
    return [row for row in rows if stage_filter.matches(row)]
