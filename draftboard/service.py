# draftboard/service.py

import logging
from typing import Any, Dict, List, Mapping, Optional

from draftboard.cells import as_int, as_string, as_trimmed_string, cell
from draftboard.config import DEFAULT_LAST_MATCHES
from draftboard.errors import StoreUnavailable, StoreWriteError, SubmissionError
from draftboard.hero_catalog import HeroCatalog
from draftboard.integrity import battle_id_exists, is_sentinel_battle_id, next_sequence_number
from draftboard.plugins.draft_analytics import DraftAnalyticsPlugin
from draftboard.plugins.hero_stats import HeroStatsPlugin
from draftboard.plugins.player_stats import PlayerStatsPlugin
from draftboard.plugins.summary import SummaryPlugin
from draftboard.record_builder import build_row, validate_submission
from draftboard.row_store import RowStore
from draftboard.schema import (
    BATTLE_ID_COL,
    DURATION_COL,
    MATCH_NUMBER_COL,
    SCHEMA,
    SEQUENCE_COL,
    STAGE_COL,
    WINNER_COL,
    all_role_columns,
)

logger = logging.getLogger(__name__)


class MatchStatsService:
    """Public operations over a row store, as consumed by the web and terminal UIs."""

    def __init__(self, store: RowStore, hero_catalog: Optional[HeroCatalog] = None):
        self.store = store
        self.hero_catalog = hero_catalog or HeroCatalog()

    def _match_rows(self) -> List[List[Any]]:
        """All rows except the header. An unavailable store reads as empty."""
        try:
            return self.store.read_all()[1:]
        except StoreUnavailable as e:
            logger.warning("Row store unavailable, returning empty dataset: %s", e)
            return []

    # --- Aggregations ---

    def get_summary(self, stage: Optional[str] = None) -> Dict[str, Any]:
        return SummaryPlugin(self._match_rows(), stage).analyze()

    def get_player_stats(self, stage: Optional[str] = None) -> List[Dict[str, Any]]:
        return PlayerStatsPlugin(self._match_rows(), stage).analyze()

    def get_hero_stats(self, stage: Optional[str] = None) -> Dict[str, Any]:
        return HeroStatsPlugin(self._match_rows(), stage).analyze()

    def get_draft_analytics(self, stage: Optional[str] = None) -> Dict[str, Any]:
        return DraftAnalyticsPlugin(self._match_rows(), stage).analyze()

    # --- Lookups ---

    def get_stages(self) -> List[str]:
        stages = {as_trimmed_string(cell(row, STAGE_COL)) for row in self._match_rows()}
        stages.discard("")
        return sorted(stages)

    def get_player_names(self) -> List[str]:
        names = set()
        for row in self._match_rows():
            for _side, role_cols in all_role_columns():
                name = as_trimmed_string(cell(row, role_cols.player))
                if name:
                    names.add(name)
        return sorted(names)

    def get_last_matches(self, count: int = DEFAULT_LAST_MATCHES) -> List[Dict[str, Any]]:
        if count <= 0:
            return []
        rows = self._match_rows()[-count:]
        return [self._project_match(row) for row in reversed(rows)]

    @staticmethod
    def _project_match(row: List[Any]) -> Dict[str, Any]:
        return {
            "sequence_number": as_int(cell(row, SEQUENCE_COL)),
            "stage": as_string(cell(row, STAGE_COL)),
            "match_number": as_string(cell(row, MATCH_NUMBER_COL)),
            "battle_id": as_string(cell(row, BATTLE_ID_COL)),
            "blue_team": as_string(cell(row, SCHEMA["blue"].team_name)),
            "red_team": as_string(cell(row, SCHEMA["red"].team_name)),
            "winner": as_string(cell(row, WINNER_COL)),
            "game_duration": as_string(cell(row, DURATION_COL)),
        }

    def get_heroes(self) -> List[Dict[str, str]]:
        return self.hero_catalog.to_list()

    # --- Integrity ---

    def battle_id_exists(self, battle_id: Any) -> bool:
        try:
            return battle_id_exists(self.store, battle_id)
        except StoreUnavailable as e:
            logger.warning("Row store unavailable during battle id check: %s", e)
            return False

    def next_sequence_number(self) -> int:
        try:
            return next_sequence_number(self.store)
        except StoreUnavailable as e:
            logger.warning("Row store unavailable during sequence lookup: %s", e)
            return 1

    # --- Writes ---

    def submit_match(self, submission: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate, check for a duplicate battle id, number and append a match.

        Never raises for user errors; failures come back as
        {"success": False, "message": ...}. Nothing is retried.
        """
        try:
            validate_submission(submission)
        except SubmissionError as e:
            logger.info("Rejected submission: %s", e)
            return {"success": False, "message": str(e)}

        battle_id = as_trimmed_string(submission.get("battle_id"))
        try:
            if not is_sentinel_battle_id(battle_id) and battle_id_exists(self.store, battle_id):
                return {"success": False, "message": f"Battle ID '{battle_id}' has already been recorded."}
            sequence_number = next_sequence_number(self.store)
            row = build_row(submission, sequence_number)
            self.store.append(row)
        except StoreUnavailable as e:
            logger.error("Row store unavailable during submission: %s", e)
            return {"success": False, "message": "Match store is unavailable. Please try again later."}
        except StoreWriteError as e:
            logger.error("Failed to append match: %s", e)
            return {"success": False, "message": "Failed to save the match. Please try again."}

        logger.info("Recorded match #%s (battle id %r)", sequence_number, battle_id)
        return {
            "success": True,
            "message": f"Match #{sequence_number} saved.",
            "sequence_number": sequence_number,
        }
