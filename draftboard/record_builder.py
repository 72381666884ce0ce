# draftboard/record_builder.py
"""
Convert structured match submissions into flat rows, and generate the
header row that labels each column.

Submission shape:

    {
        "stage": "Group Stage", "match_number": "3", "battle_id": "7391...",
        "game_duration": "14:52", "winner": "Blue",
        "blue": {
            "team_name": "...",
            "draft": {"ban1": ..., ..., "pick5": ...},
            "roles": {
                "gold": {"player": ..., "hero": ..., "kills": ..., "deaths": ...,
                         "assists": ..., "gold": ..., "damage": ...,
                         "turret_damage": ..., "damage_taken": ...},
                "jungler": {...}, "exp": {...}, "mid": {...}, "roamer": {...},
            },
        },
        "red": {...},
    }

The whole shape is validated before any cell is written, so a bad
submission never yields a partially built row.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from draftboard.cells import as_trimmed_string
from draftboard.errors import InvalidFieldError, MissingFieldError
from draftboard.schema import (
    BATTLE_ID_COL,
    DRAFT_LABELS,
    DRAFT_ORDER,
    DURATION_COL,
    MATCH_NUMBER_COL,
    ROLE_LABELS,
    ROLE_ORDER,
    ROW_WIDTH,
    SCHEMA,
    SEQUENCE_COL,
    SIDE_LABELS,
    SIDES,
    STAGE_COL,
    STAT_LABELS,
    STAT_ORDER,
    WINNER_COL,
)

logger = logging.getLogger(__name__)

METADATA_LABELS = ("No", "Stage", "Match", "Battle ID")
WINNER_VALUES = {"blue": "Blue", "red": "Red"}


def _require_mapping(parent: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    value = parent.get(key)
    if not isinstance(value, Mapping):
        raise MissingFieldError(path)
    return value


def validate_submission(submission: Mapping[str, Any]) -> None:
    """Check every nested object exists and the winner is recognized.

    Raises:
        MissingFieldError: a team, draft, roles, or role object is absent.
        InvalidFieldError: winner is set to something other than Blue/Red.
    """
    if not isinstance(submission, Mapping):
        raise MissingFieldError("submission")

    for side in SIDES:
        team = _require_mapping(submission, side, side)
        _require_mapping(team, "draft", f"{side}.draft")
        roles = _require_mapping(team, "roles", f"{side}.roles")
        for role in ROLE_ORDER:
            _require_mapping(roles, role, f"{side}.roles.{role}")

    winner = as_trimmed_string(submission.get("winner"))
    if winner and winner.lower() not in WINNER_VALUES:
        raise InvalidFieldError("winner", winner)


def normalize_winner(value: Any) -> str:
    return WINNER_VALUES.get(as_trimmed_string(value).lower(), "")


def _scalar(value: Any) -> Any:
    """Trim text; keep numbers as numbers so the store holds them typed."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        return value
    return as_trimmed_string(value)


def build_row(submission: Mapping[str, Any], sequence_number: int) -> List[Any]:
    """Place every submission field into its column. Validates first."""
    validate_submission(submission)

    row: List[Any] = [""] * ROW_WIDTH
    row[SEQUENCE_COL] = int(sequence_number)
    row[STAGE_COL] = _scalar(submission.get("stage"))
    row[MATCH_NUMBER_COL] = _scalar(submission.get("match_number"))
    row[BATTLE_ID_COL] = _scalar(submission.get("battle_id"))

    for side in SIDES:
        cols = SCHEMA[side]
        team = submission[side]
        row[cols.team_name] = _scalar(team.get("team_name"))

        draft = team["draft"]
        for slot in DRAFT_ORDER:
            row[cols.draft[slot]] = _scalar(draft.get(slot))

        roles = team["roles"]
        for role in ROLE_ORDER:
            role_data = roles[role]
            role_cols = cols.roles[role]
            for stat in STAT_ORDER:
                row[role_cols.stat(stat)] = _scalar(role_data.get(stat))

    row[DURATION_COL] = _scalar(submission.get("game_duration"))
    row[WINNER_COL] = normalize_winner(submission.get("winner"))

    logger.debug("Built row %s for battle id %r", sequence_number, row[BATTLE_ID_COL])
    return row


def header_row() -> List[str]:
    labels: List[str] = [""] * ROW_WIDTH
    for col, label in zip((SEQUENCE_COL, STAGE_COL, MATCH_NUMBER_COL, BATTLE_ID_COL), METADATA_LABELS):
        labels[col] = label

    for side in SIDES:
        cols = SCHEMA[side]
        side_label = SIDE_LABELS[side]
        labels[cols.team_name] = f"{side_label} Team"
        for slot in DRAFT_ORDER:
            labels[cols.draft[slot]] = f"{side_label} {DRAFT_LABELS[slot]}"
        for role in ROLE_ORDER:
            role_cols = cols.roles[role]
            role_label = f"{side_label} {ROLE_LABELS[role]}"
            for stat in STAT_ORDER:
                labels[role_cols.stat(stat)] = f"{role_label} {STAT_LABELS[stat]}"

    labels[DURATION_COL] = "Game Duration"
    labels[WINNER_COL] = "Winner"
    return labels


def empty_submission() -> Dict[str, Any]:
    """Skeleton submission with every nested object present and blank values."""
    def team() -> Dict[str, Any]:
        return {
            "team_name": "",
            "draft": {slot: "" for slot in DRAFT_ORDER},
            "roles": {role: {stat: "" for stat in STAT_ORDER} for role in ROLE_ORDER},
        }

    return {
        "stage": "",
        "match_number": "",
        "battle_id": "",
        "game_duration": "",
        "winner": "",
        "blue": team(),
        "red": team(),
    }
