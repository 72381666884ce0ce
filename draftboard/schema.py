# draftboard/schema.py
"""
Positional column layout of a match row.

The store is a fixed-width table shared with existing data, so every index
here is part of the persisted format. Rather than listing ~100 magic
numbers, the map is generated from the role order, the per-role stride and
the base offset of each team block, then checked once at import against
the documented layout.

    0-3      sequence number, stage, match number, battle id
    4-14     blue team name + 10 draft slots
    15-59    blue 5 roles x 9 stats
    60-70    red team name + 10 draft slots
    71-115   red 5 roles x 9 stats
    116-117  game duration, winner
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

SEQUENCE_COL = 0
STAGE_COL = 1
MATCH_NUMBER_COL = 2
BATTLE_ID_COL = 3

SIDES = ("blue", "red")
SIDE_LABELS = {"blue": "Blue", "red": "Red"}
SIDE_BASE = {"blue": 4, "red": 60}

# Draft phases as played: three bans, three picks, two bans, two picks.
DRAFT_ORDER = ("ban1", "ban2", "ban3", "pick1", "pick2", "pick3", "ban4", "ban5", "pick4", "pick5")
DRAFT_LABELS = {
    "ban1": "Ban 1", "ban2": "Ban 2", "ban3": "Ban 3", "ban4": "Ban 4", "ban5": "Ban 5",
    "pick1": "Pick 1", "pick2": "Pick 2", "pick3": "Pick 3", "pick4": "Pick 4", "pick5": "Pick 5",
}

ROLE_ORDER = ("gold", "jungler", "exp", "mid", "roamer")
ROLE_LABELS = {
    "gold": "Gold Laner",
    "jungler": "Jungler",
    "exp": "EXP Laner",
    "mid": "Mid Laner",
    "roamer": "Roamer",
}

STAT_ORDER = (
    "player", "hero", "kills", "deaths", "assists",
    "gold", "damage", "turret_damage", "damage_taken",
)
STAT_LABELS = {
    "player": "Player",
    "hero": "Hero",
    "kills": "Kills",
    "deaths": "Deaths",
    "assists": "Assists",
    "gold": "Gold",
    "damage": "Damage",
    "turret_damage": "Turret Damage",
    "damage_taken": "Damage Taken",
}
ROLE_STRIDE = len(STAT_ORDER)

# Team name + draft slots precede the role blocks of each side.
TEAM_HEADER_WIDTH = 1 + len(DRAFT_ORDER)
SIDE_WIDTH = TEAM_HEADER_WIDTH + ROLE_STRIDE * len(ROLE_ORDER)

DURATION_COL = SIDE_BASE["red"] + SIDE_WIDTH
WINNER_COL = DURATION_COL + 1
ROW_WIDTH = WINNER_COL + 1


@dataclass(frozen=True)
class RoleColumns:
    role: str
    player: int
    hero: int
    kills: int
    deaths: int
    assists: int
    gold: int
    damage: int
    turret_damage: int
    damage_taken: int

    def stat(self, name: str) -> int:
        return getattr(self, name)


@dataclass(frozen=True)
class SideColumns:
    side: str
    team_name: int
    draft: Dict[str, int]
    bans: Tuple[int, ...]
    picks: Tuple[int, ...]
    roles: Dict[str, RoleColumns]

    def role_blocks(self) -> Tuple[RoleColumns, ...]:
        return tuple(self.roles[role] for role in ROLE_ORDER)


def _build_side(side: str) -> SideColumns:
    base = SIDE_BASE[side]
    draft = {slot: base + 1 + i for i, slot in enumerate(DRAFT_ORDER)}
    roles_start = base + TEAM_HEADER_WIDTH
    roles = {}
    for role_index, role in enumerate(ROLE_ORDER):
        start = roles_start + role_index * ROLE_STRIDE
        roles[role] = RoleColumns(
            role=role,
            **{stat: start + offset for offset, stat in enumerate(STAT_ORDER)},
        )
    return SideColumns(
        side=side,
        team_name=base,
        draft=draft,
        bans=tuple(draft[slot] for slot in DRAFT_ORDER if slot.startswith("ban")),
        picks=tuple(draft[slot] for slot in DRAFT_ORDER if slot.startswith("pick")),
        roles=roles,
    )


SCHEMA: Dict[str, SideColumns] = {side: _build_side(side) for side in SIDES}


def side_columns(side: str) -> SideColumns:
    return SCHEMA[side]


def all_role_columns():
    """Yield (side, RoleColumns) for every role slot of both teams."""
    for side in SIDES:
        for role_cols in SCHEMA[side].role_blocks():
            yield side, role_cols


def validate_schema() -> None:
    """Assert the generated map reproduces the persisted column layout."""
    blue = SCHEMA["blue"]
    red = SCHEMA["red"]

    assert (SEQUENCE_COL, STAGE_COL, MATCH_NUMBER_COL, BATTLE_ID_COL) == (0, 1, 2, 3)

    assert blue.team_name == 4
    assert [blue.draft[s] for s in DRAFT_ORDER] == list(range(5, 15))
    assert blue.bans == (5, 6, 7, 11, 12)
    assert blue.picks == (8, 9, 10, 13, 14)
    assert blue.roles["gold"].player == 15
    assert blue.roles["gold"].damage_taken == 23
    assert blue.roles["jungler"].player == 24
    assert blue.roles["roamer"].player == 51
    assert blue.roles["roamer"].damage_taken == 59

    assert red.team_name == 60
    assert [red.draft[s] for s in DRAFT_ORDER] == list(range(61, 71))
    assert red.bans == (61, 62, 63, 67, 68)
    assert red.picks == (64, 65, 66, 69, 70)
    assert red.roles["gold"].player == 71
    assert red.roles["roamer"].player == 107
    assert red.roles["roamer"].damage_taken == 115

    assert (DURATION_COL, WINNER_COL, ROW_WIDTH) == (116, 117, 118)

    covered = {SEQUENCE_COL, STAGE_COL, MATCH_NUMBER_COL, BATTLE_ID_COL, DURATION_COL, WINNER_COL}
    for side in SIDES:
        cols = SCHEMA[side]
        covered.add(cols.team_name)
        covered.update(cols.draft.values())
        for role_cols in cols.role_blocks():
            covered.update(role_cols.stat(stat) for stat in STAT_ORDER)
    assert covered == set(range(ROW_WIDTH)), "schema leaves gaps or overlaps"


validate_schema()
