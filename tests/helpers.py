# tests/helpers.py

from draftboard.record_builder import build_row, empty_submission
from draftboard.row_store import MemoryRowStore
from draftboard.schema import DRAFT_ORDER, ROLE_ORDER

BLUE_PLAYERS = ["B1", "B2", "B3", "B4", "B5"]
RED_PLAYERS = ["R1", "R2", "R3", "R4", "R5"]
BLUE_HEROES = ["Layla", "Ling", "Chou", "Pharsa", "Tigreal"]
RED_HEROES = ["Beatrix", "Fanny", "Yu Zhong", "Valentina", "Mathilda"]

DEFAULT_STATS = {
    "kills": 2,
    "deaths": 1,
    "assists": 3,
    "gold": 6000,
    "damage": 50000,
    "turret_damage": 3000,
    "damage_taken": 40000,
}

BAN_SLOTS = [slot for slot in DRAFT_ORDER if slot.startswith("ban")]
PICK_SLOTS = [slot for slot in DRAFT_ORDER if slot.startswith("pick")]


def _fill_team(team: dict, team_name: str, players, heroes, bans, slot_stats: dict):
    team["team_name"] = team_name
    for slot, hero in zip(BAN_SLOTS, bans or []):
        team["draft"][slot] = hero
    for slot, hero in zip(PICK_SLOTS, heroes):
        team["draft"][slot] = hero
    for role, player, hero in zip(ROLE_ORDER, players, heroes):
        role_data = team["roles"][role]
        role_data["player"] = player
        role_data["hero"] = hero
        role_data.update(DEFAULT_STATS)
        role_data.update(slot_stats.get(role, {}))


def make_submission(stage: str = "Group Stage", match_number: str = "1", battle_id: str = "",
                    winner: str = "Blue", duration: str = "10:00",
                    blue_team: str = "Team Blue", red_team: str = "Team Red",
                    blue_players=None, red_players=None,
                    blue_heroes=None, red_heroes=None,
                    blue_bans=None, red_bans=None,
                    blue_stats=None, red_stats=None) -> dict:
    """Build a complete submission. `*_stats` map role -> stat overrides."""
    submission = empty_submission()
    submission.update({
        "stage": stage,
        "match_number": match_number,
        "battle_id": battle_id,
        "game_duration": duration,
        "winner": winner,
    })
    _fill_team(submission["blue"], blue_team, blue_players or BLUE_PLAYERS,
               blue_heroes or BLUE_HEROES, blue_bans, blue_stats or {})
    _fill_team(submission["red"], red_team, red_players or RED_PLAYERS,
               red_heroes or RED_HEROES, red_bans, red_stats or {})
    return submission


def make_row(sequence_number: int = 1, **kwargs) -> list:
    return build_row(make_submission(**kwargs), sequence_number)


def make_rows(*submission_kwargs: dict) -> list:
    """Rows (header excluded) numbered from 1."""
    return [make_row(i, **kw) for i, kw in enumerate(submission_kwargs, 1)]


def make_store(*submission_kwargs: dict) -> MemoryRowStore:
    store = MemoryRowStore()
    for row in make_rows(*submission_kwargs):
        store.append(row)
    return store
