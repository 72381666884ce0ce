# main.py

import json
import logging

from draftboard import config
from draftboard.errors import StoreUnavailable
from draftboard.hero_catalog import HeroCatalog
from draftboard.record_builder import empty_submission
from draftboard.row_store import SqliteRowStore
from draftboard.service import MatchStatsService
from draftboard.ui import TerminalUI

logger = logging.getLogger(__name__)


def _load_submission(path: str) -> dict:
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        raise ValueError("Submission file must contain a JSON object")
    return payload


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    ui = TerminalUI()
    try:
        store = SqliteRowStore(config.db_path())
    except StoreUnavailable as e:
        ui.show_error(str(e))
        return 1

    service = MatchStatsService(store, HeroCatalog.from_file(config.hero_catalog_path()))
    logger.info("Using row store at %s", store.db_path)

    try:
        while True:
            choice = ui.show_menu()

            if choice in ('1', '2', '3', '4'):
                stage = ui.select_stage(service.get_stages())
                if choice == '1':
                    ui.show_summary(service.get_summary(stage))
                elif choice == '2':
                    ui.show_player_stats(service.get_player_stats(stage))
                elif choice == '3':
                    ui.show_hero_stats(service.get_hero_stats(stage))
                else:
                    ui.show_draft_analytics(service.get_draft_analytics(stage))

            elif choice == '5':
                raw = input(f"How many? (default {config.DEFAULT_LAST_MATCHES}): ").strip()
                count = int(raw) if raw.isdigit() else config.DEFAULT_LAST_MATCHES
                ui.show_last_matches(service.get_last_matches(count))

            elif choice == '6':
                path = ui.get_path("Submission JSON path")
                try:
                    submission = _load_submission(path)
                except (OSError, ValueError) as e:
                    ui.show_error(f"Could not read submission: {e}")
                    continue

                result = service.submit_match(submission)
                if result["success"]:
                    ui.show_success(result["message"])
                else:
                    ui.show_error(result["message"])

            elif choice == '7':
                path = ui.get_path("Template output path")
                try:
                    with open(path, "w", encoding="utf-8") as f:
                        json.dump(empty_submission(), f, indent=2)
                except OSError as e:
                    ui.show_error(f"Could not write template: {e}")
                    continue
                ui.show_success(f"Wrote blank submission to {path}")

            elif choice == '8':
                battle_id = input("Battle ID: ").strip()
                if service.battle_id_exists(battle_id):
                    ui.show_error(f"Battle ID '{battle_id}' has already been recorded")
                else:
                    ui.show_success(f"Battle ID '{battle_id}' is free")

            elif choice == '0':
                print("\nGoodbye!")
                break

    finally:
        # Ensure database is always closed
        store.close()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
