# draftboard/ui.py

from typing import List, Dict, Any, Optional


class TerminalUI:
    """Simple terminal-based UI."""

    MENU_OPTIONS = ['1', '2', '3', '4', '5', '6', '7', '8', '0']

    def show_menu(self) -> str:
        """Show main menu and get validated user choice."""
        print("\n" + "="*50)
        print("DRAFTBOARD - Match Recorder")
        print("="*50)
        print("1. Summary")
        print("2. Player stats")
        print("3. Hero stats")
        print("4. Draft analytics")
        print("5. Last matches")
        print("6. Submit match from JSON file")
        print("7. Write blank submission template")
        print("8. Check battle ID")
        print("0. Exit")
        print("="*50)

        while True:
            choice = input("Choose an option (0-8): ").strip()
            if choice in self.MENU_OPTIONS:
                return choice
            print("Error: Please enter a number between 0 and 8")

    def select_stage(self, stages: List[str]) -> Optional[str]:
        """Let the user pick a stage; empty input means all stages."""
        if not stages:
            return None

        print("\nStages:")
        print("  0. All")
        for i, stage in enumerate(stages, 1):
            print(f"  {i}. {stage}")

        while True:
            selection = input("Stage (Enter for All): ").strip()
            if selection in ('', '0'):
                return None
            try:
                index = int(selection) - 1
            except ValueError:
                print("Error: Please enter a number")
                continue
            if 0 <= index < len(stages):
                return stages[index]
            print(f"Error: Please select a number between 0 and {len(stages)}")

    def get_path(self, prompt: str) -> str:
        return input(f"{prompt}: ").strip()

    def show_summary(self, summary: Dict[str, Any]):
        print("\n" + "="*50)
        print(f"SUMMARY ({summary['stage']})")
        print("="*50)
        print(f"Games played:  {summary['total_games']}")
        print(f"Blue wins:     {summary['blue_wins']} ({summary['blue_win_rate']}%)")
        print(f"Red wins:      {summary['red_wins']} ({summary['red_win_rate']}%)")
        print(f"Avg duration:  {summary['avg_duration']}")
        print("="*50)

    def show_player_stats(self, players: List[Dict[str, Any]], limit: int = 25):
        print("\n" + "="*50)
        print("PLAYER STATS")
        print("="*50)
        if not players:
            print("No player data yet")
            return

        print(f"  {'Player':<20} {'G':>3} {'Win%':>5} {'K':>4} {'D':>4} {'A':>4} {'KDA':>6} {'GPM':>5}")
        for p in players[:limit]:
            print(
                f"  {p['name']:<20} {p['games']:>3} {p['win_rate']:>4}% "
                f"{p['kills']:>4} {p['deaths']:>4} {p['assists']:>4} "
                f"{p['avg_kda']:>6} {p['avg_gpm']:>5}"
            )
        if len(players) > limit:
            print(f"  ... and {len(players) - limit} more")

    def show_hero_stats(self, stats: Dict[str, Any]):
        print("\n" + "="*50)
        print(f"HERO STATS ({stats['stage']}, {stats['total_games']} games)")
        print("="*50)

        print("\nMost picked:")
        if not stats['most_picked']:
            print("  (none)")
        for h in stats['most_picked']:
            print(
                f"  {h['name']:<18} picks {h['picks']:>3} ({h['pick_rate']:>3}%)  "
                f"bans {h['bans']:>3}  win {h['win_rate']:>3}%  KDA {h['avg_kda']}"
            )

        print("\nMost banned:")
        if not stats['most_banned']:
            print("  (none)")
        for h in stats['most_banned']:
            print(f"  {h['name']:<18} bans {h['bans']:>3} ({h['ban_rate']:>3}%)")

    def show_draft_analytics(self, draft: Dict[str, Any]):
        first = draft['first_pick_side'].capitalize()
        print("\n" + "="*50)
        print(f"DRAFT ANALYTICS ({draft['stage']})")
        print("="*50)
        print(f"Decided games:       {draft['total_games']}")
        print(f"First pick ({first}):  {draft['first_pick_wins']} wins ({draft['first_pick_win_rate']}%)")
        print(f"Second pick:         {draft['second_pick_wins']} wins ({draft['second_pick_win_rate']}%)")

    def show_last_matches(self, matches: List[Dict[str, Any]]):
        print("\n" + "="*50)
        print("LAST MATCHES")
        print("="*50)
        if not matches:
            print("No matches recorded yet")
            return
        for m in matches:
            print(
                f"#{m['sequence_number']} [{m['stage']}] M{m['match_number']} "
                f"{m['blue_team']} vs {m['red_team']} -> {m['winner'] or '-'} ({m['game_duration'] or '?'})"
            )

    def show_error(self, message: str):
        """Display error message."""
        print(f"\nERROR: {message}\n")

    def show_success(self, message: str):
        """Display success message."""
        print(f"\n{message}\n")
