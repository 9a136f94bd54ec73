"""Yahtzee Duel - line-based console shell.

A thin Collaborator: reads one command per line and prints the snapshot as
plain text. Commands follow vi-style key bindings:

    h / l    move focus left / right
    k / j    up / down (hold / release a die, or move the category row)
    1..5     toggle hold on a die
    <enter>  confirm
    q        quit
"""

from __future__ import annotations

import time
from typing import List

from yahtzee.engine.base import Category
from yahtzee.session.actions import (
    Action,
    Confirm,
    Direction,
    MoveFocus,
    MoveSelection,
    Quit,
    ToggleHold,
)
from yahtzee.session.events import EventPayload, Focus, GameEvent, GameSnapshot
from yahtzee.storage.models import RankingEntry

HELP_LINES: List[str] = [
    "Yahtzee rules.",
    "",
    "On each turn every player rolls 5 dice.",
    "They can hold any dice they want and reroll the rest up to 2 times.",
    "Then the player fills one of the 13 combinations to get points.",
    "Upper section: Aces..Sixes score the total of the matching dice.",
    "    [1, 2, 3, 3, 3] scores 1 for Aces, 2 for Twos and 9 for Threes.",
    "    Reaching 63 in the upper section adds a 35 point bonus.",
    "Lower section:",
    "    3/4 of a kind - 3/4 or more matching dice, scores the total of all dice.",
    "    Full House - 3 of one number and 2 of another, 25 points.",
    "    Small/Large Straight - 4/5 consecutive numbers, 30/40 points.",
    "    Yahtzee - 5 of a kind, 50 points.",
    "    Chance - no requirements, scores the total of all dice.",
    "",
    "Once both players fill all 13 combinations the higher total wins.",
]

_COMMANDS = {
    "h": MoveFocus(Direction.LEFT),
    "l": MoveFocus(Direction.RIGHT),
    "k": MoveSelection(Direction.UP),
    "j": MoveSelection(Direction.DOWN),
    "": Confirm(),
    "q": Quit(),
}

_OUTCOME_LINES = {
    "win": "Congratulations! You won!",
    "tie": "It's a tie!",
    "loss": "You lost!",
}


def parse_command(text: str) -> Action | None:
    """Decode one input line, None if it means nothing."""
    s = text.strip().lower()
    if s in _COMMANDS:
        return _COMMANDS[s]
    if s.isdigit() and 1 <= int(s) <= 5:
        return ToggleHold(int(s) - 1)
    return None


def format_snapshot(snapshot: GameSnapshot) -> List[str]:
    lines = [
        str(snapshot.turn),
        f"Your score: {snapshot.human['total']}",
        f"Ai score: {snapshot.ai['total']}",
    ]
    if snapshot.dice is None:
        return lines

    dice_parts = []
    for i, (value, held) in enumerate(zip(snapshot.dice, snapshot.held)):
        cell = f"{value}*" if held else f"{value} "
        dice_parts.append(f"[{cell}]" if snapshot.focus == Focus(i) else f" {cell} ")
    buttons = [
        "[Reroll]" if snapshot.focus is Focus.REROLL else " Reroll ",
        "[Stand]" if snapshot.focus is Focus.STAND else " Stand ",
    ]
    lines.append(f"Rolls left: {snapshot.rerolls_remaining}")
    lines.append("".join(dice_parts) + "  " + " ".join(buttons))
    lines.append("")

    for category, entry in zip(Category, snapshot.human["categories"]):
        marker = ">" if category is snapshot.selected and snapshot.focus is Focus.CATEGORIES else " "
        value = "x" if entry["used"] else str(snapshot.previews[category.index])
        committed = "" if entry["score"] is None else str(entry["score"])
        lines.append(f"{marker} {category.label:<24}{value:>5}{committed:>6}")
        if category is Category.SIXES:
            lines.append(f"  {'Upper total':<24}{'':>5}{snapshot.human['upper_total']:>6}")
            bonus = "35" if snapshot.human["bonus_awarded"] else "0"
            lines.append(f"  {'Bonus (63 or more)':<24}{'':>5}{bonus:>6}")
    return lines


def _prompt(text: str, on_close: str) -> str:
    """input(), answering with on_close once stdin is closed or interrupted."""
    try:
        return input(text)
    except (EOFError, KeyboardInterrupt):
        print()
        return on_close


class ConsoleCollaborator:
    """Collaborator backed by input() and print()."""

    def next_action(self) -> Action:
        while True:
            action = parse_command(_prompt("> ", "q"))
            if action is not None:
                return action
            print("Use h/l, k/j, 1-5, Enter or q.")

    def render(self, snapshot: GameSnapshot) -> None:
        print()
        for line in format_snapshot(snapshot):
            print(line)

    def notify(self, payload: EventPayload) -> None:
        data = payload.data
        if payload.event is GameEvent.AI_ROLLING:
            print("Ai is rolling...")
        elif payload.event is GameEvent.AI_ROLLED:
            print("Ai rolled: " + ", ".join(str(d) for d in data["dice"]))
        elif payload.event is GameEvent.AI_CHOSE:
            print(f"Ai chose: {data['label']} for {data['points']} points")
        elif payload.event is GameEvent.GAME_OVER:
            print("\nGame ended!")
            print(_OUTCOME_LINES[data["outcome"]])
            print(f"Your score: {data['human_score']}")
            print(f"Ai score: {data['ai_score']}")
        elif payload.event is GameEvent.NEW_HIGHSCORE:
            print("New highscore!")
        elif payload.event is GameEvent.RANKING_SAVED:
            print("Added your score!")

    def confirm_quit(self) -> bool:
        answer = _prompt("Are you sure you want to quit? [y/N] ", "y")
        return answer.strip().lower() == "y"

    def ask_name(self, ranking: List[RankingEntry], new_highscore: bool) -> str | None:
        print("\nHIGHSCORES:")
        if not ranking:
            print("No highscores yet.")
        for entry in ranking:
            print(f"  {entry}")
        name = _prompt("Enter your name (q to skip): ", "q")
        if name.strip().lower() == "q":
            return None
        return name

    def pause(self, seconds: float) -> None:
        time.sleep(seconds)


def show_intro() -> None:
    print("Hello, this is Yahtzee.")
    if _prompt("Type 'h' for help, Enter to play: ", "").strip().lower() == "h":
        for line in HELP_LINES:
            print(line)
        _prompt("Press Enter to play", "")
