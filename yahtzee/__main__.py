"""Yahtzee Duel - console entrypoint (``python -m yahtzee``)."""

from __future__ import annotations

from yahtzee.config.settings import configure_logging, get_settings
from yahtzee.console import ConsoleCollaborator, show_intro
from yahtzee.session.controller import GameSession


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    show_intro()
    GameSession(ConsoleCollaborator(), settings=settings).play()


if __name__ == "__main__":
    main()
