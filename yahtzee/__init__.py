"""Yahtzee Duel - one human against a greedy AI, with a persisted highscore list."""
