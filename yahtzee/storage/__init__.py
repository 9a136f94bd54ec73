"""
Yahtzee Duel Storage Layer.

File-backed persistence for the highscore ranking.
"""

from yahtzee.storage.models import RankingEntry
from yahtzee.storage.ranking import RankingStore, parse_record

__all__ = [
    "RankingEntry",
    "RankingStore",
    "parse_record",
]
