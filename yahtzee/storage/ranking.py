"""
Yahtzee Duel - Ranking Store

Loads, updates and persists the highscore list. The file is newline-delimited
UTF-8 text with one ``<name>:<score>`` record per line and no header. Entries
are kept in non-increasing score order.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from yahtzee.engine.errors import MalformedRecord, StorageUnavailable
from yahtzee.storage.models import RankingEntry

logger = logging.getLogger(__name__)

_SCORE_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_record(line: str) -> RankingEntry:
    """
    Parse one ranking line.

    The name is everything before the single ``:``; the score may be
    surrounded by whitespace.

    Raises:
        MalformedRecord: If the line is not ``name:integer``
    """
    parts = line.rstrip("\r\n").split(":")
    if len(parts) != 2:
        raise MalformedRecord(f"Expected exactly one ':' in {line!r}.")

    name, score_text = parts
    score_text = score_text.strip()
    if not _SCORE_PATTERN.fullmatch(score_text):
        raise MalformedRecord(f"Score {score_text!r} is not an integer.")

    try:
        return RankingEntry(name=name, score=int(score_text))
    except ValidationError as e:
        raise MalformedRecord(str(e)) from e


class RankingStore:
    """Reads and writes the ranking file at a fixed path."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> list[RankingEntry]:
        """
        Read every well-formed record, highest score first.

        A missing or unreadable file means there is no history yet and
        yields an empty list. Malformed lines are skipped. The sort is stable,
        so equal scores keep their file order.
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError:
            logger.warning("Cannot read ranking file %s; starting empty", self.path)
            return []

        entries: list[RankingEntry] = []
        for line_no, raw_line in enumerate(raw.splitlines(), start=1):
            try:
                entries.append(parse_record(raw_line.decode("utf-8")))
            except (UnicodeDecodeError, MalformedRecord) as e:
                logger.debug("Skipping ranking line %d: %s", line_no, e)
        entries.sort(key=lambda entry: entry.score, reverse=True)
        return entries

    @staticmethod
    def insert(entries: list[RankingEntry], entry: RankingEntry) -> int:
        """
        Insert an entry, keeping scores non-increasing.

        The entry goes before the first existing entry with a strictly lower
        score, so it lands after every entry with an equal score.

        Returns:
            Index at which the entry was inserted
        """
        position = len(entries)
        for i, existing in enumerate(entries):
            if existing.score < entry.score:
                position = i
                break
        entries.insert(position, entry)
        return position

    def persist(self, entries: Sequence[RankingEntry]) -> None:
        """
        Overwrite the file with every entry, in order.

        Raises:
            StorageUnavailable: If the file cannot be created or written
        """
        try:
            with self.path.open("w", encoding="utf-8", newline="\n") as f:
                for entry in entries:
                    f.write(entry.to_record() + "\n")
        except OSError as e:
            logger.exception("Failed to write ranking file %s", self.path)
            raise StorageUnavailable(f"Cannot write ranking file {self.path}: {e}") from e

        logger.info("Saved %d ranking entries to %s", len(entries), self.path)

    @staticmethod
    def top(entries: Sequence[RankingEntry], limit: int = 10) -> list[RankingEntry]:
        """The first ``limit`` entries, for display."""
        return list(entries[:limit])

    @staticmethod
    def is_new_highscore(entries: Sequence[RankingEntry], score: int) -> bool:
        """True when the list is empty or the score beats the current best."""
        if not entries:
            return True
        return entries[0].score < score

    def record_result(self, name: str, score: int) -> tuple[list[RankingEntry], int]:
        """
        Load, insert a new result and persist in one go.

        Returns:
            (updated entries, insertion index)
        """
        entries = self.load()
        position = self.insert(entries, RankingEntry.from_input(name, score))
        self.persist(entries)
        return entries, position
