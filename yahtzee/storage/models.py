"""
Yahtzee Duel - Storage Models

Pydantic models that mirror the ranking file records.
"""

from pydantic import BaseModel, field_validator

_FORBIDDEN_NAME_CHARS = (":", "\n", "\r")


class RankingEntry(BaseModel):
    """One line of the ranking file: ``<name>: <score>``."""

    name: str
    score: int

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def name_fits_record(cls, value: str) -> str:
        if any(ch in value for ch in _FORBIDDEN_NAME_CHARS):
            raise ValueError("name may not contain ':' or line breaks")
        return value

    @classmethod
    def from_input(cls, name: str, score: int) -> "RankingEntry":
        """Build an entry from free-typed text, dropping characters the file format cannot hold."""
        for ch in _FORBIDDEN_NAME_CHARS:
            name = name.replace(ch, "")
        return cls(name=name, score=score)

    def to_record(self) -> str:
        """Serialize as a ranking file line (without newline)."""
        return f"{self.name}: {self.score}"

    def __str__(self) -> str:
        return self.to_record()
