"""Data models for Korean Bible lookups."""

import json
from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class BookEntry:
    """One canonical book of the Bible."""

    english_name: str  # e.g., "Genesis"
    code: str  # three-character code used in the upstream URL, e.g., "gen"
    korean_name: str  # e.g., "창세기"
    testament: str  # "OT" or "NT"


@dataclass(frozen=True)
class TranslationEntry:
    """A published rendering of the text."""

    code: str  # e.g., "GAE"
    display_name: str  # e.g., "개역개정 (Revised Korean)"


@dataclass
class Verse:
    """A single numbered verse."""

    number: int
    text: str


@dataclass
class Chapter:
    """All verses scraped for one book, chapter and translation."""

    book: str  # English book name, or the raw code if unknown
    book_korean: str
    chapter: int
    version: str
    version_name: str
    verses: list[Verse] = field(default_factory=list)

    def get_verse(self, number: int):
        for verse in self.verses:
            if verse.number == number:
                return verse
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass
class SearchHit:
    """A verse matching a keyword search."""

    book: str
    chapter: int
    verse: int
    text: str

    def to_dict(self) -> dict:
        return asdict(self)
