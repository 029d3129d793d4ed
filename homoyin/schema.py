"""Data structures for homoyin.

Core concept:
    - A CEDICT entry is indexed under its canonical key: the toneless,
      lowercase, space-joined syllables of its pronunciation
    - An English word is split into syllables; each split yields a key in
      the same format and is looked up in the index

Example:
    你好 你好 [ni3 hao3] /hello/hi/  → key "ni hao"
    "Nihao" split as ni|hao          → key "ni hao" → match
"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class DictionaryEntry:
    """One dictionary sense group for a headword and reading."""

    pinyin: str        # Rendered with tone marks, e.g. "nǐ hǎo"
    chinese: str       # Headword, e.g. "你好"
    definition: str    # Cleaned, slash-delimited, e.g. "/hello/hi/"


@dataclass(frozen=True)
class Segmentation:
    """One way of splitting a word into consecutive syllables.

    boundaries holds the start offset of every syllable; the last syllable
    runs to the end of the word.
    """

    word: str
    boundaries: tuple[int, ...]

    def syllables(self) -> list[str]:
        """Slice the word at the boundaries."""
        ends = self.boundaries[1:] + (len(self.word),)
        return [self.word[start:end] for start, end in zip(self.boundaries, ends)]

    def key(self) -> str:
        """Canonical lookup key: syllables joined by single spaces."""
        return " ".join(self.syllables())


@dataclass
class DictionaryIndex:
    """Canonical key → entries, in source order.

    Filled once by the CEDICT ingestor and only read afterwards.
    """

    entries: dict[str, list[DictionaryEntry]] = field(default_factory=dict)

    def add(self, key: str, entry: DictionaryEntry) -> None:
        """Append an entry under a key."""
        self.entries.setdefault(key, []).append(entry)

    def lookup(self, key: str) -> tuple[DictionaryEntry, ...]:
        """Get entries for a key (empty if absent)."""
        return tuple(self.entries.get(key, ()))

    def contains(self, key: str) -> bool:
        """Check whether any entry is indexed under a key."""
        return key in self.entries

    def keys(self) -> list[str]:
        """Get keys in first-insertion order."""
        return list(self.entries.keys())

    def entry_count(self) -> int:
        """Get total number of entries across all keys."""
        return sum(len(e) for e in self.entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)
