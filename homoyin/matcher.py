"""Match English words against the dictionary index.

For each word, every segmentation is turned into a canonical key and looked
up. Two mutually exclusive modes:

    match (default)  report segmentations whose key is in the index,
                     followed by every entry under that key
    nonsense         report segmentations whose key is NOT in the index

Output:
    xian [xi an]
      西安 [xī ān] /Xi'an, capital of Shaanxi/
"""

import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional, TextIO

from .schema import DictionaryEntry, DictionaryIndex, Segmentation
from .segmenter import Segmenter

# Words handed to the worker pool per batch, per worker
CHUNK_PER_WORKER = 64


@dataclass(frozen=True)
class WordMatch:
    """One reported segmentation of a word."""

    word: str                   # As read from the wordlist
    segmentation: Segmentation  # Over the lowercased word
    entries: tuple[DictionaryEntry, ...] = ()

    @property
    def key(self) -> str:
        return self.segmentation.key()


def format_match(match: WordMatch) -> list[str]:
    """Render a match as output lines (header, then one line per entry)."""
    lines = [f"{match.word} [{match.key}]"]
    for entry in match.entries:
        lines.append(f"  {entry.chinese} [{entry.pinyin}] {entry.definition}")
    return lines


class Matcher:
    """Segments words and probes the index."""

    def __init__(
        self,
        index: DictionaryIndex,
        segmenter: Optional[Segmenter] = None,
        nonsense: bool = False,
    ):
        """Initialize matcher.

        Args:
            index: Dictionary index to probe (read-only).
            segmenter: Syllable segmenter (default: full pinyin table).
            nonsense: Report keys missing from the index instead of hits.
        """
        self.index = index
        self.segmenter = segmenter if segmenter is not None else Segmenter()
        self.nonsense = nonsense

    def match_word(self, word: str) -> list[WordMatch]:
        """Get reported segmentations for one word, in search order."""
        matches = []
        for segmentation in self.segmenter.segment(word.lower()):
            key = segmentation.key()
            found = self.index.contains(key)
            if self.nonsense and not found:
                matches.append(WordMatch(word=word, segmentation=segmentation))
            elif not self.nonsense and found:
                matches.append(WordMatch(
                    word=word,
                    segmentation=segmentation,
                    entries=self.index.lookup(key),
                ))
        return matches

    def run(
        self,
        words: Iterable[str],
        out: Optional[TextIO] = None,
        workers: int = 1,
    ) -> int:
        """Match every word and write the report.

        Output follows input word order regardless of worker count. With
        workers, words are read in bounded batches so a large wordlist is
        never queued whole. Matching is CPU-bound Python, so threads mainly
        help when words come from slow I/O.

        Args:
            words: Candidate words.
            out: Output stream (default: stdout).
            workers: Worker threads; 1 runs inline.

        Returns:
            Number of reported segmentations.
        """
        out = out if out is not None else sys.stdout
        reported = 0

        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                for chunk in _chunks(words, workers * CHUNK_PER_WORKER):
                    for matches in executor.map(self.match_word, chunk):
                        reported += _write(matches, out)
        else:
            for word in words:
                reported += _write(self.match_word(word), out)

        return reported


def _write(matches: list[WordMatch], out: TextIO) -> int:
    for match in matches:
        for line in format_match(match):
            out.write(line + "\n")
    return len(matches)


def _chunks(words: Iterable[str], size: int) -> Iterator[list[str]]:
    it = iter(words)
    while True:
        chunk = list(islice(it, size))
        if not chunk:
            return
        yield chunk
