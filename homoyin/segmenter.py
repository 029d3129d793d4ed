"""Syllable segmentation.

Enumerates every way a word splits into consecutive valid pinyin syllables,
depth-first, trying the shortest candidate syllable first at each position:

    [s.key() for s in segment_word("xian")]
    -> ["xi an", "xian"]

The candidate length is capped one below the table's longest syllable, so
six-letter syllables (chuang, shuang, zhuang) never match. The cap is kept
for output compatibility; pass max_length explicitly to lift it.
"""

from typing import Iterator, Optional

from .schema import Segmentation
from .syllables import DEFAULT_TABLE, SyllableTable


class Segmenter:
    """Backtracking splitter over a syllable table."""

    def __init__(
        self,
        table: Optional[SyllableTable] = None,
        max_length: Optional[int] = None,
    ):
        """Initialize segmenter.

        Args:
            table: Syllable table (default: full pinyin table).
            max_length: Longest candidate syllable to try. Defaults to one
                less than the table's longest syllable.
        """
        self.table = table if table is not None else DEFAULT_TABLE
        if max_length is None:
            max_length = self.table.max_length() - 1
        self.max_length = max_length

    def segment(self, word: str) -> Iterator[Segmentation]:
        """Yield every segmentation of a word.

        The word must already be lowercased to match the table. Yields
        nothing for the empty word or a word with no valid split.
        """
        if not word:
            return
        yield from self._search(word, [], 0)

    def _search(
        self, word: str, boundaries: list[int], start: int
    ) -> Iterator[Segmentation]:
        if start == len(word):
            yield Segmentation(word=word, boundaries=tuple(boundaries))
            return

        longest = min(len(word) - start, self.max_length)
        for length in range(1, longest + 1):
            if self.table.contains(word[start:start + length]):
                boundaries.append(start)
                yield from self._search(word, boundaries, start + length)
                boundaries.pop()


DEFAULT_SEGMENTER = Segmenter()


def segment_word(word: str) -> Iterator[Segmentation]:
    """Segment a word with the default segmenter."""
    return DEFAULT_SEGMENTER.segment(word)
