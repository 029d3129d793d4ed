"""English wordlist ingestor.

Simple format: one word per line, no comments (e.g. /usr/share/dict/words).
Empty lines are skipped; words are kept exactly as written.
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import Ingestor


class WordlistIngestor(Ingestor):
    """Ingestor for plain wordlists."""

    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse wordlist.

        Args:
            filepath: Path to wordlist.

        Yields:
            Tuples of (word, line_number).
        """
        for line, line_num in self.read_lines(filepath):
            word = line.strip()
            if word:
                yield word, line_num


def iter_words(filepath: Path | str) -> Iterator[str]:
    """Stream words from a wordlist without loading it whole."""
    for word, _ in WordlistIngestor().parse(Path(filepath)):
        yield word
