"""CC-CEDICT ingestor.

Builds a DictionaryIndex from a CEDICT-format file
(https://www.mdbg.net/chinese/dictionary?page=cc-cedict).

Format:
    # comment
    TRADITIONAL SIMPLIFIED [pin1 yin1] /sense one/sense two/

Any non-comment line that does not have this shape aborts the load. Entries
with a usable shape but unsuitable content are skipped and counted:

    nonstandard       pronunciation is not all "letters+digit" tokens
    interjection      pronunciation starts with bare "m" (m2, m4, ...)
    count_mismatch    headword length differs from the syllable count
    tone_error        a syllable could not be given a tone mark
    empty_definition  nothing left after definition cleanup
"""

import re
from pathlib import Path
from typing import Iterator, Optional

from ..normalizer import (
    clean_definition,
    is_empty_definition,
    is_interjection,
    is_standard_pinyin,
    normalize_pinyin,
    strip_tones,
)
from ..schema import DictionaryEntry, DictionaryIndex
from ..tones import ToneError, render_pinyin
from .base import IngestResult, Ingestor

CEDICT_LINE_PATTERN = re.compile(r"^(\S+) \S+ \[(.*?)\] (/.*)$")

COMMENT_CHAR = "#"


class CedictFormatError(ValueError):
    """Raised when a CEDICT line does not have the expected shape."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Malformed CEDICT {where}: {line!r}")


class CedictIngestor(Ingestor):
    """Ingestor for CEDICT dictionary files."""

    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse CEDICT file, skipping comment lines.

        Args:
            filepath: Path to CEDICT file.

        Yields:
            Tuples of (line, line_number).
        """
        for line, line_num in self.read_lines(filepath):
            if line.startswith(COMMENT_CHAR):
                continue
            yield line, line_num

    def ingest_lines(
        self,
        lines: Iterator[tuple[str, Optional[int]]],
        source_path: str = "<lines>",
    ) -> tuple[DictionaryIndex, IngestResult]:
        """Index already-parsed (line, line_number) records.

        Raises:
            CedictFormatError: On the first malformed line.
        """
        index = DictionaryIndex()
        result = IngestResult(source_path=source_path)

        for line, line_num in lines:
            result.total_raw += 1
            chinese, pinyin, definition = parse_line(line, line_num)

            reason = check_pronunciation(pinyin)
            if reason:
                result.reject(reason)
                continue

            pinyin = normalize_pinyin(pinyin)
            if len(chinese) != len(pinyin.split(" ")):
                result.reject("count_mismatch")
                continue

            toneless = strip_tones(pinyin)
            try:
                rendered = render_pinyin(pinyin)
            except ToneError as e:
                result.reject("tone_error")
                result.errors.append(f"line {line_num}: {e}")
                continue

            definition = clean_definition(definition)
            if is_empty_definition(definition):
                result.reject("empty_definition")
                continue

            index.add(
                toneless,
                DictionaryEntry(pinyin=rendered, chinese=chinese, definition=definition),
            )
            result.total_valid += 1

        return index, result

    def ingest(self, filepath: Path | str) -> tuple[DictionaryIndex, IngestResult]:
        """Ingest CEDICT file.

        Args:
            filepath: Path to CEDICT file.

        Returns:
            Tuple of (index, statistics).

        Raises:
            CedictFormatError: On the first malformed line.
            OSError: If the file cannot be read.
        """
        filepath = Path(filepath)
        return self.ingest_lines(self.parse(filepath), str(filepath.resolve()))


def parse_line(line: str, line_number: Optional[int] = None) -> tuple[str, str, str]:
    """Split a CEDICT line into (chinese, pinyin, definition).

    Raises:
        CedictFormatError: If the line does not have the CEDICT shape.
    """
    match = CEDICT_LINE_PATTERN.match(line)
    if not match:
        raise CedictFormatError(line, line_number)
    return match.group(1), match.group(2), match.group(3)


def check_pronunciation(pinyin: str) -> Optional[str]:
    """Return a rejection reason for the raw pronunciation, or None."""
    if not is_standard_pinyin(pinyin):
        return "nonstandard"
    if is_interjection(pinyin):
        return "interjection"
    return None


def ingest(filepath: Path | str) -> tuple[DictionaryIndex, IngestResult]:
    """Convenience function to ingest a CEDICT file.

    Args:
        filepath: Path to CEDICT file.

    Returns:
        Tuple of (index, statistics).
    """
    return CedictIngestor().ingest(filepath)


def load_index(filepath: Path | str) -> DictionaryIndex:
    """Build just the index from a CEDICT file."""
    index, _ = ingest(filepath)
    return index
