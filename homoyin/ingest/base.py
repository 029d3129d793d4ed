"""Base ingestor interface for input files.

All ingestors inherit from Ingestor and implement parse(). The ingest()
method of each subclass turns parsed records into its result type.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional


@dataclass
class IngestResult:
    """Statistics from ingesting a source file."""

    source_path: str
    total_raw: int = 0          # Non-comment lines/records in source
    total_valid: int = 0        # Records kept
    rejected: dict[str, int] = field(default_factory=dict)  # reason -> count
    errors: list[str] = field(default_factory=list)

    def reject(self, reason: str) -> None:
        """Count a skipped record."""
        self.rejected[reason] = self.rejected.get(reason, 0) + 1

    @property
    def total_rejected(self) -> int:
        return sum(self.rejected.values())

    def __repr__(self) -> str:
        return (
            f"IngestResult({Path(self.source_path).name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_rejected} rejected)"
        )


class Ingestor(ABC):
    """Base class for ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (line, line_number) tuples
    """

    encoding: str = "utf-8"

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse source file and yield (record, line_number) tuples.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (record, line_number).
        """
        pass

    def read_lines(self, filepath: Path | str) -> Iterator[tuple[str, int]]:
        """Yield (line, line_number) with the line ending removed."""
        with open(filepath, "r", encoding=self.encoding) as f:
            for line_num, line in enumerate(f, start=1):
                yield line.rstrip("\r\n"), line_num
