"""Input file ingestion.

Provides ingestors for the two input formats:
- CEDICT dictionary files (-> DictionaryIndex)
- Plain English wordlists (-> stream of words)

Usage:
    from homoyin.ingest import cedict, wordlist

    index, stats = cedict.ingest("cedict_1_0_ts_utf-8_mdbg.txt")
    for word in wordlist.iter_words("/usr/share/dict/words"):
        ...
"""

from .base import Ingestor, IngestResult
from . import cedict
from . import wordlist

__all__ = [
    "Ingestor",
    "IngestResult",
    "cedict",
    "wordlist",
]
