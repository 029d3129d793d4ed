"""homoyin - English words that are also Mandarin.

Finds English dictionary words that are valid sequences of toneless pinyin
syllables, and reports the Chinese words that share that pronunciation.

Core concepts:
    - Every word is split into syllables in all possible ways
    - Each split is a canonical key: lowercase syllables joined by spaces
    - CEDICT entries are indexed under the same key with tones stripped

Example:
    "Xian" → xi|an → key "xi an" → 西安 [xī ān]
           xian  → key "xian"  → 先 [xiān], 線 [xiàn], ...

Usage:
    from homoyin.ingest import cedict
    from homoyin.matcher import Matcher

    index, stats = cedict.ingest("cedict_1_0_ts_utf-8_mdbg.txt")
    matcher = Matcher(index)
    for match in matcher.match_word("Xian"):
        print(match.key, match.entries)
"""

__version__ = "0.1.0"
