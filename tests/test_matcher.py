"""Tests for the matcher."""

import io

import pytest

from homoyin.ingest.cedict import load_index
from homoyin.matcher import CHUNK_PER_WORKER, Matcher, WordMatch, format_match
from homoyin.schema import DictionaryEntry, Segmentation
from homoyin.segmenter import Segmenter

WORDS = ["Xian", "bingo", "zzz", "nihao", "hello"]

MATCH_OUTPUT = """Xian [xi an]
  西安 [xī ān] /Xi'an, capital of Shaanxi/
Xian [xian]
  先 [xiān] /early/prior/former/in advance/first/
  線 [xiàn] /thread/string/wire/line/
nihao [ni hao]
  你好 [nǐ hǎo] /hello/hi/
"""

NONSENSE_OUTPUT = """bingo [bing o]
nihao [ni ha o]
"""


@pytest.fixture
def index(cedict_file):
    return load_index(cedict_file)


class TestMatchWord:
    """Tests for Matcher.match_word."""

    def test_match_mode(self, index):
        """Test every matching segmentation is reported with its entries."""
        matches = Matcher(index).match_word("Xian")
        assert [m.key for m in matches] == ["xi an", "xian"]
        assert [e.chinese for e in matches[1].entries] == ["先", "線"]
        assert all(m.word == "Xian" for m in matches)

    def test_match_mode_omits_unknown(self, index):
        """Test segmentations without entries are silent in match mode."""
        assert Matcher(index).match_word("bingo") == []

    def test_nonsense_mode(self, index):
        """Test nonsense mode reports only keys missing from the index."""
        matches = Matcher(index, nonsense=True).match_word("bingo")
        assert len(matches) == 1
        assert matches[0].key == "bing o"
        assert matches[0].entries == ()

    def test_nonsense_mode_omits_known(self, index):
        """Test matched keys are silent in nonsense mode."""
        assert Matcher(index, nonsense=True).match_word("Xian") == []
        matches = Matcher(index, nonsense=True).match_word("nihao")
        assert [m.key for m in matches] == ["ni ha o"]

    def test_unsegmentable(self, index):
        """Test words with no split are silent in both modes."""
        assert Matcher(index).match_word("hello") == []
        assert Matcher(index, nonsense=True).match_word("hello") == []

    def test_lowercases_word(self, index):
        """Test matching is case-insensitive but keeps the original word."""
        matches = Matcher(index).match_word("NIHAO")
        assert [m.key for m in matches] == ["ni hao"]
        assert matches[0].word == "NIHAO"

    def test_custom_segmenter(self, index):
        """Test the segmenter can be swapped."""
        segmenter = Segmenter(max_length=2)
        assert [m.key for m in Matcher(index, segmenter=segmenter).match_word("xian")] == ["xi an"]


class TestFormat:
    """Tests for output formatting."""

    def test_format_match(self):
        """Test header and entry lines."""
        match = WordMatch(
            word="nihao",
            segmentation=Segmentation(word="nihao", boundaries=(0, 2)),
            entries=(DictionaryEntry(pinyin="nǐ hǎo", chinese="你好", definition="/hello/hi/"),),
        )
        assert format_match(match) == [
            "nihao [ni hao]",
            "  你好 [nǐ hǎo] /hello/hi/",
        ]

    def test_format_header_only(self):
        """Test nonsense matches have only a header."""
        match = WordMatch(
            word="bingo",
            segmentation=Segmentation(word="bingo", boundaries=(0, 4)),
        )
        assert format_match(match) == ["bingo [bing o]"]


class TestRun:
    """Tests for Matcher.run."""

    def test_match_output(self, index):
        """Test the full match-mode report."""
        out = io.StringIO()
        reported = Matcher(index).run(WORDS, out=out)
        assert out.getvalue() == MATCH_OUTPUT
        assert reported == 3

    def test_nonsense_output(self, index):
        """Test the full nonsense-mode report."""
        out = io.StringIO()
        reported = Matcher(index, nonsense=True).run(WORDS, out=out)
        assert out.getvalue() == NONSENSE_OUTPUT
        assert reported == 2

    @pytest.mark.parametrize("workers", [2, 4])
    def test_workers_preserve_order(self, index, workers):
        """Test threaded matching writes words in input order."""
        words = WORDS * 20
        serial = io.StringIO()
        threaded = io.StringIO()
        Matcher(index).run(words, out=serial)
        Matcher(index).run(words, out=threaded, workers=workers)
        assert threaded.getvalue() == serial.getvalue()

    def test_default_stdout(self, index, capsys):
        """Test output goes to stdout by default."""
        Matcher(index).run(["nihao"])
        assert capsys.readouterr().out == "nihao [ni hao]\n  你好 [nǐ hǎo] /hello/hi/\n"

    def test_workers_read_in_batches(self, index):
        """Test threaded matching starts writing before the wordlist is drained."""
        consumed = []

        def words():
            for i in range(10000):
                consumed.append(i)
                yield "nihao"

        class FirstWrite(io.StringIO):
            consumed_at_first_write = None

            def write(self, text):
                if self.consumed_at_first_write is None:
                    self.consumed_at_first_write = len(consumed)
                return super().write(text)

        out = FirstWrite()
        reported = Matcher(index).run(words(), out=out, workers=2)
        assert reported == 10000
        assert out.consumed_at_first_write <= 2 * CHUNK_PER_WORKER
