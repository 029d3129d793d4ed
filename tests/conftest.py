"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_cedict_content():
    """Sample CEDICT content covering each filtering rule."""
    return """# CC-CEDICT
# Community maintained free Chinese-English dictionary.
你好 你好 [ni3 hao3] /hello/hi/
西安 西安 [Xi1 an1] /Xi'an, capital of Shaanxi/
先 先 [xian1] /early/prior/former/in advance/first/
線 线 [xian4] /thread/string/wire/line/CL:條|条[tiao2],股[gu3],根[gen1]/
冰 冰 [bing1] /ice/CL:塊|块[kuai4]/
哦 哦 [o2] /oh (interjection indicating doubt or surprise)/
女 女 [nu:3] /female/woman/daughter/
略 略 [lu:e4] /brief/sketchy/
Ｔ恤 Ｔ恤 [T xu4] /T-shirt/
呣 呣 [m2] /interjection expressing a question/
卅 卅 [sa4] /thirty/
卅 卅 [san1 shi2] /thirty/
個 个 [ge4] /variant of 個|个[ge4]/
妳 你 [ni3] /see 你[ni3]/
阿 阿 [a1] /(prefix used before monosyllabic names)/
"""


@pytest.fixture
def sample_wordlist_content():
    """Sample English word list."""
    return """Xian
bingo
zzz
nihao

hello
"""


@pytest.fixture
def cedict_file(tmp_path, sample_cedict_content):
    """Sample CEDICT written to a temporary file."""
    path = tmp_path / "cedict.txt"
    path.write_text(sample_cedict_content, encoding="utf-8")
    return path


@pytest.fixture
def wordlist_file(tmp_path, sample_wordlist_content):
    """Sample wordlist written to a temporary file."""
    path = tmp_path / "words"
    path.write_text(sample_wordlist_content, encoding="utf-8")
    return path
