"""Toneless pinyin syllable table.

Every phonotactically valid toneless pinyin syllable, as catalogued by
http://research.chtsai.org/papers/pinyin-xref.html, plus lüe and nüe since
they appear in CEDICT.
"""

from typing import Iterable, Iterator, Optional

_SYLLABLE_TEXT = """
    a ai an ang ao ba bai ban bang bao bei ben beng bi bian biao bie bin bing bo bu
    ca cai can cang cao ce cen ceng cha chai chan chang chao che chen cheng chi
    chong chou chu chua chuai chuan chuang chui chun chuo ci cong cou cu cuan cui
    cun cuo da dai dan dang dao de dei den deng di dian diao die ding diu dong dou
    du duan dui dun duo e ei en eng er fa fan fang fei fen feng fo fou fu ga gai gan
    gang gao ge gei gen geng gong gou gu gua guai guan guang gui gun guo ha hai han
    hang hao he hei hen heng hong hou hu hua huai huan huang hui hun huo ji jia jian
    jiang jiao jie jin jing jiong jiu ju juan jue jun ka kai kan kang kao ke kei ken
    keng kong kou ku kua kuai kuan kuang kui kun kuo la lai lan lang lao le lei leng
    li lia lian liang liao lie lin ling liu long lou lu lü luan lue lüe lun luo ma
    mai man mang mao me mei men meng mi mian miao mie min ming miu mo mou mu na nai
    nan nang nao ne nei nen neng ni nian niang niao nie nin ning niu nong nou nu nü
    nüe nuan nue nuo o ou pa pai pan pang pao pei pen peng pi pian piao pie pin ping
    po pou pu qi qia qian qiang qiao qie qin qing qiong qiu qu quan que qun ran rang
    rao re ren reng ri rong rou ru ruan rui run ruo sa sai san sang sao se sei sen
    seng sha shai shan shang shao she shei shen sheng shi shou shu shua shuai shuan
    shuang shui shun shuo si song sou su suan sui sun suo ta tai tan tang tao te
    teng ti tian tiao tie ting tong tou tu tuan tui tun tuo wa wai wan wang wei wen
    weng wo wu xi xia xian xiang xiao xie xin xing xiong xiu xu xuan xue xun ya yan
    yang yai yao ye yi yin ying yo yong you yu yuan yue yun za zai zan zang zao ze
    zei zen zeng zha zhai zhan zhang zhao zhe zhei zhen zheng zhi zhong zhou zhu
    zhua zhuai zhuan zhuang zhui zhun zhuo zi zong zou zu zuan zui zun zuo
"""

SYLLABLES: frozenset[str] = frozenset(_SYLLABLE_TEXT.split())

MAX_SYLLABLE_LENGTH: int = max(len(s) for s in SYLLABLES)


class SyllableTable:
    """Immutable set of valid syllable spellings.

    Membership is exact-string against lowercase entries, so callers
    lowercase their input once before probing.
    """

    def __init__(self, syllables: Optional[Iterable[str]] = None):
        """Initialize table.

        Args:
            syllables: Syllable spellings (default: the full pinyin table).
        """
        if syllables is None:
            self._syllables = SYLLABLES
        else:
            self._syllables = frozenset(s.lower() for s in syllables)
        self._max_length = max((len(s) for s in self._syllables), default=0)

    def contains(self, syllable: str) -> bool:
        """Check whether a string is a listed syllable."""
        return syllable in self._syllables

    def max_length(self) -> int:
        """Length of the longest listed syllable."""
        return self._max_length

    def __contains__(self, syllable: object) -> bool:
        return syllable in self._syllables

    def __len__(self) -> int:
        return len(self._syllables)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._syllables))


DEFAULT_TABLE = SyllableTable()


def is_syllable(syllable: str) -> bool:
    """Check a string against the default table."""
    return DEFAULT_TABLE.contains(syllable)
