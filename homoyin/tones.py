"""Tone-mark rendering for numerically toned pinyin.

Converts a syllable plus a tone digit into its printed diacritic form:

    render("hao", 3)        -> "hǎo"
    render_toned("xie4")    -> "xiè"
    render_pinyin("ni3 hao3") -> "nǐ hǎo"

Tone 5 is the neutral tone and never carries a mark.
"""

from typing import Optional

VOWELS = "aeiouü"

NEUTRAL_TONE = 5

# (vowel, tone) -> marked vowel
TONE_MARKS: dict[tuple[str, int], str] = {
    ("a", 1): "ā", ("a", 2): "á", ("a", 3): "ǎ", ("a", 4): "à",
    ("e", 1): "ē", ("e", 2): "é", ("e", 3): "ě", ("e", 4): "è",
    ("i", 1): "ī", ("i", 2): "í", ("i", 3): "ǐ", ("i", 4): "ì",
    ("o", 1): "ō", ("o", 2): "ó", ("o", 3): "ǒ", ("o", 4): "ò",
    ("u", 1): "ū", ("u", 2): "ú", ("u", 3): "ǔ", ("u", 4): "ù",
    ("ü", 1): "ǖ", ("ü", 2): "ǘ", ("ü", 3): "ǚ", ("ü", 4): "ǜ",
}

# Which vowel takes the mark when a syllable has more than one
MARK_TARGETS: dict[str, str] = {
    "ai": "a",
    "ao": "a",
    "ei": "e",
    "ia": "a",
    "iao": "a",
    "ie": "e",
    "io": "o",
    "iu": "u",
    "ou": "o",
    "ua": "a",
    "uai": "a",
    "ue": "e",
    "ui": "i",
    "uo": "o",
    "üe": "e",
}


class ToneError(ValueError):
    """Raised when a syllable cannot be rendered with a tone mark."""


def vowel_run(syllable: str) -> str:
    """Return the vowel letters of a syllable, in order."""
    return "".join(c for c in syllable if c in VOWELS)


def mark_target(syllable: str) -> Optional[str]:
    """Pick the vowel that carries the tone mark.

    Returns:
        The target vowel, or None if the syllable has no vowel letter.

    Raises:
        ToneError: If the vowel run is not catalogued.
    """
    vowels = vowel_run(syllable)
    if not vowels:
        return None
    if len(vowels) == 1:
        return vowels
    if vowels not in MARK_TARGETS:
        raise ToneError(f"Unknown vowel combination {vowels!r} in {syllable!r}")
    return MARK_TARGETS[vowels]


def render(syllable: str, tone: int) -> str:
    """Render a toneless syllable with the diacritic for a tone.

    Args:
        syllable: Lowercase toneless syllable (e.g., "xie").
        tone: Tone number 1-5.

    Returns:
        The syllable with its first target vowel replaced by the marked
        vowel, or unchanged for the neutral tone.

    Raises:
        ToneError: If the tone is out of range or the vowel run is unknown.
    """
    if tone < 1 or tone > NEUTRAL_TONE:
        raise ToneError(f"Tone out of range: {tone}")
    if tone == NEUTRAL_TONE:
        return syllable

    target = mark_target(syllable)
    if target is None:
        return syllable

    pos = syllable.index(target)
    return syllable[:pos] + TONE_MARKS[(target, tone)] + syllable[pos + 1:]


def split_tone(token: str) -> tuple[str, int]:
    """Split "hao3" into ("hao", 3)."""
    if not token or not token[-1].isdecimal():
        raise ToneError(f"Missing tone digit: {token!r}")
    return token[:-1], int(token[-1])


def render_toned(token: str) -> str:
    """Render one numerically toned token."""
    syllable, tone = split_tone(token)
    return render(syllable, tone)


def render_pinyin(pinyin: str) -> str:
    """Render a space-separated field of toned tokens."""
    return " ".join(render_toned(token) for token in pinyin.split(" "))
