"""Text normalization for homoyin.

Two jobs:
    - Pronunciation fields: validate the numbered-pinyin shape, lowercase,
      rewrite "u:" to "ü" and strip tones to get the canonical key.
    - Definitions: drop senses that carry no independently useful meaning
      (classifiers, cross-references, variant notes) through an ordered
      pipeline of named rewrite rules.
"""

import re

# Han script: radicals, iteration/numeral marks, CJK Unified (and Extension
# A), compatibility ideographs, Extensions B through H.
HAN_CLASS = (
    "⺀-⿟"
    "々〇〡-〩〸-〻"
    "㐀-䶿"
    "一-鿿"
    "豈-﫿"
    "\U00020000-\U0003134f"
    "\U00031350-\U000323af"
)

PINYIN_FIELD_PATTERN = re.compile(r"^[A-Za-z:]+\d( [A-Za-z:]+\d)*$")
INTERJECTION_PATTERN = re.compile(r"^m\d")
TONE_DIGIT_PATTERN = re.compile(r"\d")


def is_standard_pinyin(pinyin: str) -> bool:
    """Check that every token is letters/colons followed by one tone digit."""
    return bool(PINYIN_FIELD_PATTERN.match(pinyin))


def is_interjection(pinyin: str) -> bool:
    """Check for the bare "m" interjection reading (e.g., "m2")."""
    return bool(INTERJECTION_PATTERN.match(pinyin))


def normalize_pinyin(pinyin: str) -> str:
    """Lowercase a pronunciation field and spell the umlaut vowel as ü."""
    return pinyin.lower().replace("u:", "ü")


def strip_tones(pinyin: str) -> str:
    """Remove all tone digits: "ni3 hao3" -> "ni hao"."""
    return TONE_DIGIT_PATTERN.sub("", pinyin)


# =============================================================================
# Definition cleanup
# =============================================================================

# Ordered: later rules assume earlier ones already ran.
CLEANUP_RULES: tuple[tuple[str, re.Pattern[str], str], ...] = (
    (
        "cross_references",
        re.compile(r"/(CL:|see |same as )[^/]*?/"),
        "/",
    ),
    (
        "pronunciation_asides",
        re.compile(r"/[^/]*(pr\.|variant of|Kangxi radical \d)[^/]*/"),
        "/",
    ),
    (
        "parenthesized_senses",
        re.compile(r"/\([^/]*\)/"),
        "/",
    ),
    (
        "alternate_forms",
        re.compile(f"\\|[{HAN_CLASS}]+"),
        "",
    ),
    (
        "inline_pronunciations",
        re.compile(f"([{HAN_CLASS}])\\[[A-Za-z0-9 ]+\\]"),
        r"\1",
    ),
)

_RULES_BY_NAME = {name: (pattern, repl) for name, pattern, repl in CLEANUP_RULES}


def apply_rule(name: str, definition: str) -> str:
    """Apply a single cleanup rule by name."""
    if name not in _RULES_BY_NAME:
        raise ValueError(
            f"Unknown cleanup rule: {name}. Available: {list(_RULES_BY_NAME)}"
        )
    pattern, repl = _RULES_BY_NAME[name]
    return pattern.sub(repl, definition)


def clean_definition(
    definition: str,
    rules: tuple[tuple[str, re.Pattern[str], str], ...] = CLEANUP_RULES,
) -> str:
    """Run a cleanup pipeline over a slash-delimited definition.

    Args:
        definition: Raw definition field, e.g. "/hello/CL:個|个[ge4]/".
        rules: Ordered (name, pattern, replacement) rules to apply.

    Returns:
        Cleaned definition, still slash-delimited.
    """
    for _, pattern, repl in rules:
        definition = pattern.sub(repl, definition)
    return definition


def is_empty_definition(definition: str) -> bool:
    """True when nothing is left between the delimiting slashes."""
    return definition == "/"
