"""Configuration loader for homoyin.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any, Optional

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    # From https://www.mdbg.net/chinese/dictionary?page=cc-cedict
    "cedict": "cedict_1_0_ts_utf-8_mdbg.txt",
    "words": "/usr/share/dict/words",
    "nonsense": False,
    "workers": 1,
    "verbose": False,
    "max_syllable_length": None,
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json next to the package or in the working directory."""
    paths = [
        Path(__file__).parent.parent / "config.json",  # homoyin -> root
        Path.cwd() / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_cedict() -> str:
    return get_default("cedict", FALLBACK_DEFAULTS["cedict"])


def default_words() -> str:
    return get_default("words", FALLBACK_DEFAULTS["words"])


def default_nonsense() -> bool:
    return bool(get_default("nonsense", FALLBACK_DEFAULTS["nonsense"]))


def default_workers() -> int:
    return int(get_default("workers", FALLBACK_DEFAULTS["workers"]))


def default_verbose() -> bool:
    return bool(get_default("verbose", FALLBACK_DEFAULTS["verbose"]))


def default_max_syllable_length() -> Optional[int]:
    return get_default("max_syllable_length", FALLBACK_DEFAULTS["max_syllable_length"])
