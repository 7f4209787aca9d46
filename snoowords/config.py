from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_REMOTE_DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """
    Server settings loaded from environment variables.

    Only `load()` touches the environment; the dataclass itself is a plain
    value so tests can build one directly.
    """

    env: str = "development"
    log_level: str = "INFO"

    # Letters
    letter_count: int = 12
    min_vowels: int = 3
    vowel_probability: float = 0.3

    # Lexicon
    base_word_count: int = 50000
    word_list_path: Optional[Path] = None

    # Remote dictionary fallback
    remote_dictionary_enabled: bool = False
    remote_dictionary_url: str = DEFAULT_REMOTE_DICTIONARY_URL
    remote_dictionary_timeout: float = 5.0

    # Seconds an unplayed round may sit untouched before it is evicted
    round_idle_timeout: float = 1800.0

    @classmethod
    def load(cls) -> "Settings":
        # Load .env for local development (noop when not present)
        load_dotenv()

        word_list_raw = os.getenv("WORD_LIST_PATH")
        word_list_path = Path(word_list_raw) if word_list_raw else None

        vowel_probability = _env_float("VOWEL_PROBABILITY", 0.3)
        if not 0.0 <= vowel_probability <= 1.0:
            raise RuntimeError("VOWEL_PROBABILITY must be between 0 and 1")

        return cls(
            env=os.getenv("ENV", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            letter_count=_env_int("LETTER_COUNT", 12),
            min_vowels=_env_int("MIN_VOWELS", 3),
            vowel_probability=vowel_probability,
            base_word_count=_env_int("BASE_WORD_COUNT", 50000),
            word_list_path=word_list_path,
            remote_dictionary_enabled=_env_bool("REMOTE_DICTIONARY_ENABLED", False),
            remote_dictionary_url=os.getenv("REMOTE_DICTIONARY_URL", DEFAULT_REMOTE_DICTIONARY_URL),
            remote_dictionary_timeout=_env_float("REMOTE_DICTIONARY_TIMEOUT", 5.0),
            round_idle_timeout=_env_float("ROUND_IDLE_TIMEOUT", 1800.0),
        )
