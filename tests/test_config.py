from __future__ import annotations

import logging
from pathlib import Path

import pytest

from snoowords.config import DEFAULT_REMOTE_DICTIONARY_URL, Settings
from snoowords.logging_setup import setup_logging

ENV_VARS = (
    'ENV', 'LOG_LEVEL', 'LETTER_COUNT', 'MIN_VOWELS', 'VOWEL_PROBABILITY', 'BASE_WORD_COUNT',
    'WORD_LIST_PATH', 'REMOTE_DICTIONARY_ENABLED', 'REMOTE_DICTIONARY_URL', 'REMOTE_DICTIONARY_TIMEOUT',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.load()
    assert settings.letter_count == 12
    assert settings.min_vowels == 3
    assert settings.vowel_probability == 0.3
    assert settings.word_list_path is None
    assert settings.remote_dictionary_enabled is False
    assert settings.remote_dictionary_url == DEFAULT_REMOTE_DICTIONARY_URL


def test_overrides(monkeypatch):
    monkeypatch.setenv('LETTER_COUNT', '16')
    monkeypatch.setenv('MIN_VOWELS', '4')
    monkeypatch.setenv('WORD_LIST_PATH', 'words.txt')
    monkeypatch.setenv('REMOTE_DICTIONARY_ENABLED', 'true')
    monkeypatch.setenv('REMOTE_DICTIONARY_TIMEOUT', '2.5')
    settings = Settings.load()
    assert settings.letter_count == 16
    assert settings.min_vowels == 4
    assert settings.word_list_path == Path('words.txt')
    assert settings.remote_dictionary_enabled is True
    assert settings.remote_dictionary_timeout == 2.5


@pytest.mark.parametrize('name, value', [
    ('LETTER_COUNT', 'twelve'),
    ('VOWEL_PROBABILITY', '1.5'),
    ('REMOTE_DICTIONARY_TIMEOUT', 'soon'),
])
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError):
        Settings.load()


def test_setup_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging(Settings(log_level='debug'))
        assert root.level == logging.DEBUG
        assert root.handlers
        setup_logging(Settings(log_level='nonsense'))
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
