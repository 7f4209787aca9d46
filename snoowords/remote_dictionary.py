from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    valid: bool
    definition: Optional[str] = None


def _first_definition(payload) -> Optional[str]:
    if not payload or not isinstance(payload, list):
        return None
    first_entry = payload[0]
    if not isinstance(first_entry, dict):
        return None
    for meaning in first_entry.get('meanings') or []:
        for d in meaning.get('definitions') or []:
            text = d.get('definition')
            if text:
                return text
    return None


class RemoteDictionary:
    """
    Word lookup against a Free-Dictionary-style HTTP API.

    `confirm` answers True/False only when the service gave a definite
    answer (200 or 404); network errors and other statuses return None,
    meaning "could not confirm". Only definite answers are cached.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self._cache: Dict[str, _Entry] = {}

    def _fetch(self, word: str) -> Optional[_Entry]:
        url = f"{self.base_url}/{quote(word)}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Dictionary API request failed for %r: %s", word, e)
            return None

        if response.status_code == 404:
            return _Entry(valid=False)
        if response.status_code != 200:
            logger.warning("Dictionary API returned %s for %r", response.status_code, word)
            return None

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Dictionary API returned malformed JSON for %r", word)
            payload = None
        return _Entry(valid=True, definition=_first_definition(payload))

    def _entry(self, word: str) -> Optional[_Entry]:
        key = word.strip().lower()
        if not key:
            return None
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        entry = self._fetch(key)
        if entry is not None:
            self._cache[key] = entry
        return entry

    def confirm(self, word: str) -> Optional[bool]:
        entry = self._entry(word)
        return entry.valid if entry is not None else None

    def definition(self, word: str) -> Optional[str]:
        entry = self._entry(word)
        return entry.definition if entry is not None else None

    def cached(self, word: str) -> bool:
        return word.strip().lower() in self._cache
