from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional

from .common_words import ALL_COMMON_WORDS
from .remote_dictionary import RemoteDictionary

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3
COMPARATIVE_MAX_LENGTH = 7
SUFFIXED_MAX_LENGTH = 12

PREFIXES = ('un', 're', 'in', 'dis', 'over', 'under', 'pre', 'post', 'non', 'anti')
SUFFIXES = ('able', 'ible', 'al', 'ial', 'ful', 'ic', 'ical', 'ish', 'less', 'ly', 'ous', 'y')

# Derived forms probed when a candidate is not itself a member
PROBE_SUFFIXES = ('s', 'ed', 'ing', "'s")
PROBE_PREFIXES = ('un', 're')

_CVC_TAIL = re.compile(r'[^aeiou][aeiou][^aeiou]$')
_ES_PLURAL_TAIL = re.compile(r'(?:[sxz]|[cs]h)$')


def expand_word(word: str) -> Iterator[str]:
    """
    Yield `word` and its generated morphological variants.

    The rules are blind string appends, so some outputs are not real words.
    That over-generation is accepted in exchange for coverage.
    """
    w = word.lower()
    yield w

    # Plurals
    yield w + 's'
    if w.endswith('y'):
        yield w[:-1] + 'ies'
    if w.endswith('f'):
        yield w[:-1] + 'ves'
    if _ES_PLURAL_TAIL.search(w):
        yield w + 'es'

    # Verb forms
    cvc = bool(_CVC_TAIL.search(w))
    yield w + 'ed'
    yield w + 'ing'
    if w.endswith('e'):
        yield w[:-1] + 'ing'
    if cvc and not w.endswith('w'):
        yield w + w[-1] + 'ing'
        yield w + w[-1] + 'ed'

    # Comparative / superlative, short words only
    if len(w) <= COMPARATIVE_MAX_LENGTH:
        yield w + 'er'
        yield w + 'est'
        if w.endswith('e'):
            yield w + 'r'
            yield w + 'st'
        if cvc:
            yield w + w[-1] + 'er'
            yield w + w[-1] + 'est'

    for prefix in PREFIXES:
        yield prefix + w

    for suffix in SUFFIXES:
        if len(w) + len(suffix) <= SUFFIXED_MAX_LENGTH:
            yield w + suffix


class Lexicon:
    """
    Immutable set of accepted words.

    Built once at startup from a base word list and shared by every round;
    nothing mutates it afterwards, so concurrent readers need no locking.
    """

    __slots__ = ('_words', '_common')

    def __init__(self, words: Iterable[str], common_words: Iterable[str] = ()):
        self._words: FrozenSet[str] = frozenset(w.lower() for w in words if len(w) >= MIN_WORD_LENGTH)
        self._common: FrozenSet[str] = frozenset(c.lower() for c in common_words if len(c) >= MIN_WORD_LENGTH)

    @classmethod
    def build(cls, base_words: Iterable[str], common_words: Iterable[str] = ALL_COMMON_WORDS) -> "Lexicon":
        words = set()
        base_count = 0
        for raw in base_words:
            w = raw.strip().lower()
            if len(w) < MIN_WORD_LENGTH:
                continue
            base_count += 1
            words.update(expand_word(w))

        common = {c.lower() for c in common_words if len(c) >= MIN_WORD_LENGTH}
        for c in common:
            words.add(c)
            words.add(c + "'s")

        logger.info("Built lexicon: %s base words -> %s entries", base_count, len(words))
        return cls(words, common)

    @classmethod
    def from_wordfreq(cls, n: int, lang: str = 'en') -> "Lexicon":
        from wordfreq import top_n_list

        base = [w for w in top_n_list(lang, n, wordlist='best') if w.isalpha()]
        return cls.build(base)

    @classmethod
    def from_txt(cls, path: Path) -> "Lexicon":
        if not path.exists():
            raise FileNotFoundError(f"Word list file not found: {path}")

        base: List[str] = []
        # utf-8 with errors ignored to be resilient to odd characters
        with path.open('r', encoding='utf-8', errors='ignore') as f:
            for line in f:
                w = line.strip()
                if w and w.isalpha():
                    base.append(w)
        logger.info("Loaded %s base words from %s", len(base), path)
        return cls.build(base)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def contains(self, word: str) -> bool:
        return word.lower() in self._words

    def is_common(self, word: str) -> bool:
        return word.lower() in self._common

    def lookup(self, word: str) -> bool:
        """Common words, then direct membership, then derived-form probes."""
        w = word.lower()
        if w in self._common:
            return True
        if w in self._words:
            return True
        if any(w + s in self._words for s in PROBE_SUFFIXES):
            return True
        return any(p + w in self._words for p in PROBE_PREFIXES)

    def suggestions(self, prefix: str, limit: int = 10) -> List[str]:
        p = prefix.lower()
        if not p or limit <= 0:
            return []
        return sorted(w for w in self._words if w.startswith(p))[:limit]


class DictionaryService:
    def __init__(self, lexicon: Lexicon, remote: Optional[RemoteDictionary] = None):
        self.lexicon = lexicon
        self.remote = remote

    def is_known_locally(self, word: str) -> bool:
        if not word:
            return False
        return self.lexicon.lookup(word)

    def is_valid(self, word: str) -> bool:
        if not word:
            return False
        if self.lexicon.lookup(word):
            return True
        return self.confirm_remotely(word)

    def confirm_remotely(self, word: str) -> bool:
        if self.remote is None:
            return False
        confirmed = self.remote.confirm(word)
        if confirmed is None:
            # Could not confirm: fall back to the local verdict
            logger.debug("Remote dictionary unavailable for %r; using local verdict", word)
            return False
        return confirmed

    def definition(self, word: str) -> Optional[str]:
        if self.remote is None or not word:
            return None
        return self.remote.definition(word)

    def suggestions(self, prefix: str, limit: int = 10) -> List[str]:
        return self.lexicon.suggestions(prefix, limit)
