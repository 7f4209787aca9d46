from __future__ import annotations

import random
from collections import Counter
from typing import List, Optional, Sequence

from .dictionary import MIN_WORD_LENGTH, DictionaryService

VOWELS = 'AEIOU'
CONSONANTS = 'BCDFGHJKLMNPQRSTVWXYZ'

DEFAULT_LETTER_COUNT = 12
MIN_VOWELS = 3
VOWEL_PROBABILITY = 0.3


def generate_letters(
    count: int = DEFAULT_LETTER_COUNT,
    *,
    min_vowels: int = MIN_VOWELS,
    vowel_probability: float = VOWEL_PROBABILITY,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Draw one round's letters.

    The first `min_vowels` slots are always vowels; the rest are vowels with
    probability `vowel_probability`, so a round can hold more vowels than the
    minimum. The result is shuffled before it is returned.
    """
    if count < 0:
        raise ValueError("letter count must be non-negative")
    r = rng or random

    reserved = min(min_vowels, count)
    letters = [r.choice(VOWELS) for _ in range(reserved)]
    for _ in range(count - reserved):
        source = VOWELS if r.random() < vowel_probability else CONSONANTS
        letters.append(r.choice(source))

    r.shuffle(letters)
    return letters


def count_vowels(letters: Sequence[str]) -> int:
    return sum(1 for l in letters if l.upper() in VOWELS)


def can_build(word: str, letters: Sequence[str]) -> bool:
    # each letter may be used as many times as it appears, no more
    remaining = Counter(l.upper() for l in letters)
    for ch in word.upper():
        if remaining[ch] == 0:
            return False
        remaining[ch] -= 1
    return True


class WordValidator:
    def __init__(self, dictionary: DictionaryService):
        self.dictionary = dictionary

    def validate(self, word: str, available_letters: Optional[Sequence[str]] = None) -> bool:
        if not word or len(word) < MIN_WORD_LENGTH:
            return False
        if available_letters is None:
            return self.dictionary.is_valid(word)

        if self.dictionary.is_known_locally(word):
            return can_build(word, available_letters)

        # Unbuildable words never reach the network
        if not can_build(word, available_letters):
            return False
        return self.dictionary.confirm_remotely(word)
