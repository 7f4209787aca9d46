from __future__ import annotations

import math
from fractions import Fraction
from typing import Dict, FrozenSet, Protocol, Tuple

from .errors import UnknownScoringPolicy


class ScoringPolicy(Protocol):
    name: str

    def score(self, word: str) -> int: ...


class AdditiveScoring:
    """
    One point per letter, +2 per Q/Z/X/J, +3 at 6+ letters and another +5
    at 8+ letters.
    """

    name = 'additive'

    SPECIAL_LETTERS: FrozenSet[str] = frozenset('QZXJ')
    SPECIAL_BONUS = 2
    # (min length, bonus); tiers are cumulative
    LENGTH_TIERS: Tuple[Tuple[int, int], ...] = ((6, 3), (8, 5))

    def score(self, word: str) -> int:
        points = len(word)
        points += self.SPECIAL_BONUS * sum(1 for ch in word.upper() if ch in self.SPECIAL_LETTERS)
        for min_len, bonus in self.LENGTH_TIERS:
            if len(word) >= min_len:
                points += bonus
        return points


class MultiplicativeScoring:
    """
    Length times 1.5 at 7+ letters, 1.5 again at 9+, and 1.2 if any rare
    letter (J/K/Q/X/Z) appears; floored to an int.
    """

    name = 'multiplicative'

    RARE_LETTERS: FrozenSet[str] = frozenset('JKQXZ')
    LENGTH_TIERS: Tuple[Tuple[int, Fraction], ...] = ((7, Fraction(3, 2)), (9, Fraction(3, 2)))
    RARE_FACTOR = Fraction(6, 5)

    def score(self, word: str) -> int:
        points = Fraction(len(word))
        for min_len, factor in self.LENGTH_TIERS:
            if len(word) >= min_len:
                points *= factor
        if any(ch in self.RARE_LETTERS for ch in word.upper()):
            points *= self.RARE_FACTOR
        return math.floor(points)


ADDITIVE = AdditiveScoring()
MULTIPLICATIVE = MultiplicativeScoring()

SCORING_POLICIES: Dict[str, ScoringPolicy] = {
    ADDITIVE.name: ADDITIVE,
    MULTIPLICATIVE.name: MULTIPLICATIVE,
}


def get_policy(name: str) -> ScoringPolicy:
    try:
        return SCORING_POLICIES[name]
    except KeyError:
        raise UnknownScoringPolicy(f"Unknown scoring policy: {name}") from None


def calculate_word_points(word: str) -> int:
    return ADDITIVE.score(word)
