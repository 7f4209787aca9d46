from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

# Applied by the caller to the base score of a themed or bonus word
THEME_MULTIPLIER = 2

THEME_WORDS: Dict[str, FrozenSet[str]] = {
    'technology': frozenset({
        'app', 'web', 'code', 'data', 'tech', 'byte', 'chip', 'wifi',
        'net', 'blog', 'site', 'file', 'game', 'user', 'link', 'post',
        'chat', 'hack', 'soft', 'hard', 'disk', 'port', 'host', 'cloud',
        'node', 'sync', 'boot', 'spam', 'ping', 'core', 'beta', 'bits',
    }),
    'science': frozenset({
        'lab', 'test', 'cell', 'atom', 'gene', 'dna', 'rna', 'mass',
        'wave', 'heat', 'acid', 'base', 'ion', 'bond', 'gas', 'stem',
        'core', 'data', 'dose', 'drug', 'flow', 'germ', 'host',
        'life', 'node', 'peak', 'rate', 'salt', 'seed',
    }),
    'gaming': frozenset({
        'game', 'play', 'win', 'lose', 'team', 'mode', 'save', 'load',
        'boss', 'loot', 'raid', 'tank', 'heal', 'buff', 'nerf', 'meta',
        'farm', 'grind', 'kill', 'mana', 'rank', 'role',
        'tier', 'unit', 'zone', 'camp', 'drop',
    }),
    'movies': frozenset({
        'film', 'star', 'role', 'cast', 'plot', 'show', 'act', 'scene',
        'hero', 'edit', 'cut', 'take', 'shot', 'view', 'zoom', 'pan',
        'saga', 'tale', 'time', 'tone', 'work', 'year', 'line',
    }),
}


def is_theme_related(word: str, theme: str) -> bool:
    words = THEME_WORDS.get(theme.strip().lower())
    if not words:
        return False
    return word.strip().lower() in words


def is_bonus_word(word: str, bonus_words: Iterable[str]) -> bool:
    w = word.strip().lower()
    return any(w == b.strip().lower() for b in bonus_words)


@dataclass(frozen=True)
class DailyTheme:
    theme: str
    description: str
    bonus_words: Tuple[str, ...]

    def is_themed(self, word: str, *, include_bonus_words: bool = True) -> bool:
        if is_theme_related(word, self.theme):
            return True
        return include_bonus_words and is_bonus_word(word, self.bonus_words)


DAILY_THEMES: Tuple[DailyTheme, ...] = (
    DailyTheme(
        'Space Exploration',
        'Find words related to space, astronomy, and cosmic exploration!',
        ('rocket', 'planet', 'galaxy', 'star', 'orbit', 'moon', 'space'),
    ),
    DailyTheme(
        'Technology',
        'Discover words about computers, gadgets, and innovation!',
        ('code', 'data', 'robot', 'cyber', 'tech', 'smart', 'web'),
    ),
    DailyTheme(
        'Nature',
        'Connect with words about the natural world!',
        ('tree', 'river', 'plant', 'leaf', 'bird', 'flower', 'green'),
    ),
    DailyTheme(
        'Gaming',
        'Level up with video game related words!',
        ('game', 'play', 'score', 'level', 'quest', 'win', 'bonus'),
    ),
    DailyTheme(
        'Science',
        'Experiment with scientific terminology!',
        ('atom', 'cell', 'lab', 'test', 'gene', 'study', 'react'),
    ),
    DailyTheme(
        'Movies',
        'Action! Find words related to cinema and films!',
        ('film', 'actor', 'scene', 'movie', 'star', 'plot', 'role'),
    ),
)


def pick_daily_theme(rng: Optional[random.Random] = None) -> DailyTheme:
    return (rng or random).choice(DAILY_THEMES)
