from __future__ import annotations
import logging
import random
import threading
import time
import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from ..config import Settings
from ..dictionary import MIN_WORD_LENGTH
from ..errors import RoundAlreadyActive, RoundNotActive, RoundNotFound, UnknownGameMode
from ..game_logic import WordValidator, can_build, generate_letters
from ..schemas import DailyThemeInfo, GameModeInfo, RoundState, ScoredWord, SubmitResult, TimerState
from ..scoring import ScoringPolicy, get_policy
from ..themes import THEME_MULTIPLIER, DailyTheme, pick_daily_theme
from .timer import RoundClock, TimerManager

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class GameMode:
    id: str
    name: str
    description: str
    duration: int  # seconds
    scoring: str = 'additive'
    time_bonus: int = 0  # seconds added per accepted word
    chain: bool = False  # each word starts with the previous word's last letter
    bonus_words: bool = False  # daily theme bonus words score the multiplier

    def info(self) -> GameModeInfo:
        return GameModeInfo(
            id=self.id,
            name=self.name,
            description=self.description,
            duration=self.duration,
            scoring=self.scoring,
        )

GAME_MODES: Dict[str, GameMode] = {
    'classic': GameMode('classic', 'Classic Mode', 'Create words within 60 seconds', 60),
    'timeAttack': GameMode('timeAttack', 'Time Attack', 'Each word adds more time', 30, time_bonus=5),
    'wordChain': GameMode(
        'wordChain', 'Word Chain',
        'Each word must start with the last letter of previous word', 90, chain=True,
    ),
    'challenge': GameMode(
        'challenge', 'Daily Challenge', 'Complete special themed challenges', 120,
        scoring='multiplicative', bonus_words=True,
    ),
}

def get_mode(mode_id: str) -> GameMode:
    mode = GAME_MODES.get(mode_id)
    if mode is None:
        raise UnknownGameMode(f"Unknown game mode: {mode_id}")
    return mode

def theme_info(theme: DailyTheme) -> DailyThemeInfo:
    return DailyThemeInfo(theme=theme.theme, description=theme.description, bonusWords=list(theme.bonus_words))

class GameRound:
    """
    One player's round: its letters, accepted words, score and clock.

    Every state change happens under the round's lock. Submissions validate
    outside the lock, so a slow dictionary lookup never holds up the timer,
    and re-check the round before committing.
    """

    def __init__(
        self,
        round_id: str,
        validator: WordValidator,
        mode: GameMode,
        *,
        player: str = 'Anonymous',
        daily_theme: Optional[DailyTheme] = None,
        letter_count: int = 12,
        min_vowels: int = 3,
        vowel_probability: float = 0.3,
        rng: Optional[random.Random] = None,
        now: Callable[[], float] = time.monotonic,
    ):
        self.id = round_id
        self.validator = validator
        self.mode = mode
        self.player = player
        self.daily_theme = daily_theme
        self.scoring: ScoringPolicy = get_policy(mode.scoring)
        self.letter_count = letter_count
        self.min_vowels = min_vowels
        self.vowel_probability = vowel_probability
        self.rng = rng
        self._now = now
        self._lock = threading.RLock()
        self.clock = RoundClock(now)
        self.status: str = 'idle'
        self.letters: Tuple[str, ...] = ()
        self.words: List[ScoredWord] = []
        self.score = 0
        self.streak = 0
        self.longest_streak = 0
        self.last_active = now()
        self._deal()

    def _deal(self):
        self.letters = tuple(generate_letters(
            self.letter_count,
            min_vowels=self.min_vowels,
            vowel_probability=self.vowel_probability,
            rng=self.rng,
        ))

    def _clear(self):
        self.words = []
        self.score = 0
        self.streak = 0
        self.longest_streak = 0

    def _touch(self):
        self.last_active = self._now()

    def expire(self) -> bool:
        """End the round if its clock ran out while playing."""
        with self._lock:
            if self.status == 'playing' and self.clock.expired:
                self.clock.stop()
                self.status = 'ended'
                return True
            return False

    def start(self):
        with self._lock:
            self.expire()
            if self.status in ('playing', 'paused'):
                raise RoundAlreadyActive(f"Round {self.id} is already in progress")
            self._deal()
            self._clear()
            self.clock.start(self.mode.duration)
            self.status = 'playing'
            self._touch()
        logger.info("Round %s started (%s, %s letters)", self.id, self.mode.id, len(self.letters))

    def pause(self):
        with self._lock:
            self.expire()
            if self.status != 'playing':
                raise RoundNotActive(f"Round {self.id} is not playing")
            self.clock.pause()
            self.status = 'paused'
            self._touch()

    def resume(self):
        with self._lock:
            if self.status != 'paused':
                raise RoundNotActive(f"Round {self.id} is not paused")
            self.clock.resume()
            self.status = 'playing'
            self._touch()

    def end(self):
        with self._lock:
            if self.status not in ('playing', 'paused'):
                raise RoundNotActive(f"Round {self.id} is not in progress")
            self.clock.stop()
            self.status = 'ended'
            self._touch()

    def reset(self):
        with self._lock:
            self.clock.stop()
            self._deal()
            self._clear()
            self.status = 'idle'
            self._touch()

    def is_themed(self, word: str) -> bool:
        if self.daily_theme is None:
            return False
        return self.daily_theme.is_themed(word, include_bonus_words=self.mode.bonus_words)

    def _reject(self, reason: str) -> SubmitResult:
        return SubmitResult(
            accepted=False,
            reason=reason,  # type: ignore
            score=self.score,
            streak=self.streak,
            timeLeft=self.clock.time_left,
        )

    def _precheck(self, word: str) -> Optional[SubmitResult]:
        self.expire()
        if self.status != 'playing':
            raise RoundNotActive(f"Round {self.id} is not playing")
        if len(word) < MIN_WORD_LENGTH:
            return self._reject('too_short')
        if any(w.word == word for w in self.words):
            return self._reject('duplicate')
        if self.mode.chain and self.words and not word.startswith(self.words[-1].word[-1]):
            return self._reject('chain_broken')
        return None

    def submit(self, raw_word: str) -> SubmitResult:
        word = raw_word.strip().lower()
        with self._lock:
            rejected = self._precheck(word)
            if rejected is not None:
                return rejected
            letters = self.letters

        valid = self.validator.validate(word, letters)

        with self._lock:
            # another submission or a lifecycle change may have landed meanwhile
            rejected = self._precheck(word)
            if rejected is not None:
                return rejected
            if not can_build(word, self.letters):
                return self._reject('letters_unavailable')
            if not valid:
                return self._reject('not_a_word')
            return self._accept(word)

    def _accept(self, word: str) -> SubmitResult:
        points = self.scoring.score(word)
        themed = self.is_themed(word)
        if themed:
            points *= THEME_MULTIPLIER
        if self.streak > 0:
            # floor(points * (1 + streak / 10))
            points = points * (10 + self.streak) // 10

        scored = ScoredWord(word=word, points=points, themed=themed, player=self.player)
        self.words.append(scored)
        self.score += points
        self.streak += 1
        self.longest_streak = max(self.longest_streak, self.streak)
        if self.mode.time_bonus:
            self.clock.add_time(self.mode.time_bonus)
        self._touch()

        logger.debug("Round %s accepted %r for %s points", self.id, word, points)
        return SubmitResult(
            accepted=True,
            word=scored,
            score=self.score,
            streak=self.streak,
            timeLeft=self.clock.time_left,
        )

    def timer_state(self) -> TimerState:
        with self._lock:
            return self.clock.snapshot()

    def to_state(self) -> RoundState:
        with self._lock:
            self.expire()
            return RoundState(
                id=self.id,
                mode=self.mode.id,
                player=self.player,
                letters=list(self.letters),
                words=list(self.words),
                score=self.score,
                streak=self.streak,
                longestStreak=self.longest_streak,
                status=self.status,  # type: ignore
                timeLeft=self.clock.time_left,
                dailyTheme=theme_info(self.daily_theme) if self.daily_theme else None,
            )


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()

class GameManager:
    def __init__(
        self,
        validator: WordValidator,
        settings: Optional[Settings] = None,
        sio=None,
        *,
        rng: Optional[random.Random] = None,
        now: Callable[[], float] = time.monotonic,
        today: Callable[[], date] = _utc_today,
    ):
        self.validator = validator
        self.settings = settings or Settings()
        self.timer = TimerManager(sio) if sio is not None else None
        self.rng = rng
        self.now = now
        self.today = today
        self.rounds: Dict[str, GameRound] = {}
        self._daily: Optional[Tuple[date, DailyTheme]] = None

    def daily_theme(self) -> DailyTheme:
        day = self.today()
        if self._daily is None or self._daily[0] != day:
            self._daily = (day, pick_daily_theme(self.rng))
            logger.info("Daily theme for %s: %s", day.isoformat(), self._daily[1].theme)
        return self._daily[1]

    def prune(self) -> int:
        """Drop rounds that are not being played and have sat untouched too long."""
        cutoff = self.now() - self.settings.round_idle_timeout
        stale = []
        for rid, r in self.rounds.items():
            r.expire()
            if r.status != 'playing' and r.last_active <= cutoff:
                stale.append(rid)
        for rid in stale:
            self.remove(rid)
        if stale:
            logger.info("Evicted %s stale rounds", len(stale))
        return len(stale)

    def create_round(self, mode_id: str = 'classic', player: str = 'Anonymous', round_id: Optional[str] = None) -> GameRound:
        mode = get_mode(mode_id)
        rid = round_id or uuid.uuid4().hex
        game_round = GameRound(
            rid,
            self.validator,
            mode,
            player=player or 'Anonymous',
            daily_theme=self.daily_theme(),
            letter_count=self.settings.letter_count,
            min_vowels=self.settings.min_vowels,
            vowel_probability=self.settings.vowel_probability,
            rng=self.rng,
            now=self.now,
        )
        self.prune()
        self.rounds[rid] = game_round
        return game_round

    def get(self, round_id: str) -> GameRound:
        game_round = self.rounds.get(round_id)
        if game_round is None:
            raise RoundNotFound(f"Round not found: {round_id}")
        return game_round

    def remove(self, round_id: str):
        if self.timer:
            self.timer.stop(round_id)
        if self.rounds.pop(round_id, None) is None:
            raise RoundNotFound(f"Round not found: {round_id}")

    def watch(self, round_id: str, sid: str):
        if self.timer:
            self.timer.watch(round_id, sid, self.get(round_id))
