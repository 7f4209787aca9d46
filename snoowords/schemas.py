from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

GameStatus = Literal['idle', 'playing', 'paused', 'ended']

RejectReason = Literal[
    'too_short',
    'duplicate',
    'chain_broken',
    'not_a_word',
    'letters_unavailable',
]

class ScoredWord(BaseModel):
    word: str
    points: int
    themed: bool = False
    player: str = 'Anonymous'

class TimerState(BaseModel):
    # milliseconds left in the round
    timeLeft: int
    isPaused: bool = False

class DailyThemeInfo(BaseModel):
    theme: str
    description: str
    bonusWords: List[str] = []

class GameModeInfo(BaseModel):
    id: str
    name: str
    description: str
    duration: int
    scoring: str

class RoundState(BaseModel):
    id: str
    mode: str
    player: str
    letters: List[str]
    words: List[ScoredWord] = []
    score: int = 0
    streak: int = 0
    longestStreak: int = 0
    status: GameStatus = 'idle'
    timeLeft: int = 0
    dailyTheme: Optional[DailyThemeInfo] = None

class CreateRound(BaseModel):
    mode: str = 'classic'
    player: str = Field('Anonymous', max_length=64)

class SubmitWord(BaseModel):
    word: str = Field(..., max_length=64)

class SubmitResult(BaseModel):
    accepted: bool
    reason: Optional[RejectReason] = None
    word: Optional[ScoredWord] = None
    score: int = 0
    streak: int = 0
    timeLeft: int = 0
