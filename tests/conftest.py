from __future__ import annotations

import threading

import pytest

from snoowords.dictionary import DictionaryService, Lexicon
from snoowords.game_logic import WordValidator

BASE_WORDS = [
    'walk', 'happy', 'leaf', 'box', 'church', 'hope', 'stop', 'show',
    'quartz', 'planet', 'wonder', 'code', 'retrace', 'information', 'ox', 'go',
]


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.t = start

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float):
        self.t += seconds


class FakeSio:
    def __init__(self):
        self.emitted = []
        self.sessions = {}

    async def emit(self, event, data=None, to=None, room=None):
        self.emitted.append((event, data, to))

    async def save_session(self, sid, session):
        self.sessions[sid] = session

    async def get_session(self, sid):
        return self.sessions.get(sid)

    def events(self, name):
        return [e for e in self.emitted if e[0] == name]


class BlockingRemote:
    """Remote dictionary that confirms every word once `parties` lookups are in flight together."""

    def __init__(self, parties: int = 2):
        self.barrier = threading.Barrier(parties, timeout=5)

    def confirm(self, word):
        self.barrier.wait()
        return True

    def definition(self, word):
        return None


@pytest.fixture(scope='session')
def lexicon() -> Lexicon:
    return Lexicon.build(BASE_WORDS)


@pytest.fixture
def dictionary(lexicon) -> DictionaryService:
    return DictionaryService(lexicon)


@pytest.fixture
def validator(dictionary) -> WordValidator:
    return WordValidator(dictionary)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_sio() -> FakeSio:
    return FakeSio()


@pytest.fixture
def blocking_remote() -> BlockingRemote:
    return BlockingRemote()
