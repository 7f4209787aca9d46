from __future__ import annotations

import random
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from snoowords.config import Settings
from snoowords.dictionary import DictionaryService
from snoowords.errors import RoundAlreadyActive, RoundNotActive, RoundNotFound, UnknownGameMode
from snoowords.game_logic import WordValidator
from snoowords.managers.game import GAME_MODES, GameManager, GameRound
from snoowords.themes import DailyTheme

NO_THEME = DailyTheme('Nature', 'Connect with words about the natural world!', ('tree', 'leaf'))


def make_round(validator, clock, mode='classic', theme=NO_THEME, letters='DOGCATWALKED'):
    game_round = GameRound('r1', validator, GAME_MODES[mode], daily_theme=theme, rng=random.Random(1), now=clock)
    game_round.start()
    game_round.letters = tuple(letters)
    return game_round


def test_new_round_is_idle_with_letters(validator, clock):
    game_round = GameRound('r1', validator, GAME_MODES['classic'], now=clock)
    assert game_round.status == 'idle'
    assert len(game_round.letters) == 12
    with pytest.raises(RoundNotActive):
        game_round.submit('dog')


def test_accepts_and_scores_words_with_streak(validator, clock):
    game_round = make_round(validator, clock)

    first = game_round.submit('dog')
    assert first.accepted
    assert first.word.points == 3
    assert first.streak == 1

    second = game_round.submit('CAT')
    assert second.word.word == 'cat'
    assert second.word.points == 3  # floor(3 * 1.1)

    third = game_round.submit('walked')
    assert third.word.points == 10  # floor(9 * 1.2)

    assert game_round.score == 16
    assert [w.word for w in game_round.words] == ['dog', 'cat', 'walked']
    assert game_round.longest_streak == 3


@pytest.mark.parametrize('word, reason', [
    ('go', 'too_short'),
    ('cog', 'not_a_word'),
    ('hope', 'letters_unavailable'),
])
def test_rejections(validator, clock, word, reason):
    game_round = make_round(validator, clock)
    result = game_round.submit(word)
    assert not result.accepted
    assert result.reason == reason
    assert game_round.words == []


def test_duplicate_rejected(validator, clock):
    game_round = make_round(validator, clock)
    assert game_round.submit('dog').accepted
    result = game_round.submit(' DOG ')
    assert result.reason == 'duplicate'
    assert game_round.score == 3


def test_theme_word_doubles_points(validator, clock):
    theme = DailyTheme('Technology', '', ('robot',))
    game_round = make_round(validator, clock, theme=theme, letters='CODEXXXXXXXX')
    result = game_round.submit('code')
    assert result.word.themed
    assert result.word.points == 8


def test_bonus_words_only_count_in_challenge(validator, clock):
    classic = make_round(validator, clock, letters='LEAFXXXXXXXX')
    assert classic.submit('leaf').word.points == 4

    challenge = make_round(validator, clock, mode='challenge', letters='LEAFXXXXXXXX')
    result = challenge.submit('leaf')
    assert result.word.themed
    assert result.word.points == 8


def test_challenge_uses_multiplicative_scoring(validator, clock):
    game_round = make_round(validator, clock, mode='challenge', letters='WALKINGXXXXX')
    assert game_round.submit('walking').word.points == 12


def test_word_chain(validator, clock):
    game_round = make_round(validator, clock, mode='wordChain', letters='DOGTCAXXXXXX')
    assert game_round.submit('dog').accepted
    assert game_round.submit('cat').reason == 'chain_broken'
    assert game_round.submit('got').accepted


def test_time_attack_adds_time(validator, clock):
    game_round = make_round(validator, clock, mode='timeAttack')
    assert game_round.clock.time_left == 30000
    result = game_round.submit('dog')
    assert result.timeLeft == 35000


def test_round_expires(validator, clock):
    game_round = make_round(validator, clock)
    clock.advance(61)
    with pytest.raises(RoundNotActive):
        game_round.submit('dog')
    state = game_round.to_state()
    assert state.status == 'ended'
    assert state.timeLeft == 0


def test_pause_stops_clock(validator, clock):
    game_round = make_round(validator, clock)
    clock.advance(10)
    game_round.pause()
    clock.advance(100)
    assert game_round.clock.time_left == 50000
    with pytest.raises(RoundNotActive):
        game_round.submit('dog')
    game_round.resume()
    clock.advance(5)
    assert game_round.to_state().timeLeft == 45000
    assert game_round.submit('dog').accepted


def test_lifecycle_errors(validator, clock):
    game_round = make_round(validator, clock)
    with pytest.raises(RoundAlreadyActive):
        game_round.start()
    with pytest.raises(RoundNotActive):
        game_round.resume()
    game_round.end()
    assert game_round.status == 'ended'
    with pytest.raises(RoundNotActive):
        game_round.end()


def test_reset_clears_round(validator, clock):
    game_round = make_round(validator, clock)
    game_round.submit('dog')
    game_round.reset()
    state = game_round.to_state()
    assert state.status == 'idle'
    assert state.words == []
    assert state.score == 0
    assert state.streak == 0
    assert len(state.letters) == 12


def test_restart_deals_new_round(validator, clock):
    game_round = make_round(validator, clock)
    game_round.submit('dog')
    game_round.end()
    game_round.start()
    assert game_round.status == 'playing'
    assert game_round.words == []
    assert game_round.clock.time_left == 60000


def test_manager_rounds_are_isolated(validator, clock):
    manager = GameManager(validator, Settings(letter_count=16, min_vowels=4), now=clock)
    a = manager.create_round('classic', 'alice')
    b = manager.create_round('classic', 'bob')
    assert a.id != b.id
    assert len(a.letters) == 16

    for r in (a, b):
        r.start()
        r.letters = tuple('DOGCATWALKED')
    a.submit('dog')
    assert [w.word for w in a.words] == ['dog']
    assert b.words == []
    assert a.words[0].player == 'alice'


def test_manager_lookup_and_remove(validator, clock):
    manager = GameManager(validator, now=clock)
    r = manager.create_round()
    assert manager.get(r.id) is r
    manager.remove(r.id)
    with pytest.raises(RoundNotFound):
        manager.get(r.id)
    with pytest.raises(RoundNotFound):
        manager.remove(r.id)
    with pytest.raises(UnknownGameMode):
        manager.create_round('battleRoyale')


def test_manager_daily_theme_fixed_per_day(validator):
    day = {'value': date(2026, 10, 19)}
    manager = GameManager(validator, rng=random.Random(3), today=lambda: day['value'])
    first = manager.daily_theme()
    assert manager.daily_theme() is first
    assert manager.create_round().daily_theme is first


def test_concurrent_submissions_accept_word_once(lexicon, clock, blocking_remote):
    validator = WordValidator(DictionaryService(lexicon, blocking_remote))
    game_round = make_round(validator, clock, letters='QATXXXXXXXXX')

    with ThreadPoolExecutor(max_workers=2) as pool:
        results = list(pool.map(game_round.submit, ['qat', 'QAT']))

    assert sorted(r.accepted for r in results) == [False, True]
    assert [r.reason for r in results if not r.accepted] == ['duplicate']
    assert [w.word for w in game_round.words] == ['qat']
    assert game_round.score == 5


def test_round_ended_during_lookup_rejects_word(lexicon, clock):
    class EndingRemote:
        def confirm(self, word):
            game_round.end()
            return True

        def definition(self, word):
            return None

    validator = WordValidator(DictionaryService(lexicon, EndingRemote()))
    game_round = make_round(validator, clock, letters='QATXXXXXXXXX')
    with pytest.raises(RoundNotActive):
        game_round.submit('qat')
    assert game_round.words == []
    assert game_round.status == 'ended'


def test_manager_evicts_stale_rounds(validator, clock):
    manager = GameManager(validator, Settings(round_idle_timeout=600), now=clock)
    idle = manager.create_round()
    finished = manager.create_round()
    finished.start()
    clock.advance(300)
    recent = manager.create_round()
    recent.start()
    clock.advance(301)
    playing = manager.create_round()
    playing.start()

    fresh = manager.create_round()
    assert set(manager.rounds) == {recent.id, playing.id, fresh.id}
    assert idle.id not in manager.rounds
    assert finished.id not in manager.rounds
    assert recent.status == 'ended'
    assert manager.prune() == 0
