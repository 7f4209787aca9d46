from __future__ import annotations
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import socketio
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from .config import Settings
from .dictionary import DictionaryService, Lexicon
from .errors import ConflictError, NotFound, SnooWordsError, ValidationError
from .game_logic import WordValidator, generate_letters
from .logging_setup import setup_logging
from .managers.game import GAME_MODES, GameManager, GameRound, theme_info
from .remote_dictionary import RemoteDictionary
from .schemas import CreateRound, SubmitWord
from .scoring import get_policy
from .themes import is_theme_related

logger = logging.getLogger(__name__)

MAX_LETTER_COUNT = 32

def load_lexicon(settings: Settings) -> Lexicon:
    if settings.word_list_path is not None:
        return Lexicon.from_txt(settings.word_list_path)
    return Lexicon.from_wordfreq(settings.base_word_count)

def configure(settings: Optional[Settings] = None, lexicon: Optional[Lexicon] = None) -> None:
    """Build the shared lexicon and services once and attach them to the app."""
    settings = settings or Settings.load()
    if lexicon is None:
        lexicon = load_lexicon(settings)
    remote = None
    if settings.remote_dictionary_enabled:
        remote = RemoteDictionary(settings.remote_dictionary_url, timeout=settings.remote_dictionary_timeout)
    dictionary = DictionaryService(lexicon, remote)
    validator = WordValidator(dictionary)

    app.state.settings = settings
    app.state.dictionary = dictionary
    app.state.validator = validator
    app.state.games = GameManager(validator, settings, sio)
    logger.info("Lexicon ready with %s entries (remote dictionary %s)", len(lexicon), "on" if remote else "off")

@asynccontextmanager
async def lifespan(_: FastAPI):
    if getattr(app.state, 'games', None) is None:
        settings = Settings.load()
        setup_logging(settings)
        configure(settings)
    yield

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins='*')
app = FastAPI(title="SnooWords Server", version="0.1.0", lifespan=lifespan)

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

def _games() -> GameManager:
    return app.state.games

def _dictionary() -> DictionaryService:
    return app.state.dictionary

def _status_for(exc: SnooWordsError) -> int:
    if isinstance(exc, NotFound):
        return 404
    if isinstance(exc, ConflictError):
        return 409
    if isinstance(exc, ValidationError):
        return 400
    return 500

@app.exception_handler(SnooWordsError)
async def domain_error(request: Request, exc: SnooWordsError):
    return JSONResponse(status_code=_status_for(exc), content={'ok': False, 'error': str(exc)})

# REST Endpoints
@app.get('/letters')
async def letters(count: Optional[int] = Query(None, ge=0, le=MAX_LETTER_COUNT)):
    settings: Settings = app.state.settings
    return {
        'letters': generate_letters(
            settings.letter_count if count is None else count,
            min_vowels=settings.min_vowels,
            vowel_probability=settings.vowel_probability,
        ),
    }

# Dictionary validation REST endpoint. Plain `def`: the remote fallback blocks.
@app.get('/dict/validate')
def validate_word(word: str, letters: Optional[str] = None):
    available = [c for c in letters if c.isalpha()] if letters is not None else None
    valid = app.state.validator.validate(word, available)
    definition = _dictionary().definition(word) if valid else None
    return { 'word': word.upper(), 'valid': valid, 'definition': definition }

@app.get('/dict/suggest')
async def suggest(prefix: str, limit: int = Query(10, ge=1, le=100)):
    return { 'prefix': prefix.lower(), 'words': _dictionary().suggestions(prefix, limit) }

@app.get('/words/score')
async def score_word(word: str, policy: str = 'additive'):
    scoring = get_policy(policy)
    return { 'word': word.upper(), 'policy': scoring.name, 'points': scoring.score(word) }

@app.get('/themes/daily')
async def daily_theme():
    return theme_info(_games().daily_theme()).model_dump()

@app.get('/themes/{theme}/words/{word}')
async def theme_word(theme: str, word: str):
    return { 'theme': theme.lower(), 'word': word.lower(), 'themed': is_theme_related(word, theme) }

@app.get('/modes')
async def list_modes() -> Dict[str, list]:
    return { 'modes': [m.info().model_dump() for m in GAME_MODES.values()] }

@app.post('/rounds')
async def create_round(body: CreateRound):
    game_round = _games().create_round(body.mode, body.player)
    return game_round.to_state().model_dump()

@app.get('/rounds/{round_id}')
async def get_round(round_id: str):
    return _games().get(round_id).to_state().model_dump()

@app.post('/rounds/{round_id}/words')
def submit_word(round_id: str, body: SubmitWord):
    result = _games().get(round_id).submit(body.word)
    return result.model_dump()

@app.post('/rounds/{round_id}/{action}')
async def round_action(round_id: str, action: str):
    game_round = _games().get(round_id)
    handler = _ROUND_ACTIONS.get(action)
    if handler is None:
        return JSONResponse(status_code=404, content={'ok': False, 'error': f"Unknown action: {action}"})
    handler(game_round)
    return game_round.to_state().model_dump()

@app.delete('/rounds/{round_id}')
async def delete_round(round_id: str):
    _games().remove(round_id)
    return { 'ok': True }

_ROUND_ACTIONS = {
    'start': GameRound.start,
    'pause': GameRound.pause,
    'resume': GameRound.resume,
    'end': GameRound.end,
    'reset': GameRound.reset,
}

# Socket.IO Events. Every reply goes to the requesting sid only.
@sio.event
async def connect(sid, environ, auth):
    # Client sends its display name as the auth token
    name = None
    if isinstance(auth, dict):
        token = auth.get('token')
        if isinstance(token, str) and token.strip():
            name = token.strip()
    await sio.save_session(sid, { 'name': name })
    await sio.emit('pong', to=sid)

@sio.event
async def disconnect(sid):
    sess = await sio.get_session(sid) or {}
    round_id = sess.get('round_id')
    if round_id and round_id in _games().rounds:
        _games().remove(round_id)

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

async def _session_round(sid) -> GameRound:
    sess = await sio.get_session(sid) or {}
    return _games().get(sess.get('round_id') or '')

async def _emit_error(sid, exc: Exception):
    await sio.emit('round:error', { 'ok': False, 'error': str(exc) }, to=sid)

async def _emit_state(sid, game_round: GameRound):
    await sio.emit('round:state', game_round.to_state().model_dump(), to=sid)

@sio.on('round:create')
async def round_create(sid, payload: Any = None):
    try:
        body = CreateRound.model_validate(payload or {})
        sess = await sio.get_session(sid) or {}
        old_id = sess.get('round_id')
        if old_id and old_id in _games().rounds:
            _games().remove(old_id)
        player = body.player if body.player != 'Anonymous' else (sess.get('name') or f"Player-{sid[:4]}")
        game_round = _games().create_round(body.mode, player)
        await sio.save_session(sid, { **sess, 'round_id': game_round.id })
    except (SnooWordsError, PydanticValidationError) as e:
        await _emit_error(sid, e)
        return
    await _emit_state(sid, game_round)

@sio.on('round:state')
async def round_state(sid):
    try:
        game_round = await _session_round(sid)
    except SnooWordsError as e:
        await _emit_error(sid, e)
        return
    await _emit_state(sid, game_round)

@sio.on('round:start')
async def round_start(sid):
    try:
        game_round = await _session_round(sid)
        game_round.start()
    except SnooWordsError as e:
        await _emit_error(sid, e)
        return
    _games().watch(game_round.id, sid)
    await _emit_state(sid, game_round)

@sio.on('round:submit')
async def round_submit(sid, payload: Any):
    try:
        if isinstance(payload, str):
            payload = { 'word': payload }
        body = SubmitWord.model_validate(payload)
        game_round = await _session_round(sid)
        # the remote dictionary fallback blocks; keep it off the event loop
        result = await asyncio.to_thread(game_round.submit, body.word)
    except (SnooWordsError, PydanticValidationError) as e:
        await _emit_error(sid, e)
        return
    await sio.emit('round:wordResult', result.model_dump(), to=sid)

async def _round_action(sid, action: str):
    try:
        game_round = await _session_round(sid)
        _ROUND_ACTIONS[action](game_round)
    except SnooWordsError as e:
        await _emit_error(sid, e)
        return
    await _emit_state(sid, game_round)

@sio.on('round:pause')
async def round_pause(sid):
    await _round_action(sid, 'pause')

@sio.on('round:resume')
async def round_resume(sid):
    await _round_action(sid, 'resume')

@sio.on('round:end')
async def round_end(sid):
    await _round_action(sid, 'end')

@sio.on('round:reset')
async def round_reset(sid):
    await _round_action(sid, 'reset')

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn snoowords.main:application --reload --host 0.0.0.0 --port 8000
