from __future__ import annotations
import logging

import socketio
from fastapi import FastAPI, HTTPException
from pydantic import ValidationError
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .schemas import SessionState, Submission, SubmitResult, WordCheck
from .errors import SessionNotFound
from .managers.game import SessionManager, load_start_words
from .dictionary import load_service
from .routers import ws

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins='*')
app = FastAPI(title="WordFinder", version="0.1.0")

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

dict_service = load_service()
games = SessionManager(dict_service, load_start_words())

app.state.games = games
app.include_router(ws.router, prefix='/ws')

def _session_or_404(session_id: str):
    try:
        return games.get(session_id)
    except SessionNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))

# REST Endpoints
@app.post('/games', response_model=SessionState)
async def create_game():
    return games.new_game().to_state()

@app.get('/games/{game_id}', response_model=SessionState)
async def get_game(game_id: str):
    return _session_or_404(game_id).to_state()

@app.delete('/games/{game_id}')
async def end_game(game_id: str):
    _session_or_404(game_id)
    games.end(game_id)
    return { 'ok': True }

@app.post('/games/{game_id}/new-word', response_model=SessionState)
async def new_word(game_id: str):
    _session_or_404(game_id)
    return games.new_game(game_id).to_state()

@app.post('/games/{game_id}/words', response_model=SubmitResult)
async def submit_word(game_id: str, submission: Submission):
    _session_or_404(game_id)
    return games.submit(game_id, submission.word)

# Dictionary validation REST endpoint
@app.get('/dict/validate', response_model=WordCheck)
async def validate_word(word: str):
    word = word.strip().lower()
    return WordCheck(word=word, valid=dict_service.is_valid(word))

# Socket.IO Events
def _sio_key(sid: str) -> str:
    # keeps socket sessions apart from REST and WebSocket ids
    return f"sio:{sid}"

@sio.event
async def connect(sid, environ, auth):
    # One single-player session per connection
    session = games.new_game(_sio_key(sid))
    await sio.emit('game:state', session.to_state().model_dump(by_alias=True), to=sid)

@sio.event
async def disconnect(sid):
    games.end(_sio_key(sid))

@sio.on('game:newWord')
async def on_new_word(sid):
    session = games.new_game(_sio_key(sid))
    await sio.emit('game:state', session.to_state().model_dump(by_alias=True), to=sid)

@sio.on('game:submit')
async def on_submit(sid, payload):
    try:
        submission = Submission.model_validate(payload if isinstance(payload, dict) else {'word': payload})
    except ValidationError as exc:
        await sio.emit('game:error', { 'message': 'Invalid submission', 'errors': [e['msg'] for e in exc.errors()] }, to=sid)
        return
    key = _sio_key(sid)
    try:
        result = games.submit(key, submission.word)
    except SessionNotFound:
        # connection outlived its session; start over
        games.new_game(key)
        result = games.submit(key, submission.word)
    await sio.emit('game:wordResult', result.model_dump(by_alias=True, mode='json'), to=sid)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordfinder.main:application --reload --host 0.0.0.0 --port 8000
