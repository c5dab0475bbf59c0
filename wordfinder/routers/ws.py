from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from ..schemas import ClientMessage

router = APIRouter()

def session_key(session_id: str) -> str:
    # WebSocket games never collide with REST or Socket.IO sessions
    return f"ws:{session_id}"

@router.websocket("/{session_id}")
async def websocket_endpoint(websocket: WebSocket, session_id: str):
    games = websocket.app.state.games
    key = session_key(session_id)
    await websocket.accept()

    game = games.new_game(key)

    # Send initial state to player
    await websocket.send_json({"type": "init", "state": game.to_state().model_dump(mode="json")})

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = ClientMessage.model_validate_json(raw)
            except ValidationError as exc:
                await websocket.send_json({"type": "error", "message": "Invalid message", "errors": [e["msg"] for e in exc.errors()]})
                continue
            if msg.type == "submit":
                result = games.submit(key, msg.word)
                await websocket.send_json({"type": "result", **result.model_dump(mode="json")})
            else:
                game = games.new_game(key)
                await websocket.send_json({"type": "init", "state": game.to_state().model_dump(mode="json")})
    except WebSocketDisconnect:
        pass
    finally:
        games.end(key)
