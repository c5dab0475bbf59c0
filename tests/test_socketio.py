import asyncio

import pytest

from wordfinder import main
from wordfinder.errors import SessionNotFound
from wordfinder.game_logic import GameSession


@pytest.fixture
def emitted(monkeypatch):
    events = []

    async def fake_emit(event, data=None, to=None, **kwargs):
        events.append((event, data, to))

    monkeypatch.setattr(main.sio, "emit", fake_emit)
    return events


def pin_silkworm(sid):
    key = f"sio:{sid}"
    main.games.sessions[key] = GameSession("silkworm", main.dict_service, session_id=key)


def test_connect_starts_game(emitted):
    asyncio.run(main.connect("sid-1", {}, None))
    event, data, to = emitted[-1]
    assert event == "game:state"
    assert to == "sid-1"
    assert data["id"] == "sio:sid-1"
    assert data["score"] == 0
    asyncio.run(main.disconnect("sid-1"))


def test_disconnect_ends_game(emitted):
    asyncio.run(main.connect("sid-2", {}, None))
    asyncio.run(main.disconnect("sid-2"))
    with pytest.raises(SessionNotFound):
        main.games.get("sio:sid-2")


def test_submit_and_new_word(emitted):
    asyncio.run(main.connect("sid-3", {}, None))
    pin_silkworm("sid-3")

    asyncio.run(main.on_submit("sid-3", {"word": "works"}))
    event, data, to = emitted[-1]
    assert event == "game:wordResult"
    assert to == "sid-3"
    assert data["outcome"] == {"kind": "accepted", "points": 5}
    assert data["state"]["score"] == 5

    asyncio.run(main.on_submit("sid-3", "kiss"))
    event, data, _ = emitted[-1]
    assert data["outcome"] == {"kind": "rejected", "reason": "not_possible"}
    assert data["title"] == "Word not possible"

    asyncio.run(main.on_new_word("sid-3"))
    event, data, _ = emitted[-1]
    assert event == "game:state"
    assert data["score"] == 0
    assert data["usedWords"] == []
    asyncio.run(main.disconnect("sid-3"))


def test_submit_without_session_starts_one(emitted):
    main.games.end("sio:sid-4")
    asyncio.run(main.on_submit("sid-4", {"word": "   "}))
    event, data, _ = emitted[-1]
    assert event == "game:wordResult"
    assert data["outcome"] is None
    assert data["state"]["id"] == "sio:sid-4"
    asyncio.run(main.disconnect("sid-4"))


@pytest.mark.parametrize("payload", [{"word": None}, {"word": ["works"]}, 42])
def test_invalid_submission_emits_error(emitted, payload):
    asyncio.run(main.connect("sid-5", {}, None))
    asyncio.run(main.on_submit("sid-5", payload))
    event, data, to = emitted[-1]
    assert event == "game:error"
    assert to == "sid-5"
    assert data["errors"]
    assert main.games.get("sio:sid-5").used_words == []
    asyncio.run(main.disconnect("sid-5"))
