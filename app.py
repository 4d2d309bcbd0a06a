from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request

from game import (
    Direction,
    EngineSnapshot,
    GameController,
    GameStatus,
    InvalidConfiguration,
    SessionStats,
    new_engine,
)
from snake_core.config import DEFAULT_SEED, DEFAULT_WIDTH, MAX_SPEED, MAX_STEPS_PER_REQUEST

logger = logging.getLogger(__name__)

logging.getLogger('werkzeug').setLevel(logging.WARNING)


class GameSession:
    """One engine + controller per app. Every engine call goes through the lock."""

    def __init__(self, width: int, seed: Optional[int]) -> None:
        self.lock = threading.Lock()
        self.stats = SessionStats()
        self.controller = GameController(new_engine(width, seed=seed), self.stats)

    def rebuild(self, width: int, seed: Optional[int], spawn: Optional[int]) -> None:
        engine = new_engine(width, seed=seed, spawn_index=spawn)
        self.controller = GameController(engine, self.stats)


def _status_to_json(status: Optional[GameStatus]) -> Optional[str]:
    return status.value if status is not None else None


def snapshot_to_json(snap: EngineSnapshot) -> Dict[str, Any]:
    return {
        "width": snap.width,
        "size": snap.size,
        "foodCell": snap.food_cell,
        "status": _status_to_json(snap.status),
        "points": snap.points,
        "head": snap.head,
        "length": snap.length,
        "heading": snap.heading.value,
        "body": list(snap.body),
    }


def _state_payload(session: GameSession) -> Dict[str, Any]:
    ctl = session.controller
    state = snapshot_to_json(ctl.engine.snapshot())
    state.update({
        "statusText": ctl.status_text(),
        "running": ctl.running,
        "speed": ctl.speed,
        "tickInterval": ctl.tick_interval,
    })
    return {"ok": True, "state": state}


def _session() -> GameSession:
    return current_app.extensions["snake"]


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _bad_request(msg: str) -> Any:
    return jsonify({"ok": False, "error": msg}), 400


def _opt_int(body: Dict[str, Any], key: str) -> Optional[int]:
    val = body.get(key)
    if val is None:
        return None
    if isinstance(val, bool) or (isinstance(val, float) and not val.is_integer()):
        raise ValueError(f"{key} must be an integer")
    return int(val)


def create_app(width: Optional[int] = None, seed: Optional[int] = None) -> Flask:
    app = Flask(__name__)
    app.extensions["snake"] = GameSession(
        width if width is not None else DEFAULT_WIDTH,
        seed if seed is not None else DEFAULT_SEED,
    )

    @app.get("/")
    def index() -> Any:
        return jsonify({"ok": True, "message": "snake engine running"})

    @app.get("/api/state")
    def api_state() -> Any:
        session = _session()
        with session.lock:
            return jsonify(_state_payload(session))

    @app.get("/api/stats")
    def api_stats() -> Any:
        session = _session()
        with session.lock:
            st = session.stats
            return jsonify({
                "ok": True,
                "highScore": st.high_score,
                "gamesPlayed": st.games_played,
                "lastPlayed": st.last_played.isoformat(),
                "newHighScore": session.controller.last_new_high,
            })

    @app.post("/api/stats/clear")
    def api_stats_clear() -> Any:
        session = _session()
        with session.lock:
            session.stats.clear()
            session.controller.last_new_high = False
            return jsonify({"ok": True, "highScore": 0, "gamesPlayed": 0})

    @app.post("/api/new")
    def api_new() -> Any:
        body = _json_body()
        session = _session()
        try:
            w = _opt_int(body, "width")
            s = _opt_int(body, "seed")
            spawn = _opt_int(body, "spawn")
        except (TypeError, ValueError) as e:
            return _bad_request(f"bad config: {e}")
        with session.lock:
            try:
                session.rebuild(
                    w if w is not None else DEFAULT_WIDTH,
                    s if s is not None else DEFAULT_SEED,
                    spawn,
                )
            except InvalidConfiguration as e:
                return _bad_request(str(e))
            logger.info("New engine: width=%s seed=%s spawn=%s", w, s, spawn)
            return jsonify(_state_payload(session))

    def _control(action: str) -> Any:
        session = _session()
        with session.lock:
            ctl = session.controller
            if action == "play":
                ctl.press_play()
            elif action == "start":
                ctl.start()
            elif action == "pause":
                ctl.engine.pause()
            elif action == "resume":
                ctl.engine.resume()
            elif action == "reset":
                ctl.engine.reset()
                ctl.running = False
            return jsonify(_state_payload(session))

    @app.post("/api/play")
    def api_play() -> Any:
        return _control("play")

    @app.post("/api/start")
    def api_start() -> Any:
        return _control("start")

    @app.post("/api/pause")
    def api_pause() -> Any:
        return _control("pause")

    @app.post("/api/resume")
    def api_resume() -> Any:
        return _control("resume")

    @app.post("/api/reset")
    def api_reset() -> Any:
        return _control("reset")

    @app.post("/api/heading")
    def api_heading() -> Any:
        body = _json_body()
        session = _session()
        try:
            direction = Direction.parse(body.get("direction"))
        except ValueError as e:
            return _bad_request(str(e))
        with session.lock:
            accepted = session.controller.engine.change_heading(direction)
            payload = _state_payload(session)
            payload["accepted"] = accepted
            return jsonify(payload)

    @app.post("/api/key")
    def api_key() -> Any:
        body = _json_body()
        code = body.get("code")
        if not isinstance(code, str):
            return _bad_request("code required")
        session = _session()
        with session.lock:
            handled = session.controller.handle_key(code)
            payload = _state_payload(session)
            payload["handled"] = handled
            return jsonify(payload)

    @app.post("/api/step")
    def api_step() -> Any:
        body = _json_body()
        try:
            count = _opt_int(body, "count")
        except (TypeError, ValueError) as e:
            return _bad_request(f"bad count: {e}")
        count = 1 if count is None else count
        if not 1 <= count <= MAX_STEPS_PER_REQUEST:
            return _bad_request(f"count must be between 1 and {MAX_STEPS_PER_REQUEST}")
        raw = bool(body.get("raw", False))
        session = _session()
        with session.lock:
            ctl = session.controller
            for _ in range(count):
                if raw:
                    ctl.step()
                else:
                    ctl.tick()
                    if not ctl.running:
                        break
            return jsonify(_state_payload(session))

    @app.post("/api/speed")
    def api_speed() -> Any:
        body = _json_body()
        try:
            delta = _opt_int(body, "delta") or 0
        except (TypeError, ValueError) as e:
            return _bad_request(f"bad delta: {e}")
        session = _session()
        with session.lock:
            ctl = session.controller
            for _ in range(min(abs(delta), MAX_SPEED)):
                if delta > 0:
                    ctl.speed_up()
                else:
                    ctl.speed_down()
            return jsonify(_state_payload(session))

    return app


app = create_app()


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=debug)
