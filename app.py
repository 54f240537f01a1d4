from __future__ import annotations

import logging
import math
import os
import sys
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        Color,
        ConfigError,
        RoundController,
        Vec2,
        canvas_to_math,
        config_from_env,
    )
    from .bubbles_core.logsetup import configure_logging  # type: ignore
except ImportError:
    from game import (  # type: ignore
        Color,
        ConfigError,
        RoundController,
        Vec2,
        canvas_to_math,
        config_from_env,
    )
    from bubbles_core.logsetup import configure_logging  # type: ignore

logger = logging.getLogger(__name__)

# Static assets ship inside the bubbles_core package so installs carry them.
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "bubbles_core", "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)

MAX_TICKS_PER_REQUEST = 1000
MAX_GAMES = 256

# In-process sessions; every game is driven under the lock so a tick and a fire
# for the same game can never interleave. Oldest games are evicted past MAX_GAMES.
_GAMES: OrderedDict[str, RoundController] = OrderedDict()
_GAMES_LOCK = threading.Lock()


def state_to_json(game: RoundController) -> Dict[str, Any]:
    state = game.snapshot()
    state["palette"] = {c.name: c.value for c in Color}
    state["tickIntervalMs"] = int(game.config.tick_interval_ms)
    return state


def _lookup(body: Dict[str, Any]) -> Tuple[Optional[str], Optional[RoundController]]:
    game_id = body.get("gameId")
    if not isinstance(game_id, str):
        return None, None
    return game_id, _GAMES.get(game_id)


def _not_found(game_id: Optional[str]) -> Any:
    if game_id is None:
        return jsonify({"ok": False, "error": "gameId required"}), 400
    return jsonify({"ok": False, "error": f"unknown game {game_id}"}), 404


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        config = config_from_env(
            seed=body.get("seed"),
            width=body.get("width"),
            height=body.get("height"),
            filled_rows=body.get("filledRows"),
        )
    except (ConfigError, TypeError) as e:
        return jsonify({"ok": False, "error": f"bad config: {e}"}), 400
    game = RoundController(config)
    game_id = uuid.uuid4().hex
    with _GAMES_LOCK:
        _GAMES[game_id] = game
        while len(_GAMES) > MAX_GAMES:
            evicted, _ = _GAMES.popitem(last=False)
            logger.info("evicted game %s", evicted)
    logger.info("created game %s", game_id)
    return jsonify({"ok": True, "gameId": game_id, "state": state_to_json(game)})


@app.post("/api/state")
def api_state() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    with _GAMES_LOCK:
        game_id, game = _lookup(body)
        if game is None:
            return _not_found(game_id)
        return jsonify({"ok": True, "state": state_to_json(game)})


@app.post("/api/aim")
def api_aim() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        point = Vec2(float(body["x"]), float(body["y"]))
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad target: {e}"}), 400
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        return jsonify({"ok": False, "error": "bad target: coordinates must be finite"}), 400
    with _GAMES_LOCK:
        game_id, game = _lookup(body)
        if game is None:
            return _not_found(game_id)
        if body.get("space", "math") == "canvas":
            point = canvas_to_math(point, game.grid.width, game.grid.height)
        game.aim(point)
        return jsonify({"ok": True, "state": state_to_json(game)})


@app.post("/api/fire")
def api_fire() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    with _GAMES_LOCK:
        game_id, game = _lookup(body)
        if game is None:
            return _not_found(game_id)
        accepted = game.fire()
        return jsonify({"ok": True, "accepted": accepted, "state": state_to_json(game)})


@app.post("/api/tick")
def api_tick() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        ticks = int(body.get("ticks", 1))
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad ticks: {e}"}), 400
    ticks = max(1, min(ticks, MAX_TICKS_PER_REQUEST))
    with _GAMES_LOCK:
        game_id, game = _lookup(body)
        if game is None:
            return _not_found(game_id)
        shot = None
        for _ in range(ticks):
            result = game.tick()
            if result is None:
                break
            shot = result.value
            if not game.flying:
                break
        return jsonify({"ok": True, "shot": shot, "state": state_to_json(game)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
