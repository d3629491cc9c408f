from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request, send_from_directory

# Ensure imports work when executed directly from the repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        GameEngine,
        InvalidCellError,
        IGNORED,
        WON,
        DRAW,
        status_message,
    )
except ImportError:
    from game import (  # type: ignore
        GameEngine,
        InvalidCellError,
        IGNORED,
        WON,
        DRAW,
        status_message,
    )


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)
app.logger.setLevel(logging.DEBUG if _env_flag("TTT_DEBUG") else logging.INFO)


# ---------- Static routes ----------

def _send_typed(filename: str, content_type: str) -> Any:
    resp = send_from_directory(app.static_folder, filename)
    resp.headers["Content-Type"] = content_type
    return resp


@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    return _send_typed("main.js", "application/javascript; charset=utf-8")


@app.get("/styles.css")
def styles_css() -> Any:
    return _send_typed("styles.css", "text/css; charset=utf-8")


@app.get("/static/<path:filename>")
def static_files(filename: str) -> Any:
    # Fallback explicit static file handler so /static/* always serves from ./static
    return send_from_directory(app.static_folder, filename)


# ---------- Game API (required by main.js) ----------

def _bad_request(message: str) -> Tuple[Any, int]:
    app.logger.warning("rejected request to %s: %s", request.path, message)
    return jsonify({"ok": False, "error": message}), 400


def _state_response(engine: GameEngine, **extra: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {"ok": True}
    out.update(extra)
    out["state"] = engine.snapshot()
    out["legalMoves"] = engine.legal_moves()
    return out


def _engine_from_body(body: Dict[str, Any]) -> GameEngine:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    return GameEngine.from_snapshot(s_in)


@app.post("/api/new")
def api_new() -> Any:
    engine = GameEngine()
    app.logger.info("new game")
    return jsonify(_state_response(engine))


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        engine = _engine_from_body(body)
    except ValueError as e:
        return _bad_request(f"bad state: {e}")
    if "index" not in body:
        return _bad_request("index required")
    try:
        result = engine.apply_move(body["index"])
    except InvalidCellError as e:
        return _bad_request(str(e))

    app.logger.debug("move %r -> %s", body["index"], result.kind)
    if result.kind in (WON, DRAW):
        app.logger.info("game over: %s", status_message(result.status))
    elif result.kind == IGNORED:
        app.logger.debug("ignored move on cell %r", body["index"])
    return jsonify(_state_response(engine, result=result.kind, player=result.player))


@app.post("/api/reset")
def api_reset() -> Any:
    # Reset has no preconditions: whatever state the page holds is discarded.
    engine = GameEngine()
    app.logger.info("reset")
    return jsonify(_state_response(engine))


@app.post("/api/status")
def api_status() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        engine = _engine_from_body(body)
    except ValueError as e:
        return _bad_request(f"bad state: {e}")
    s = engine.status
    return jsonify({
        "ok": True,
        "status": s.kind,
        "winner": s.winner,
        "line": list(s.line) if s.line is not None else None,
        "currentPlayer": engine.current_player,
        "message": status_message(s),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = _env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0"))
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
