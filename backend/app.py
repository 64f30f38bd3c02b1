import io
import logging
import math

from flask import Flask, jsonify, request, send_file
from flask_cors import CORS

import config
from players.registry import list_players
from services.frame_renderer import SnakeFrameRenderer
from services.game_sessions import GameSessionStore

app = Flask(__name__)
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

# Enable CORS for API routes so a front end on another origin can drive games
CORS(app, resources={r"/api/*": {"origins": config.CORS_ALLOWED_ORIGINS}})

sessions = GameSessionStore(max_sessions=config.MAX_SESSIONS)


def _not_found(game_id):
    return jsonify({"error": f"Game '{game_id}' not found"}), 404


def _state_response(session, status=200):
    return jsonify({
        "game_id": session.game_id,
        "state": session.engine.get_current_state().to_dict()
    }), status


def _json_body():
    return request.get_json(silent=True) or {}


@app.route("/api/games", methods=["POST"])
def create_game_endpoint():
    """
    Start a new game.

    Returns the game id and the initial snapshot. The client should call
    the step endpoint every `state.speed_ms` milliseconds.
    """
    try:
        session = sessions.create()
        return _state_response(session, 201)
    except Exception as error:
        logging.error(f"Error creating game: {error}")
        return jsonify({"error": "Failed to create game"}), 500


@app.route("/api/games", methods=["GET"])
def list_games_endpoint():
    return jsonify({"games": sessions.summaries()})


@app.route("/api/games/<game_id>", methods=["GET"])
def get_game_endpoint(game_id):
    try:
        with sessions.locked(game_id) as session:
            return _state_response(session)
    except KeyError:
        return _not_found(game_id)


@app.route("/api/games/<game_id>", methods=["DELETE"])
def delete_game_endpoint(game_id):
    try:
        sessions.delete(game_id)
    except KeyError:
        return _not_found(game_id)
    return "", 204


@app.route("/api/games/<game_id>/step", methods=["POST"])
def step_game_endpoint(game_id):
    """
    Advance one tick.

    The returned `speed_ms` is the period to wait before the next step;
    `is_over` means the client should stop ticking.
    """
    try:
        with sessions.locked(game_id) as session:
            session.engine.step()
            return _state_response(session)
    except KeyError:
        return _not_found(game_id)


@app.route("/api/games/<game_id>/direction", methods=["POST"])
def set_direction_endpoint(game_id):
    direction = _json_body().get("direction")
    try:
        with sessions.locked(game_id) as session:
            session.engine.set_direction(direction)
            return _state_response(session)
    except KeyError:
        return _not_found(game_id)
    except ValueError as error:
        return jsonify({"error": str(error)}), 400


@app.route("/api/games/<game_id>/key", methods=["POST"])
def key_endpoint(game_id):
    key = _json_body().get("key")
    if not isinstance(key, str):
        return jsonify({"error": "Missing 'key'"}), 400
    try:
        with sessions.locked(game_id) as session:
            session.keyboard.handle_key(key)
            return _state_response(session)
    except KeyError:
        return _not_found(game_id)


@app.route("/api/games/<game_id>/button", methods=["POST"])
def button_endpoint(game_id):
    button = _json_body().get("button")
    try:
        with sessions.locked(game_id) as session:
            session.buttons.press(button)
            return _state_response(session)
    except KeyError:
        return _not_found(game_id)
    except ValueError as error:
        return jsonify({"error": str(error)}), 400


@app.route("/api/games/<game_id>/swipe", methods=["POST"])
def swipe_endpoint(game_id):
    body = _json_body()
    try:
        delta_x = float(body.get("dx", 0))
        delta_y = float(body.get("dy", 0))
    except (TypeError, ValueError):
        return jsonify({"error": "'dx' and 'dy' must be numbers"}), 400
    if not (math.isfinite(delta_x) and math.isfinite(delta_y)):
        return jsonify({"error": "'dx' and 'dy' must be finite"}), 400
    try:
        with sessions.locked(game_id) as session:
            session.swipes.swipe(delta_x, delta_y)
            return _state_response(session)
    except KeyError:
        return _not_found(game_id)


@app.route("/api/games/<game_id>/restart", methods=["POST"])
def restart_endpoint(game_id):
    try:
        with sessions.locked(game_id) as session:
            session.engine.restart()
            return _state_response(session)
    except KeyError:
        return _not_found(game_id)


@app.route("/api/games/<game_id>/frame.png", methods=["GET"])
def frame_endpoint(game_id):
    """Render the current snapshot as a PNG."""
    width = request.args.get("width", default=config.FRAME_WIDTH, type=int)
    height = request.args.get("height", default=config.FRAME_HEIGHT, type=int)
    if width > config.MAX_FRAME_SIZE or height > config.MAX_FRAME_SIZE:
        return jsonify({"error": f"Frame size is limited to {config.MAX_FRAME_SIZE}x{config.MAX_FRAME_SIZE}"}), 400
    try:
        with sessions.locked(game_id) as session:
            state = session.engine.get_current_state()
    except KeyError:
        return _not_found(game_id)

    try:
        renderer = SnakeFrameRenderer(width=width, height=height, grid_size=state.grid_size)
    except ValueError as error:
        return jsonify({"error": str(error)}), 400

    try:
        buffer = io.BytesIO()
        renderer.render_png(state, buffer)
        buffer.seek(0)
        return send_file(buffer, mimetype="image/png")
    except Exception as error:
        logging.error(f"Error rendering frame for game {game_id}: {error}")
        return jsonify({"error": "Failed to render frame"}), 500


@app.route("/api/players", methods=["GET"])
def list_players_endpoint():
    return jsonify({"players": list_players()})


if __name__ == "__main__":
    app.run(debug=config.FLASK_DEBUG, port=config.PORT)
