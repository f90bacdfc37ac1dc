"""
JSON endpoints for the daily puzzle.

Routes only unpack the request body; all decisions are made by the
PuzzleService stored on the app.
"""
import re

from flask import Blueprint, current_app, jsonify, request

games_api = Blueprint("games_api", __name__)

DECIMAL_RE = re.compile(r"[0-9]+")


def get_service():
    return current_app.extensions["puzzle_service"]


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _coerce_idx(raw):
    """Accept an int or a decimal string; anything else is returned as-is and fails the live check."""
    if raw is None:
        return 0
    if isinstance(raw, str) and DECIMAL_RE.fullmatch(raw.strip()):
        try:
            return int(raw.strip())
        except ValueError:
            # longer than the interpreter's int string limit
            return raw
    return raw


def _respond(outcome):
    return jsonify(outcome.to_dict()), outcome.http_status


@games_api.route("/guess", methods=["POST"])
def submit_guess():
    """Score a guess for today's puzzle."""
    data = _json_body()
    outcome = get_service().submit_guess(
        data.get("dayKey"),
        _coerce_idx(data.get("idx")),
        data.get("guess"),
    )
    return _respond(outcome)


@games_api.route("/answers", methods=["POST"])
def past_answers():
    """Reveal answers for previous days."""
    data = _json_body()
    outcome = get_service().get_past_answers(
        _coerce_idx(data.get("idx")),
        data.get("dayKeys", []),
    )
    return _respond(outcome)


@games_api.route("/today")
def today():
    return _respond(get_service().today())
