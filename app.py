import os
import logging
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from api import games_api
from config import DEV_SECRET, Config
from errors import ConfigurationError
from puzzle_service import PuzzleService


# Flask app setup
def create_app(config=None, service=None):
    """
    Factory function to create and configure Flask app.

    In production the word lists are loaded here, so a missing or empty
    answers file stops the process at startup instead of failing requests.
    """
    config = config or Config.from_env()
    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.flask_secret_key
    app.config["APP_ENV"] = config.env

    if config.trusted and (not config.secret or config.secret == DEV_SECRET):
        raise ConfigurationError("WORDLE_SECRET must be set to a production value")

    service = service or PuzzleService(config)
    if config.trusted:
        service.warm()
    app.extensions["puzzle_service"] = service

    app.register_blueprint(games_api, url_prefix=f"/api/games/{config.namespace}")
    register_routes(app)
    register_error_handlers(app)
    return app


# --------------------
# Basic routes
# --------------------
def register_routes(app):
    @app.route("/health")
    def health():
        """Liveness probe."""
        return jsonify({"ok": True, "env": app.config["APP_ENV"]})

def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"ok": False, "reason": e.name.lower().replace(" ", "_")}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        # Never echo internal detail to the client
        app.logger.exception("Unhandled error")
        return jsonify({"ok": False, "reason": "server_error"}), 500


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=not app.extensions["puzzle_service"].config.trusted)
