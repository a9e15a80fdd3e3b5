# qverse/server.py
import logging

from flask import Flask
from flask_cors import CORS

from .core import config
from .routes.quran_api import quran_bp, set_service


def create_app(service=None) -> Flask:
    """Build the Flask app. Pass a QuranService to override the default one."""
    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.SECRET_KEY

    CORS(app)

    if service is not None:
        set_service(service)

    # Register blueprints
    app.register_blueprint(quran_bp)

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    create_app().run(host=config.HOST, port=config.PORT)
