from flask import Flask, redirect, url_for

from config import Config
from services.course_state import EXTENSION_KEY
from services.record_loader import load_state
from utils.logging_setup import setup_logging


def create_app(config_object=Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)

    setup_logging(app.config["LOG_LEVEL"])

    # Both datasets are read once here; routes only ever read them
    app.extensions[EXTENSION_KEY] = load_state(
        app.config["SYLLABUS_SOURCE"],
        app.config["RELATION_SOURCE"],
        timeout=app.config["FETCH_TIMEOUT"],
    )

    # import and register blueprints
    from routes import main_bp, api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)

    @app.route("/")
    def index():
        return redirect(url_for("main.subject_graph"))

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
