import os
import logging

from flask import Flask
from dotenv import load_dotenv

from .extensions import db

load_dotenv()


def create_app(test_config=None):
    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite:///locationweb.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "your-secret-key-change-in-production")
    app.config["REPORT_DIR"] = os.getenv("REPORT_DIR", os.path.join(app.static_folder, "reports"))
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")
    if test_config:
        app.config.update(test_config)
    app.config["REPORT_DIR"] = os.path.abspath(app.config["REPORT_DIR"])

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    db.init_app(app)

    from . import models  # noqa: F401
    from .locations import locations_bp
    app.register_blueprint(locations_bp)

    with app.app_context():
        db.create_all()

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=int(os.getenv("PORT", 5002)), debug=True)
