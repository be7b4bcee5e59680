import os
import logging

from flask import Flask
from dotenv import load_dotenv

from .integration import ReservationRestClient

load_dotenv()


def create_app(test_config=None):
    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "your-secret-key-change-in-production")
    app.config["RESERVATION_API_URL"] = os.getenv("RESERVATION_API_URL", "http://localhost:5000")
    app.config["RESERVATION_API_TIMEOUT"] = float(os.getenv("RESERVATION_API_TIMEOUT", 10))
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    client = app.config.get("RESERVATION_CLIENT") or ReservationRestClient(
        app.config["RESERVATION_API_URL"], timeout=app.config["RESERVATION_API_TIMEOUT"]
    )
    app.extensions["reservation_client"] = client

    from .checkin import checkin_bp
    app.register_blueprint(checkin_bp)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=int(os.getenv("PORT", 5001)), debug=True)
