import os
import logging

import click
from flask import Flask, render_template
from flask.cli import with_appcontext
from dotenv import load_dotenv

from .extensions import db

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite:///flightreservation.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "your-secret-key-change-in-production")
    app.config["ITINERARY_DIR"] = os.getenv("ITINERARY_DIR", "itineraries")
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    db.init_app(app)

    from . import models  # noqa: F401
    from .auth import auth_bp
    from .flights import flights_bp
    from .reservations_api import reservations_api
    from .admin import admin_bp
    app.register_blueprint(auth_bp)
    app.register_blueprint(flights_bp)
    app.register_blueprint(reservations_api)
    app.register_blueprint(admin_bp)

    @app.errorhandler(403)
    def forbidden(error):
        return render_template('forbidden.html'), 403

    app.cli.add_command(init_db_command)
    app.cli.add_command(create_user_command)

    return app


# ==================== DATABASE INITIALIZATION ====================

def init_db():
    """Create all tables and the default roles."""
    from .auth import get_or_create_role
    db.create_all()
    for name in ("USER", "ADMIN"):
        get_or_create_role(name)
    db.session.commit()
    logger.info("Database initialized")


@click.command("init-db")
@with_appcontext
def init_db_command():
    init_db()
    click.echo("Database initialized successfully!")


@click.command("create-user")
@click.argument("email")
@click.password_option()
@click.option("--admin", is_flag=True, help="Grant the ADMIN role.")
@with_appcontext
def create_user_command(email, password, admin):
    from .auth import register_user
    roles = ("USER", "ADMIN") if admin else ("USER",)
    user, error = register_user(None, None, email, password, roles=roles)
    if error:
        raise click.ClickException(error)
    click.echo(f"Created user {user.email} with roles {', '.join(user.role_names)}")


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        init_db()
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", 5000)), debug=True)
