"""
Session-based authentication for the Flight Reservation app.
"""

import logging
from functools import wraps

from flask import session, request, redirect, url_for, jsonify, abort

from .extensions import db
from .models import User

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    pass


def load_user_by_username(username):
    """Look a user up by email. Raises UserNotFoundError."""
    user = db.session.query(User).filter_by(email=username).first()
    if user is None:
        raise UserNotFoundError(f"User not found for user: {username}")
    return user


def login(username, password):
    """Verify credentials and establish the session. Returns True on success."""
    try:
        user = load_user_by_username(username)
    except UserNotFoundError:
        logger.info("Login failed, unknown user %s", username)
        return False

    if not user.check_password(password or ""):
        logger.info("Login failed, bad password for %s", username)
        return False

    session.clear()
    session['user_id'] = user.id
    session['email'] = user.email
    session['roles'] = user.role_names
    logger.info("User %s logged in", username)
    return True


def logout():
    session.clear()


def _unauthenticated():
    if request.is_json or request.accept_mimetypes.best == 'application/json':
        return jsonify({"error": "Authentication required"}), 401
    return redirect(url_for('auth.show_login', next=request.path))


# ==================== DECORATORS ====================

def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'user_id' not in session:
            return _unauthenticated()
        return f(*args, **kwargs)
    return decorated_function


def role_required(*roles):
    """Require login plus at least one of the given role names."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if 'user_id' not in session:
                return _unauthenticated()
            if not set(roles) & set(session.get('roles', [])):
                abort(403)
            return f(*args, **kwargs)
        return decorated_function
    return decorator
