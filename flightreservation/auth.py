"""
User registration and login views.
"""

import logging
from urllib.parse import urlsplit

from flask import Blueprint, request, render_template, redirect, url_for

from . import security
from .extensions import db
from .models import User, Role

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)

DEFAULT_ROLE = "USER"


def get_or_create_role(name):
    role = db.session.query(Role).filter_by(name=name).first()
    if role is None:
        role = Role(name=name)
        db.session.add(role)
    return role


def register_user(first_name, last_name, email, password, roles=(DEFAULT_ROLE,)):
    """Create a user with a hashed password. Returns (user, error_message)."""
    if not email or not password:
        return None, "Email and password are required"

    if db.session.query(User).filter_by(email=email).first():
        return None, "Email already exists"

    user = User(first_name=first_name, last_name=last_name, email=email)
    user.set_password(password)
    user.roles = [get_or_create_role(name) for name in roles]
    try:
        db.session.add(user)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    logger.info("Registered user %s", email)
    return user, None


def is_safe_redirect(target):
    """Only same-site absolute paths: no scheme, no host, no '//' or '/\\' prefix."""
    if not target or not target.startswith('/') or target.startswith(('//', '/\\')):
        return False
    parts = urlsplit(target)
    return not parts.scheme and not parts.netloc


# ==================== ROUTES ====================

@auth_bp.route("/")
@auth_bp.route("/showLogin")
def show_login():
    return render_template('login/login.html')


@auth_bp.route("/showReg")
def show_registration():
    return render_template('login/registerUser.html')


@auth_bp.route("/registerUser", methods=["POST"])
def register():
    email = request.form.get('email')
    logger.info("Registering user %s", email)

    if request.form.get('password') != request.form.get('confirmPassword', request.form.get('password')):
        return render_template('login/registerUser.html', msg="Passwords do not match"), 400

    user, error = register_user(
        first_name=request.form.get('firstName'),
        last_name=request.form.get('lastName'),
        email=email,
        password=request.form.get('password'),
    )
    if error:
        return render_template('login/registerUser.html', msg=error), 400

    return render_template('login/login.html', msg="Registration successful, please log in")


@auth_bp.route("/login", methods=["POST"])
def login():
    email = request.form.get('email')
    logger.info("Login attempt for %s", email)

    if security.login(email, request.form.get('password')):
        next_url = request.args.get('next')
        if is_safe_redirect(next_url):
            return redirect(next_url)
        return redirect(url_for('flights.find_flights'))

    return render_template('login/login.html', msg="Invalid username or password"), 401


@auth_bp.route("/logout")
def logout():
    security.logout()
    return redirect(url_for('auth.show_login'))
