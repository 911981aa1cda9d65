from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for
from flask_login import LoginManager, current_user, login_required, login_user, logout_user

from ..container import Container
from ..core.exceptions import AuthenticationError
from ..views import render_view


def _safe_next(target: str | None) -> str | None:
    # Only same-site relative paths are followed after login.
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


def register(app: Flask, container: Container) -> None:
    login_manager = LoginManager()
    login_manager.login_view = "login"
    login_manager.login_message = "Please log in to continue."
    login_manager.login_message_category = "warning"
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(token: str):
        return container.auth_service.load_session_user(token)

    @app.route("/", endpoint="home")
    def home():
        return render_view("home", title="Home")

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_user.is_authenticated:
            return redirect(url_for("records_list"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")

            try:
                s_user = container.auth_service.login(username, password)
            except AuthenticationError as e:
                flash(str(e), "danger")
                return redirect(url_for("login", next=request.args.get("next")))

            login_user(s_user)
            flash(f"Welcome back, {s_user.username}!", "success")
            return redirect(_safe_next(request.args.get("next")) or url_for("records_list"))

        return render_view("login", title="Login")

    @app.route("/logout", endpoint="logout")
    @login_required
    def logout():
        container.auth_service.logout(current_user.get_id())
        logout_user()
        flash("You have been logged out.", "info")
        return redirect(url_for("home"))
