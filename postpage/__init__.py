from __future__ import annotations

import os
from typing import Any, Dict

import click
from flask import Flask, jsonify, g, request, render_template

from postpage.config import Config
from postpage.extensions import db, limiter
from postpage.logging_config import configure_logging
from postpage.security import apply_security_headers
from postpage.models import Post, PostImage, Profile  # ensure models imported for create_all


def create_app(config_overrides: Dict[str, Any] | None = None) -> Flask:
    # Static files live at the site root so /placeholder.svg resolves
    app = Flask(__name__, instance_relative_config=False, static_url_path="")

    # Load config
    app.config.from_object(Config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Init extensions
    db.init_app(app)
    limiter.init_app(app)

    @app.context_processor
    def template_context() -> dict:
        return {
            "site_name": app.config.get("SITE_NAME", "Site Name"),
            "placeholder_image_url": app.config.get("PLACEHOLDER_IMAGE_URL", "/placeholder.svg"),
        }

    @app.template_filter("trusted_html")
    def trusted_html_filter(html_content: str) -> str:
        """Mark post content as safe markup without escaping it.

        Post content is sanitized by the authoring system before it is
        stored; this filter is the one place the page emits it verbatim.
        """
        from markupsafe import Markup
        return Markup(html_content or "")

    # Request context enrichment for logging
    @app.before_request
    def add_request_context() -> None:
        g.request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()

    # Security headers
    @app.after_request
    def set_headers(resp):
        req_id = getattr(g, "request_id", None)
        if req_id:
            resp.headers.setdefault("X-Request-ID", req_id)
        return apply_security_headers(resp)

    # Blueprints
    from postpage.blueprints.blog import bp as blog_bp

    app.register_blueprint(blog_bp)

    # Health route
    @app.get("/health")
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
            db_ok = "connected"
        except Exception:
            db_ok = "error"
        return jsonify({"status": "ok", "db": db_ok}), 200

    # Error handlers
    def wants_json() -> bool:
        if request.args.get("format") == "json":
            return True
        accept = request.accept_mimetypes
        return accept.accept_json and not accept.accept_html

    @app.errorhandler(404)
    def not_found(e):
        if wants_json():
            return jsonify({"error": "not_found", "message": "resource not found"}), 404
        return render_template("404.html"), 404

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({"error": "rate_limited", "message": "too many requests"}), 429

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"error": "server_error", "message": "internal server error"}), 500

    # CLI: create tables for local development
    @app.cli.command("init-db")
    def init_db() -> None:
        with app.app_context():
            db.create_all()
            click.echo("Database tables created")

    return app
