from __future__ import annotations

from flask import Blueprint

bp = Blueprint("blog", __name__)

# Import view routes to register them with the blueprint
import postpage.blueprints.view  # noqa: E402,F401
