from __future__ import annotations

# Each module imports `bp` from postpage.blueprints.blog
from postpage.blueprints.view import post  # noqa: E402,F401
