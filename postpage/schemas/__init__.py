from __future__ import annotations

# Re-export common schema classes for convenient imports
from .posts import AuthorOut, PostImageOut, PostDetail  # noqa: F401

__all__ = [
    "AuthorOut",
    "PostImageOut",
    "PostDetail",
]
