from __future__ import annotations

import secrets


def generate_hex_id(length: int = 32) -> str:
    """Generate a secure random hex string of specified length."""
    return secrets.token_hex(length // 2)


from postpage.models.profile import Profile
from postpage.models.blog import Post, PostImage, POST_STATUS_PUBLISHED

__all__ = [
    "generate_hex_id",
    "Profile",
    "Post",
    "PostImage",
    "POST_STATUS_PUBLISHED",
]
