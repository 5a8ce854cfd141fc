from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import joinedload

from postpage.extensions import db
from postpage.models.blog import Post, POST_STATUS_PUBLISHED


def get_published_post_by_slug(slug: str) -> Optional[Post]:
    """Load a published post with its author and images in a single SELECT."""
    stmt = (
        db.select(Post)
        .options(joinedload(Post.author), joinedload(Post.images))
        .filter_by(slug=slug, status=POST_STATUS_PUBLISHED)
    )
    return db.session.execute(stmt).unique().scalar_one_or_none()
