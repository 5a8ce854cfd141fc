from postpage.repositories.blog import get_published_post_by_slug

__all__ = [
    "get_published_post_by_slug",
]
