"""Post page service: turns a loaded post into what the page displays."""
from __future__ import annotations

from typing import Any, Iterable

from postpage.models.blog import Post
from postpage.schemas.posts import AuthorOut, PostDetail, PostImageOut
from postpage.utils.dates import format_long_date, to_utc


def image_sort_key(image: Any) -> int:
    return image.order_index if image.order_index is not None else 0


def sort_post_images(images: Iterable[Any]) -> list:
    """
    Order gallery images ascending by order_index.

    Missing indices count as 0. sorted() is stable, so images sharing an
    index keep their original relative order.
    """
    return sorted(images, key=image_sort_key)


def build_post_detail(post: Post) -> PostDetail:
    return PostDetail(
        id=post.id,
        title=post.title,
        description=post.description,
        content=post.content,
        featured_image_url=post.featured_image_url,
        created_at=to_utc(post.created_at),
        date=format_long_date(post.created_at),
        slug=post.slug,
        author=AuthorOut.model_validate(post.author),
        images=[PostImageOut.model_validate(img) for img in sort_post_images(post.images or [])],
    )
