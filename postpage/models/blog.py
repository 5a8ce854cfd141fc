from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from postpage.extensions import db
from postpage.models import generate_hex_id

POST_STATUS_PUBLISHED = "published"


class Post(db.Model):
    __tablename__ = "blog_posts"

    id: Mapped[str] = mapped_column(db.String(32), primary_key=True, default=generate_hex_id)
    title: Mapped[str] = mapped_column(db.String(200), nullable=False)
    description: Mapped[str] = mapped_column(db.String(500), nullable=False, default="")
    content: Mapped[str] = mapped_column(db.Text, nullable=False, default="")
    featured_image_url: Mapped[str | None] = mapped_column(db.String(500), nullable=True)
    status: Mapped[str] = mapped_column(db.String(20), nullable=False, default="draft")
    slug: Mapped[str] = mapped_column(db.String(220), unique=True, nullable=False, index=True)
    author_id: Mapped[str] = mapped_column(db.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    author: Mapped["Profile"] = relationship(back_populates="posts")
    # Insertion order; the gallery sort keeps it for equal order_index values
    images: Mapped[list["PostImage"]] = relationship(
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="PostImage.id",
    )

    __table_args__ = (
        Index("ix_blog_posts_slug_status", "slug", "status"),
    )


class PostImage(db.Model):
    __tablename__ = "post_images"

    id: Mapped[int] = mapped_column(primary_key=True)
    post_id: Mapped[str] = mapped_column(db.ForeignKey("blog_posts.id", ondelete="CASCADE"), nullable=False, index=True)
    image_url: Mapped[str] = mapped_column(db.String(500), nullable=False)
    alt_text: Mapped[str | None] = mapped_column(db.String(300), nullable=True)
    order_index: Mapped[int | None] = mapped_column(db.Integer, nullable=True)

    post: Mapped[Post] = relationship(back_populates="images")
