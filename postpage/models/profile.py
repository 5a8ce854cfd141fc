from __future__ import annotations

from sqlalchemy.orm import Mapped, mapped_column, relationship

from postpage.extensions import db
from postpage.models import generate_hex_id


class Profile(db.Model):
    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(db.String(32), primary_key=True, default=generate_hex_id)
    display_name: Mapped[str] = mapped_column(db.String(120), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(db.String(500), nullable=True)

    posts: Mapped[list["Post"]] = relationship(back_populates="author")
