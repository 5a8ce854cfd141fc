from __future__ import annotations

from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field


class AuthorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    display_name: str
    avatar_url: Optional[str] = None


class PostImageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    image_url: str
    alt_text: Optional[str] = None
    order_index: Optional[int] = None


class PostDetail(BaseModel):
    """Everything the post page renders, with the gallery already ordered."""

    id: str
    title: str
    description: str
    content: str
    featured_image_url: Optional[str] = None
    created_at: datetime
    date: str
    slug: str
    author: AuthorOut
    images: List[PostImageOut] = Field(default_factory=list)
