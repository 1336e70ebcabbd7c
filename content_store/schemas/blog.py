from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PostMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    date: str  # ISO 8601, UTC, millisecond precision
    description: Optional[str] = None
    draft: bool = False
    tags: Optional[List[str]] = None


class PostData(PostMeta):
    contentHtml: str


class LoadedPost(BaseModel):
    """A validated post paired with its raw markdown body."""

    model_config = ConfigDict(frozen=True)

    meta: PostMeta
    content: str


class AdjacentPosts(BaseModel):
    previous: Optional[PostMeta] = None
    next: Optional[PostMeta] = None


class PaginatedPosts(BaseModel):
    page: int
    perPage: int
    total: int
    totalPages: int
    items: List[PostMeta] = Field(default_factory=list)
