"""HTTP 요청/응답 스키마."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blog_manager.domain.entities import Post, PostPatch
from blog_manager.domain.value_objects.post_fields import (
    CONTENT_MAX_LENGTH,
    SUMMARY_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)


class CreatePostRequest(BaseModel):
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    content: str = Field(max_length=CONTENT_MAX_LENGTH)
    summary: Optional[str] = Field(default=None, max_length=SUMMARY_MAX_LENGTH)
    author: Optional[str] = None
    tags: Optional[str] = None
    published: bool = False

    def to_entity(self) -> Post:
        return Post(
            title=self.title,
            content=self.content,
            summary=self.summary,
            author=self.author,
            tags=self.tags,
            published=self.published,
        )


class UpdatePostRequest(BaseModel):
    """모든 필드 선택. 빠지거나 null인 필드는 기존 값 유지."""

    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = Field(default=None, max_length=CONTENT_MAX_LENGTH)
    summary: Optional[str] = Field(default=None, max_length=SUMMARY_MAX_LENGTH)
    author: Optional[str] = None
    tags: Optional[str] = None
    published: Optional[bool] = None

    def to_patch(self) -> PostPatch:
        return PostPatch(
            title=self.title,
            content=self.content,
            summary=self.summary,
            author=self.author,
            tags=self.tags,
            published=self.published,
        )


class PostResponse(BaseModel):
    """JSON 키는 camelCase (createdAt, viewCount ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    title: str
    content: str
    summary: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    published: bool
    view_count: int


class ErrorResponse(BaseModel):
    message: str
    status: int
    error: str
    timestamp: datetime
    path: str
