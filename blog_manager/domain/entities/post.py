from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """DB 저장용 naive UTC 현재 시각."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class Post:
    """블로그 게시물 도메인 엔티티."""

    title: str
    content: str

    id: Optional[int] = None
    summary: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[str] = None  # 자유 형식 문자열 (예: "python,fastapi")

    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    published: bool = False
    view_count: int = 0


@dataclass
class PostPatch:
    """부분 업데이트 요청. None인 필드는 '변경 없음'을 의미한다."""

    title: Optional[str] = None
    content: Optional[str] = None
    summary: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[str] = None
    published: Optional[bool] = None
