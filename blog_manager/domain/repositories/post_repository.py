from __future__ import annotations

from typing import Protocol

from blog_manager.domain.entities import Post


class PostRepository(Protocol):
    """게시물 저장소 인터페이스 (의존성 역전)."""

    async def insert(self, post: Post) -> Post:
        """새 게시물 저장. 저장소가 id를 부여한 엔티티를 반환."""
        ...

    async def update(self, post: Post) -> Post:
        """기존 게시물 덮어쓰기. id가 없으면 PostNotFoundError."""
        ...

    async def delete(self, post_id: int) -> bool:
        """게시물 삭제. 실제로 삭제되었는지 반환."""
        ...

    async def get_by_id(self, post_id: int) -> Post | None: ...

    async def get_all(self) -> list[Post]: ...

    async def get_published_newest_first(self) -> list[Post]:
        """공개 게시물, 작성일 내림차순."""
        ...

    async def get_published_most_viewed(self) -> list[Post]:
        """공개 게시물, 조회수 내림차순."""
        ...

    async def find_by_author(self, author: str) -> list[Post]:
        """작성자 완전 일치 (대소문자 구분)."""
        ...

    async def search_title(self, text: str) -> list[Post]:
        """제목 부분 일치 (대소문자 무시)."""
        ...

    async def search_content(self, text: str) -> list[Post]: ...

    async def search_tags(self, text: str) -> list[Post]: ...

    async def count(self) -> int: ...

    async def count_published(self) -> int: ...

    async def count_by_author(self, author: str) -> int: ...
