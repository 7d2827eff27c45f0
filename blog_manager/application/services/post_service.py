"""게시물 서비스.

검증, 타임스탬프 관리, 부분 업데이트 병합, not-found 처리를 담당한다.
저장소 인터페이스에만 의존하며, 구체 구현은 DI로 주입받는다.

조회 후 쓰기(view/update/toggle)에는 동시성 제어가 없다.
같은 id에 대한 동시 요청은 마지막 쓰기가 이긴다.
"""

from __future__ import annotations

import logging

from blog_manager.domain.entities import Post, PostPatch, utcnow
from blog_manager.domain.exceptions import PostNotFoundError
from blog_manager.domain.repositories.post_repository import PostRepository
from blog_manager.domain.value_objects.post_fields import (
    require_query,
    validate_content,
    validate_title,
)

logger = logging.getLogger(__name__)


class PostService:
    def __init__(self, post_repo: PostRepository):
        self._post_repo = post_repo

    # ─── 생성 / 조회 ───

    async def create(self, post: Post) -> Post:
        validate_title(post.title)
        validate_content(post.content)

        now = utcnow()
        post.created_at = now
        post.updated_at = now

        saved = await self._post_repo.insert(post)
        logger.info(f"게시물 생성: id={saved.id} '{saved.title}'")
        return saved

    async def get_by_id(self, post_id: int) -> Post:
        post = await self._post_repo.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def get_all(self) -> list[Post]:
        return await self._post_repo.get_all()

    async def get_all_published(self) -> list[Post]:
        return await self._post_repo.get_published_newest_first()

    async def get_most_popular(self) -> list[Post]:
        return await self._post_repo.get_published_most_viewed()

    async def view_by_id(self, post_id: int) -> Post:
        """조회수를 1 올리고 저장. 호출할 때마다 증가한다."""
        post = await self.get_by_id(post_id)
        post.view_count += 1
        return await self._post_repo.update(post)

    # ─── 수정 / 삭제 ───

    async def update(self, post_id: int, patch: PostPatch) -> Post:
        """부분 업데이트. patch에서 None이 아닌 필드만 덮어쓴다."""
        post = await self.get_by_id(post_id)

        if patch.title is not None:
            validate_title(patch.title)
            post.title = patch.title
        if patch.content is not None:
            validate_content(patch.content)
            post.content = patch.content
        if patch.summary is not None:
            post.summary = patch.summary
        if patch.author is not None:
            post.author = patch.author
        if patch.tags is not None:
            post.tags = patch.tags
        # False도 명시적 값으로 반영
        if patch.published is not None:
            post.published = patch.published

        self._touch(post)
        updated = await self._post_repo.update(post)
        logger.info(f"게시물 수정: id={post_id}")
        return updated

    async def delete(self, post_id: int) -> None:
        post = await self.get_by_id(post_id)
        await self._post_repo.delete(post.id)
        logger.info(f"게시물 삭제: id={post_id}")

    async def toggle_publish_status(self, post_id: int) -> Post:
        post = await self.get_by_id(post_id)
        post.published = not post.published
        self._touch(post)
        updated = await self._post_repo.update(post)
        logger.info(f"게시물 공개 상태 변경: id={post_id} published={updated.published}")
        return updated

    # ─── 검색 ───

    async def search_by_title(self, query: str | None) -> list[Post]:
        text = require_query(query, "Search title cannot be empty")
        return await self._post_repo.search_title(text)

    async def search_by_content(self, query: str | None) -> list[Post]:
        text = require_query(query, "Search content cannot be empty")
        return await self._post_repo.search_content(text)

    async def search_by_tags(self, query: str | None) -> list[Post]:
        text = require_query(query, "Search tag cannot be empty")
        return await self._post_repo.search_tags(text)

    async def get_posts_by_author(self, author: str | None) -> list[Post]:
        name = require_query(author, "Author name cannot be empty")
        return await self._post_repo.find_by_author(name)

    # ─── 통계 ───

    async def count_all(self) -> int:
        return await self._post_repo.count()

    async def count_published(self) -> int:
        return await self._post_repo.count_published()

    async def count_by_author(self, author: str | None) -> int:
        name = require_query(author, "Author name cannot be empty")
        return await self._post_repo.count_by_author(name)

    @staticmethod
    def _touch(post: Post) -> None:
        # updated_at >= created_at 유지
        post.updated_at = max(utcnow(), post.created_at)
