"""PostRepository의 SQLAlchemy 구현.

테이블: 'blog_posts'
호출마다 세션을 열고 그 안에서 커밋한다. 블로킹 DB 작업은 asyncio.to_thread로 실행.
"""

from __future__ import annotations

import asyncio
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import InstrumentedAttribute, Session, sessionmaker

from blog_manager.domain.entities import Post
from blog_manager.domain.exceptions import PostNotFoundError
from blog_manager.infrastructure.database.models import PostRow

# ─── 도메인 엔티티 ↔ ORM 행 변환 ───


def _post_to_dict(post: Post) -> dict[str, Any]:
    return {
        "title": post.title,
        "content": post.content,
        "summary": post.summary,
        "author": post.author,
        "tags": post.tags,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "published": post.published,
        "view_count": post.view_count,
    }


def _post_from_row(row: PostRow) -> Post:
    return Post(
        id=row.id,
        title=row.title,
        content=row.content,
        summary=row.summary,
        author=row.author,
        tags=row.tags,
        created_at=row.created_at,
        updated_at=row.updated_at,
        published=bool(row.published),
        view_count=row.view_count or 0,
    )


class SqlAlchemyPostRepository:
    """SQLAlchemy 기반 PostRepository 구현."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    async def insert(self, post: Post) -> Post:
        def _insert():
            with self._session_factory() as session:
                row = PostRow(**_post_to_dict(post))
                session.add(row)
                session.commit()
                post.id = row.id
                return _post_from_row(row)

        return await asyncio.to_thread(_insert)

    async def update(self, post: Post) -> Post:
        def _update():
            with self._session_factory() as session:
                row = session.get(PostRow, post.id) if post.id is not None else None
                if row is None:
                    raise PostNotFoundError(post.id)
                for key, value in _post_to_dict(post).items():
                    setattr(row, key, value)
                session.commit()
                return _post_from_row(row)

        return await asyncio.to_thread(_update)

    async def delete(self, post_id: int) -> bool:
        def _delete():
            with self._session_factory() as session:
                row = session.get(PostRow, post_id)
                if row is None:
                    return False
                session.delete(row)
                session.commit()
                return True

        return await asyncio.to_thread(_delete)

    async def get_by_id(self, post_id: int) -> Post | None:
        def _get():
            with self._session_factory() as session:
                row = session.get(PostRow, post_id)
                return _post_from_row(row) if row is not None else None

        return await asyncio.to_thread(_get)

    async def get_all(self) -> list[Post]:
        return await self._find(select(PostRow).order_by(PostRow.id))

    async def get_published_newest_first(self) -> list[Post]:
        stmt = (
            select(PostRow)
            .where(PostRow.published.is_(True))
            .order_by(PostRow.created_at.desc(), PostRow.id.desc())
        )
        return await self._find(stmt)

    async def get_published_most_viewed(self) -> list[Post]:
        stmt = (
            select(PostRow)
            .where(PostRow.published.is_(True))
            .order_by(PostRow.view_count.desc(), PostRow.id)
        )
        return await self._find(stmt)

    async def find_by_author(self, author: str) -> list[Post]:
        stmt = select(PostRow).where(PostRow.author == author).order_by(PostRow.id)
        return await self._find(stmt)

    async def search_title(self, text: str) -> list[Post]:
        return await self._search(PostRow.title, text)

    async def search_content(self, text: str) -> list[Post]:
        return await self._search(PostRow.content, text)

    async def search_tags(self, text: str) -> list[Post]:
        return await self._search(PostRow.tags, text)

    async def count(self) -> int:
        return await self._count()

    async def count_published(self) -> int:
        return await self._count(PostRow.published.is_(True))

    async def count_by_author(self, author: str) -> int:
        return await self._count(PostRow.author == author)

    # ─── 내부 헬퍼 ───

    async def _find(self, stmt) -> list[Post]:
        def _run():
            with self._session_factory() as session:
                return [_post_from_row(row) for row in session.scalars(stmt)]

        return await asyncio.to_thread(_run)

    async def _search(self, column: InstrumentedAttribute, text: str) -> list[Post]:
        # 대소문자 무시 부분 일치. %, _ 는 문자 그대로 매칭
        stmt = (
            select(PostRow)
            .where(column.icontains(text, autoescape=True))
            .order_by(PostRow.id)
        )
        return await self._find(stmt)

    async def _count(self, *criteria) -> int:
        def _run():
            with self._session_factory() as session:
                stmt = select(func.count()).select_from(PostRow).where(*criteria)
                return session.scalar(stmt) or 0

        return await asyncio.to_thread(_run)
