"""SQLAlchemy 엔진 / 세션 팩토리 초기화.

SQLite는 스레드 간 연결 공유를 허용하도록 설정한다
(저장소가 asyncio.to_thread 로 DB 작업을 실행하기 때문).
인메모리 SQLite는 StaticPool로 단일 연결을 유지한다.
"""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from blog_manager.infrastructure.database.models import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """DB URL로 엔진 생성.

    Args:
        database_url: SQLAlchemy URL (예: sqlite:///blog_manager.db, postgresql://...).
        echo: SQL 로그 출력 여부.
    """
    url = make_url(database_url)
    kwargs: dict = {"echo": echo}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **kwargs)
    logger.info(f"DB 엔진 생성: {url.render_as_string(hide_password=True)}")
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_schema(engine: Engine) -> None:
    """테이블이 없으면 생성."""
    Base.metadata.create_all(bind=engine)
    logger.info("DB 스키마 준비 완료")
