"""의존성 주입 컨테이너.

모든 의존성 조립은 최외곽(Composition Root)에서 이루어진다.
이 컨테이너가 설정에 따라 구체 구현을 생성하고 서비스에 주입한다.
"""

from __future__ import annotations

from sqlalchemy import Engine

from blog_manager.application.services.post_service import PostService
from blog_manager.infrastructure.config.settings import AppConfig, Settings
from blog_manager.infrastructure.database.engine import build_session_factory
from blog_manager.infrastructure.database.repositories.post_repo import SqlAlchemyPostRepository


class Container:
    """애플리케이션 의존성 컨테이너."""

    def __init__(
        self,
        settings: Settings,
        app_config: AppConfig,
        engine: Engine,
    ):
        self.settings = settings
        self.config = app_config
        self.engine = engine
        self.session_factory = build_session_factory(engine)

        # ─── Repositories (SQLAlchemy) ───
        self.post_repo = SqlAlchemyPostRepository(self.session_factory)

        # ─── Services ───
        self.post_service = PostService(self.post_repo)
