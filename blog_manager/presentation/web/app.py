"""FastAPI 웹 애플리케이션 팩토리."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_manager.infrastructure.config.container import Container
from blog_manager.presentation.web.errors import register_exception_handlers
from blog_manager.presentation.web.routes import posts


def create_app(container: Container) -> FastAPI:
    app = FastAPI(title=container.config.name, version="0.1.0")

    # 컨테이너를 앱 state에 저장
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.config.web.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(posts.router, prefix="/api")

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app
