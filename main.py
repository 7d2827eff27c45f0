"""Blog Manager 엔트리포인트.

1. 설정 로드 (.env + config/settings.yaml)
2. 로깅 설정
3. DB 엔진 생성 및 스키마 준비
4. 의존성 컨테이너 조립
5. 웹 서버 시작
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import uvicorn

from blog_manager.infrastructure.config.container import Container
from blog_manager.infrastructure.config.settings import AppConfig, Settings, load_app_config
from blog_manager.infrastructure.database.engine import build_engine, init_schema
from blog_manager.presentation.web.app import create_app

logger = logging.getLogger(__name__)


def setup_logging(config: AppConfig) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.logging.file:
        log_path = Path(config.logging.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def run_server(settings: Settings, config: AppConfig, host: str | None, port: int | None) -> None:
    """메인 서버 실행."""
    engine = build_engine(settings.database_url, echo=settings.database_echo)
    init_schema(engine)

    container = Container(settings=settings, app_config=config, engine=engine)
    app = create_app(container)

    host = host or config.web.host
    port = port or config.web.port
    logger.info(f"서버 시작: http://{host}:{port}")

    try:
        uvicorn.run(app, host=host, port=port, log_level=config.logging.level.lower())
    finally:
        engine.dispose()


def run_init_db(settings: Settings) -> None:
    """테이블만 생성하고 종료."""
    engine = build_engine(settings.database_url, echo=settings.database_echo)
    try:
        init_schema(engine)
    finally:
        engine.dispose()
    print("DB 스키마 생성 완료")


def main() -> None:
    parser = argparse.ArgumentParser(description="Blog Manager REST API")
    parser.add_argument("--config", default="config/settings.yaml", help="YAML 설정 파일 경로")
    subparsers = parser.add_subparsers(dest="command", help="실행 명령")

    # serve 명령
    serve_parser = subparsers.add_parser("serve", help="웹 서버 시작")
    serve_parser.add_argument("--host", default=None, help="바인드 주소 (기본: 설정 파일)")
    serve_parser.add_argument("--port", type=int, default=None, help="포트 (기본: 설정 파일)")

    # init-db 명령
    subparsers.add_parser("init-db", help="DB 테이블 생성")

    args = parser.parse_args()

    settings = Settings()
    config = load_app_config(args.config)
    setup_logging(config)

    if args.command == "serve":
        run_server(settings, config, args.host, args.port)
    elif args.command == "init-db":
        run_init_db(settings)
    else:
        parser.print_help()
        print("\n사용 방법:")
        print("  python main.py init-db              # 테이블 생성")
        print("  python main.py serve                # 서버 시작")
        print("  python main.py serve --port 8080    # 포트 지정")


if __name__ == "__main__":
    main()
