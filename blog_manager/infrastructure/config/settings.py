from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings


# ──────────────────────────────────────────
# 환경변수 기반 설정 (.env)
# ──────────────────────────────────────────
class Settings(BaseSettings):
    database_url: str = "sqlite:///blog_manager.db"
    database_echo: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# ──────────────────────────────────────────
# YAML 기반 앱 설정 (config/settings.yaml)
# ──────────────────────────────────────────
class WebConfig:
    def __init__(self, data: dict[str, Any]):
        self.host: str = data.get("host", "0.0.0.0")
        self.port: int = data.get("port", 8000)
        self.cors_origins: list[str] = data.get("cors_origins", ["http://localhost:3000"])


class LoggingConfig:
    def __init__(self, data: dict[str, Any]):
        self.level: str = str(data.get("level", "INFO")).upper()
        self.file: str | None = data.get("file", "logs/app.log")


class AppConfig:
    """YAML에서 로드된 전체 앱 설정."""

    def __init__(self, data: dict[str, Any]):
        self.name: str = data.get("app", {}).get("name", "Blog Manager")
        self.web = WebConfig(data.get("web", {}))
        self.logging = LoggingConfig(data.get("logging", {}))


def load_app_config(path: str = "config/settings.yaml") -> AppConfig:
    """YAML 설정 파일을 로드하여 AppConfig를 반환."""
    config_path = Path(path)
    if not config_path.exists():
        return AppConfig({})
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(data)
