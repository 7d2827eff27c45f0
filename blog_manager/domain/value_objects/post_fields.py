from __future__ import annotations

from blog_manager.domain.exceptions import InvalidInputError

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 10000
SUMMARY_MAX_LENGTH = 500  # 요청 스키마에서만 검사


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_title(title: str | None) -> None:
    """제목 검증: 필수, 최대 200자.

    길이는 공백 제거 전 원문 기준으로 센다.
    """
    if _is_blank(title):
        raise InvalidInputError("Title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise InvalidInputError(f"Title must be less than {TITLE_MAX_LENGTH} characters")


def validate_content(content: str | None) -> None:
    """본문 검증: 필수, 최대 10000자."""
    if _is_blank(content):
        raise InvalidInputError("Content is required")
    if len(content) > CONTENT_MAX_LENGTH:
        raise InvalidInputError(f"Content must be less than {CONTENT_MAX_LENGTH} characters")


def require_query(value: str | None, message: str) -> str:
    """검색어/작성자 검증. 앞뒤 공백을 제거한 값을 반환."""
    if _is_blank(value):
        raise InvalidInputError(message)
    return value.strip()
