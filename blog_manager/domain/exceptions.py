"""도메인 레이어 예외 정의."""


class DomainError(Exception):
    """도메인 레이어 최상위 예외."""


class PostNotFoundError(DomainError):
    """요청한 id의 게시물이 없을 때."""

    def __init__(self, post_id: int):
        self.post_id = post_id
        super().__init__(f"Blog post not found with id: {post_id}")


class InvalidInputError(DomainError):
    """필수 필드 누락, 길이 초과, 빈 검색어 등 입력값 오류."""
