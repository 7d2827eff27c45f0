"""게시물 REST API 라우트.

고정 경로(/published, /search/..., /author/... 등)는 /{post_id} 보다 먼저 등록한다.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from blog_manager.application.services.post_service import PostService
from blog_manager.domain.entities import Post
from blog_manager.presentation.web.schemas import (
    CreatePostRequest,
    PostResponse,
    UpdatePostRequest,
)

router = APIRouter(prefix="/posts", tags=["posts"])

# DB INTEGER(64비트) 범위 밖의 id는 400으로 거절
PostId = Annotated[int, Path(ge=1, le=2**63 - 1)]


def _get_service(request: Request) -> PostService:
    return request.app.state.container.post_service


def _to_response(post: Post) -> PostResponse:
    return PostResponse.model_validate(post)


def _to_responses(posts: list[Post]) -> list[PostResponse]:
    return [_to_response(p) for p in posts]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(request: Request, body: CreatePostRequest):
    post = await _get_service(request).create(body.to_entity())
    return _to_response(post)


@router.get("", response_model=list[PostResponse])
async def get_all_posts(request: Request):
    return _to_responses(await _get_service(request).get_all())


@router.get("/published", response_model=list[PostResponse])
async def get_published_posts(request: Request):
    """공개 게시물, 최신순."""
    return _to_responses(await _get_service(request).get_all_published())


@router.get("/popular", response_model=list[PostResponse])
async def get_most_popular_posts(request: Request):
    """공개 게시물, 조회수순."""
    return _to_responses(await _get_service(request).get_most_popular())


# ─── 검색 ───


@router.get("/search/title", response_model=list[PostResponse])
async def search_by_title(request: Request, q: str | None = None):
    return _to_responses(await _get_service(request).search_by_title(q))


@router.get("/search/content", response_model=list[PostResponse])
async def search_by_content(request: Request, q: str | None = None):
    return _to_responses(await _get_service(request).search_by_content(q))


@router.get("/search/tags", response_model=list[PostResponse])
async def search_by_tags(request: Request, q: str | None = None):
    return _to_responses(await _get_service(request).search_by_tags(q))


@router.get("/author/{author}", response_model=list[PostResponse])
async def get_posts_by_author(request: Request, author: str):
    return _to_responses(await _get_service(request).get_posts_by_author(author))


# ─── 통계 ───


@router.get("/analytics/total", response_model=int)
async def get_total_posts_count(request: Request):
    return await _get_service(request).count_all()


@router.get("/analytics/published", response_model=int)
async def get_published_posts_count(request: Request):
    return await _get_service(request).count_published()


@router.get("/analytics/author/{author}", response_model=int)
async def get_posts_count_by_author(request: Request, author: str):
    return await _get_service(request).count_by_author(author)


# ─── 단건 ───


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(request: Request, post_id: PostId):
    return _to_response(await _get_service(request).get_by_id(post_id))


@router.get("/{post_id}/view", response_model=PostResponse)
async def view_post(request: Request, post_id: PostId):
    """조회수 증가 후 반환."""
    return _to_response(await _get_service(request).view_by_id(post_id))


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(request: Request, post_id: PostId, body: UpdatePostRequest):
    post = await _get_service(request).update(post_id, body.to_patch())
    return _to_response(post)


@router.put("/{post_id}/publish", response_model=PostResponse)
async def toggle_publish_status(request: Request, post_id: PostId):
    return _to_response(await _get_service(request).toggle_publish_status(post_id))


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(request: Request, post_id: PostId):
    await _get_service(request).delete(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
