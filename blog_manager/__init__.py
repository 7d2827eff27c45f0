"""Blog Manager: 블로그 게시물 CRUD / 검색 / 통계 REST API."""
