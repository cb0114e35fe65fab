# backend/spacebar/articles/router.py
"""
記事表示用の FastAPI ルーター定義。

- GET  /news/{slug}
- POST /news/{slug}/heart
"""

from fastapi import APIRouter, Depends, HTTPException, status

from spacebar.container import get_container

from .schemas import Article, HeartResponse
from .service import ArticleNotFoundError, ArticleService

router = APIRouter(prefix="/news", tags=["articles"])


def get_article_service() -> ArticleService:
    return get_container().resolve(ArticleService)


@router.get("/{slug}", response_model=Article, summary="記事の表示")
def show_article(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> Article:
    try:
        return service.get_article(slug)
    except ArticleNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.post("/{slug}/heart", response_model=HeartResponse, summary="記事にハートを付ける")
def toggle_article_heart(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> HeartResponse:
    """
    ハート数を 1 増やして、更新後の値を返す。
    """
    try:
        hearts = service.toggle_heart(slug)
    except ArticleNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc

    return HeartResponse(hearts=hearts)
