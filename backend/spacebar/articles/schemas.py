# backend/spacebar/articles/schemas.py

from typing import List

from pydantic import BaseModel, Field


class Article(BaseModel):
    """
    ニュース記事 1件分。
    """
    slug: str = Field(..., min_length=1, description="URL に使う記事の識別子")
    title: str = Field(..., description="記事タイトル")
    author: str = Field(..., description="著者名")
    content: str = Field(..., description="本文（プレーンテキスト）")
    comments: List[str] = Field(default_factory=list, description="コメント一覧")
    hearts: int = Field(0, ge=0, description="いいね（ハート）数")


class HeartResponse(BaseModel):
    """
    /news/{slug}/heart のレスポンスボディ。
    """
    hearts: int = Field(..., ge=0, description="更新後のハート数")
