"""Pydantic models for upstream payloads and incoming search requests."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .pagination import parse_page


class ArticleSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None


class Article(BaseModel):
    """One article record as returned by the news API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: ArticleSource | None = None
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    url_to_image: str | None = Field(default=None, alias="urlToImage")
    published_at: datetime | None = Field(default=None, alias="publishedAt")
    content: str | None = None

    def formatted_published_date(self) -> str:
        """Render the publication date as e.g. ``January 2, 2006``."""
        if self.published_at is None:
            return ""
        return f"{self.published_at:%B} {self.published_at.day}, {self.published_at.year}"


class SearchResult(BaseModel):
    """One page of articles plus the upstream count of all matches."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: str = "ok"
    total_results: int = Field(..., alias="totalResults", ge=0)
    articles: tuple[Article, ...]


class SearchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = ""
    page: int = Field(1, ge=1)

    @classmethod
    def from_params(cls, q: str | None, page: str | None) -> "SearchRequest":
        return cls(query=q or "", page=parse_page(page))
