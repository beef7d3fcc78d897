from pydantic import BaseModel


class ArticleSource(BaseModel):
    id: str | None = None
    name: str


class Article(BaseModel):
    source: ArticleSource
    author: str | None = None
    title: str
    description: str | None = None
    url: str
    image_url: str | None = None
    published_at: str | None = None
    content: str | None = None


class NewsSearchResult(BaseModel):
    status: str = "ok"
    total_results: int
    articles: list[Article]


class NewsSource(BaseModel):
    id: str | None = None
    name: str
    description: str | None = None
    url: str | None = None
    category: str | None = None
    language: str | None = None
    country: str | None = None


class SourcesResult(BaseModel):
    status: str = "ok"
    sources: list[NewsSource]
