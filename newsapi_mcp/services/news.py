import logging

import requests
from pydantic import ValidationError

from newsapi_mcp.exceptions import AuthenticationError, IntegrationError, RateLimitError
from newsapi_mcp.models.news import (
    Article,
    ArticleSource,
    NewsSearchResult,
    NewsSource,
    SourcesResult,
)

NEWS_API_BASE = "https://newsapi.org/v2"

logger = logging.getLogger(__name__)


def _handle_response(resp: requests.Response) -> dict:
    if resp.status_code == 429:
        raise RateLimitError("News API rate limit exceeded. Try again shortly.")
    if resp.status_code in (401, 403):
        raise AuthenticationError("News API key is invalid. Check NEWS_API_KEY.")
    try:
        data = resp.json()
    except ValueError:
        raise IntegrationError(f"News API returned a malformed response ({resp.status_code})")
    if not isinstance(data, dict):
        raise IntegrationError("News API returned an unexpected response body")
    if data.get("status") == "error":
        code = data.get("code", "")
        message = data.get("message", "")
        if code == "rateLimited":
            raise RateLimitError(f"News API rate limited: {message}")
        if code in ("apiKeyInvalid", "apiKeyDisabled", "apiKeyExhausted", "apiKeyMissing"):
            raise AuthenticationError(f"News API key error: {message}")
        raise IntegrationError(f"News API error: {code} - {message}")
    if resp.status_code >= 400:
        raise IntegrationError(f"News API error ({resp.status_code}): {resp.text[:200]}")
    return data


def _parse_articles(data: dict) -> NewsSearchResult:
    articles = []
    for item in data.get("articles") or []:
        source = item.get("source") or {}
        articles.append(Article(
            source=ArticleSource(id=source.get("id"), name=source.get("name") or ""),
            author=item.get("author"),
            title=item.get("title") or "",
            description=item.get("description"),
            url=item.get("url") or "",
            image_url=item.get("urlToImage"),
            published_at=item.get("publishedAt"),
            content=item.get("content"),
        ))
    return NewsSearchResult(
        status=data.get("status", "ok"),
        total_results=data.get("totalResults") or 0,
        articles=articles,
    )


def _parse_sources(data: dict) -> SourcesResult:
    sources = [
        NewsSource(
            id=item.get("id"),
            name=item.get("name") or "",
            description=item.get("description"),
            url=item.get("url"),
            category=item.get("category"),
            language=item.get("language"),
            country=item.get("country"),
        )
        for item in data.get("sources") or []
    ]
    return SourcesResult(status=data.get("status", "ok"), sources=sources)


class NewsClient:
    """Thin client for the NewsAPI v2 endpoints.

    The API key is passed in once at construction and attached to every request.
    Failures surface as AuthenticationError, RateLimitError or IntegrationError.
    """

    def __init__(self, api_key: str, base_url: str = NEWS_API_BASE, session: requests.Session | None = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _get(self, endpoint: str, params: dict) -> dict:
        logger.debug("GET /%s %s", endpoint, params)
        try:
            resp = self.session.get(
                f"{self.base_url}/{endpoint}",
                params={**params, "apiKey": self.api_key},
            )
        except requests.RequestException as e:
            raise IntegrationError(str(e)) from e
        return _handle_response(resp)

    def search_articles(
        self,
        q: str,
        sort_by: str = "publishedAt",
        language: str = "en",
        page_size: int = 10,
        domains: str | None = None,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> NewsSearchResult:
        """Search all articles. sort_by: relevancy, popularity, publishedAt."""
        params = {"q": q, "sortBy": sort_by, "language": language, "pageSize": page_size}
        if domains:
            params["domains"] = domains
        if from_date:
            params["from"] = from_date
        if to_date:
            params["to"] = to_date
        data = self._get("everything", params)
        try:
            return _parse_articles(data)
        except (AttributeError, TypeError, ValidationError) as e:
            raise IntegrationError(f"Unexpected article payload: {e}") from e

    def top_headlines(
        self,
        country: str | None = "us",
        category: str | None = None,
        page_size: int = 10,
        q: str | None = None,
    ) -> NewsSearchResult:
        """Get top headlines. Country and category are only sent when given."""
        params = {"pageSize": page_size}
        if country:
            params["country"] = country
        if category:
            params["category"] = category
        if q:
            params["q"] = q
        data = self._get("top-headlines", params)
        try:
            return _parse_articles(data)
        except (AttributeError, TypeError, ValidationError) as e:
            raise IntegrationError(f"Unexpected article payload: {e}") from e

    def get_sources(self, category: str | None = None, country: str | None = None) -> SourcesResult:
        params = {}
        if category:
            params["category"] = category
        if country:
            params["country"] = country
        data = self._get("sources", params)
        try:
            return _parse_sources(data)
        except (AttributeError, TypeError, ValidationError) as e:
            raise IntegrationError(f"Unexpected sources payload: {e}") from e
