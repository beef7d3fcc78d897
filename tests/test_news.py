import pytest

from newsapi_mcp.config import get_settings
from newsapi_mcp.models.news import Article, NewsSearchResult, SourcesResult
from newsapi_mcp.services.news import NewsClient

requires_news = pytest.mark.skipif(
    not get_settings().news_api_key,
    reason="News API key not configured — set NEWS_API_KEY in the environment",
)


@pytest.fixture
def live_client():
    settings = get_settings()
    return NewsClient(settings.news_api_key, base_url=settings.news_api_base_url)


@requires_news
class TestTopHeadlines:
    def test_us_headlines(self, live_client):
        result = live_client.top_headlines(country="us", page_size=5)
        assert isinstance(result, NewsSearchResult)
        assert len(result.articles) <= 5
        for article in result.articles:
            assert isinstance(article, Article)
            assert article.url

    def test_category_filter(self, live_client):
        result = live_client.top_headlines(country="us", category="technology", page_size=5)
        assert isinstance(result.articles, list)


@requires_news
class TestSearchArticles:
    def test_search(self, live_client):
        result = live_client.search_articles("artificial intelligence", page_size=5)
        assert result.total_results > 0
        assert len(result.articles) > 0
        assert result.articles[0].title

    def test_sort_by_relevancy(self, live_client):
        result = live_client.search_articles("climate change", sort_by="relevancy", page_size=5)
        assert isinstance(result, NewsSearchResult)


@requires_news
class TestSources:
    def test_sources(self, live_client):
        result = live_client.get_sources(category="technology")
        assert isinstance(result, SourcesResult)
        assert all(s.category == "technology" for s in result.sources)
