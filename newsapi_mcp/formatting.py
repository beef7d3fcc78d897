"""Plain-text renderers for tool results."""

from datetime import datetime

from newsapi_mcp.models.news import Article, NewsSearchResult, NewsSource, SourcesResult

ARTICLE_DIVIDER = "\n---\n"


def format_date(published_at: str | None) -> str:
    """Render an ISO-8601 timestamp as an en-US calendar date (M/D/YYYY)."""
    if not published_at:
        return "Unknown"
    try:
        dt = datetime.fromisoformat(published_at.replace("Z", "+00:00"))
    except ValueError:
        return published_at
    return f"{dt.month}/{dt.day}/{dt.year}"


def format_article(index: int, article: Article) -> str:
    return (
        f"\n{index}. **{article.title}**\n"
        f"   Source: {article.source.name}\n"
        f"   Author: {article.author or 'Unknown'}\n"
        f"   Published: {format_date(article.published_at)}\n"
        f"   Description: {article.description or 'N/A'}\n"
        f"   URL: {article.url}\n"
    )


def format_articles(articles: list[Article]) -> str:
    if not articles:
        return "No articles found."
    return ARTICLE_DIVIDER.join(format_article(i, a) for i, a in enumerate(articles, start=1))


def format_source(source: NewsSource) -> str:
    return (
        f"• **{source.name}** ({source.id})\n"
        f"  Category: {source.category or 'Unknown'} | Language: {source.language or 'Unknown'} | Country: {source.country or 'Unknown'}\n"
        f"  {source.description or ''}"
    )


def format_sources(sources: list[NewsSource]) -> str:
    if not sources:
        return "No sources found."
    return "\n\n".join(format_source(s) for s in sources)


def render_search(result: NewsSearchResult, q: str) -> str:
    return f'Found {result.total_results} articles matching "{q}":\n\n{format_articles(result.articles)}'


def render_headlines(result: NewsSearchResult, label: str | None) -> str:
    return f"Top headlines for {label}:\n\n{format_articles(result.articles)}"


def render_sources(result: SourcesResult) -> str:
    return f"Available news sources:\n\n{format_sources(result.sources)}"


def format_error(action: str, error: BaseException) -> str:
    """Error text returned to the host in place of a result."""
    message = str(error) or "Unknown error"
    return f"Error {action}: {message}"
