import asyncio

import pytest
from unittest.mock import MagicMock

from fastmcp import Client

from newsapi_mcp.services.news import NewsClient


# --- Canned API responses ---

NEWS_API_ARTICLE_A = {
    "source": {"id": "bbc-news", "name": "BBC News"},
    "author": "Jane Doe",
    "title": "Climate talks reach agreement",
    "description": "Negotiators agreed on a new framework.",
    "url": "https://www.bbc.co.uk/news/climate-1",
    "urlToImage": "https://www.bbc.co.uk/img/climate-1.jpg",
    "publishedAt": "2025-01-15T10:30:00Z",
    "content": "Negotiators agreed on a new framework after two weeks...",
}

NEWS_API_ARTICLE_B = {
    "source": {"id": None, "name": "Example Times"},
    "author": None,
    "title": "Sea levels rising faster",
    "description": None,
    "url": "https://example.com/sea-levels",
    "urlToImage": None,
    "publishedAt": "2025-02-03T08:00:00Z",
    "content": None,
}

NEWS_API_EVERYTHING = {
    "status": "ok",
    "totalResults": 2,
    "articles": [NEWS_API_ARTICLE_A, NEWS_API_ARTICLE_B],
}

NEWS_API_EMPTY = {"status": "ok", "totalResults": 0, "articles": []}

NEWS_API_SOURCE = {
    "id": "bbc-news",
    "name": "BBC News",
    "description": "Use BBC News for up-to-the-minute news.",
    "url": "http://www.bbc.co.uk/news",
    "category": "general",
    "language": "en",
    "country": "gb",
}

NEWS_API_SOURCES = {
    "status": "ok",
    "sources": [
        NEWS_API_SOURCE,
        {
            "id": "techcrunch",
            "name": "TechCrunch",
            "description": "TechCrunch is a leading technology media property.",
            "url": "https://techcrunch.com",
            "category": "technology",
            "language": "en",
            "country": "us",
        },
    ],
}


def make_response(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    if isinstance(json_data, Exception):
        resp.json.side_effect = json_data
    else:
        resp.json.return_value = json_data
    resp.text = text
    return resp


def call_tool(server, name: str, arguments: dict):
    """Call a tool through an in-memory MCP client; returns the raw CallToolResult."""
    async def _call():
        async with Client(server) as client:
            return await client.call_tool_mcp(name, arguments)
    return asyncio.run(_call())


def list_tools(server):
    async def _list():
        async with Client(server) as client:
            return await client.list_tools()
    return asyncio.run(_list())


@pytest.fixture
def mock_session():
    """Stand-in for requests.Session; set `.get.return_value` per test."""
    session = MagicMock()
    session.get.return_value = make_response(200, NEWS_API_EVERYTHING)
    return session


@pytest.fixture
def news_client(mock_session):
    return NewsClient("test-key", session=mock_session)
