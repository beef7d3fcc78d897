from functools import partial
from typing import Annotated, Literal

import anyio.to_thread
from fastmcp import FastMCP
from pydantic import Field

from newsapi_mcp.formatting import render_headlines, render_search, render_sources
from newsapi_mcp.services.news import NewsClient
from newsapi_mcp.tools import RemoteFetchTool

SERVER_NAME = "newsapi"
SERVER_VERSION = "1.0.0"

SortBy = Literal["relevancy", "popularity", "publishedAt"]
Category = Literal["business", "entertainment", "general", "health", "science", "sports", "technology"]
PageSize = Annotated[int, Field(strict=True, ge=1, le=100, description="Number of articles per page (max 100)")]


def build_tools(client: NewsClient) -> dict[str, RemoteFetchTool]:
    """Bind each tool's fetch and render steps to a NewsClient."""
    return {
        "search_articles": RemoteFetchTool(
            name="search_articles",
            action="searching articles",
            fetch=client.search_articles,
            render=lambda result, args: render_search(result, args["q"]),
        ),
        "get_top_headlines": RemoteFetchTool(
            name="get_top_headlines",
            action="fetching headlines",
            fetch=client.top_headlines,
            render=lambda result, args: render_headlines(result, args.get("category") or args.get("country")),
        ),
        "get_sources": RemoteFetchTool(
            name="get_sources",
            action="fetching sources",
            fetch=client.get_sources,
            render=lambda result, args: render_sources(result),
        ),
    }


def create_server(client: NewsClient) -> FastMCP:
    """Register the three news tools. Remote calls run in a worker thread."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    tools = build_tools(client)

    @mcp.tool
    async def search_articles(
        q: Annotated[str, Field(description="Search keywords or phrase")],
        sortBy: Annotated[SortBy, Field(description="Sort order: relevancy, popularity, or publishedAt")] = "publishedAt",
        language: Annotated[str, Field(description="Language code (e.g., 'en', 'es', 'fr')")] = "en",
        pageSize: PageSize = 10,
        domains: Annotated[str | None, Field(description="Comma-separated domains to restrict the search to (e.g., 'bbc.co.uk,techcrunch.com')")] = None,
        fromDate: Annotated[str | None, Field(description="Oldest article date, ISO-8601 (e.g., '2025-01-01')")] = None,
        toDate: Annotated[str | None, Field(description="Newest article date, ISO-8601 (e.g., '2025-01-31')")] = None,
    ) -> str:
        """Search for news articles by keyword or phrase"""
        return await anyio.to_thread.run_sync(partial(
            tools["search_articles"],
            q=q, sort_by=sortBy, language=language, page_size=pageSize,
            domains=domains, from_date=fromDate, to_date=toDate,
        ))

    @mcp.tool
    async def get_top_headlines(
        country: Annotated[str, Field(description="Two-letter ISO country code (e.g., 'us', 'gb', 'de')")] = "us",
        category: Annotated[Category | None, Field(description="News category")] = None,
        pageSize: PageSize = 10,
        q: Annotated[str | None, Field(description="Keywords to filter headlines by")] = None,
    ) -> str:
        """Get top headlines from a specific country or category"""
        return await anyio.to_thread.run_sync(partial(
            tools["get_top_headlines"], country=country, category=category, page_size=pageSize, q=q,
        ))

    @mcp.tool
    async def get_sources(
        category: Annotated[Category | None, Field(description="Filter by category")] = None,
        country: Annotated[str | None, Field(description="Filter by country code (e.g., 'us', 'gb')")] = None,
    ) -> str:
        """Get available news sources, optionally filtered by category or country"""
        return await anyio.to_thread.run_sync(partial(tools["get_sources"], category=category, country=country))

    return mcp
