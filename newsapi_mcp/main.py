import logging
import sys

from newsapi_mcp.config import get_settings, load_api_key
from newsapi_mcp.mcp_server import create_server
from newsapi_mcp.services.news import NewsClient

logger = logging.getLogger("newsapi_mcp")


def configure_logging(level: str) -> None:
    # stdout carries the MCP protocol; logs go to stderr only.
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run():
    settings = get_settings()
    configure_logging(settings.log_level)
    api_key = load_api_key(settings)

    client = NewsClient(api_key, base_url=settings.news_api_base_url)
    mcp = create_server(client)
    try:
        logger.info("NewsAPI MCP Server running on stdio")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    run()
