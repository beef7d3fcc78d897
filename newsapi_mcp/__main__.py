from newsapi_mcp.main import run

run()
