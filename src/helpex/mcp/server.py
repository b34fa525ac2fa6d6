from __future__ import annotations

import logging
from typing import Any

from helpex.config import get_settings
from helpex.mcp.tools import HelpexCore

logger = logging.getLogger(__name__)


def _build_server():
    # Using the standard MCP Python SDK (mcp) if installed.
    from mcp.server.fastmcp import FastMCP

    settings = get_settings()
    core = HelpexCore(settings)
    core.start()

    mcp = FastMCP("helpex")

    @mcp.tool(name="helpex.get_info")
    def get_info() -> dict:
        return core.get_info()

    @mcp.tool(name="helpex.suggest")
    def suggest(text: str) -> dict:
        return core.suggest(text)

    @mcp.tool(name="helpex.feedback")
    def feedback(kind: str, payload: dict[str, Any] | None = None) -> dict:
        return core.feedback(kind, payload)

    return mcp, settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    mcp, settings = _build_server()

    transport = (settings.mcp_transport or "stdio").lower()
    logger.info("helpex MCP starting transport=%s help_path=%s", transport, settings.help_path)
    if transport == "sse":
        logger.info("helpex MCP SSE listening on http://%s:%s", settings.mcp_host, settings.mcp_port)
        mcp.settings.host = settings.mcp_host
        mcp.settings.port = settings.mcp_port
        mcp.run(transport="sse")
    else:
        logger.info("helpex MCP stdio ready (waiting for MCP client)")
        mcp.run()


if __name__ == "__main__":
    main()
