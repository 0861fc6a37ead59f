from __future__ import annotations

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from lexpath_mcp.core.config import load_config
from lexpath_mcp.core.logs import get_logger, setup_logging
from lexpath_mcp.tools import (
    absolute_path,
    check_inside,
    join_paths,
    lexical_join_paths,
    normalize_path,
    parse_path_info,
    relative_path,
    rooted_join_path,
)

logger = get_logger(__name__)

mcp = FastMCP("lexpath-mcp")


@mcp.tool()
def parse_tool(path: str, platform: str | None = None) -> dict:
    return parse_path_info(path=path, platform=platform)


@mcp.tool()
def normalize_tool(path: str, platform: str | None = None) -> dict:
    return normalize_path(path=path, platform=platform)


@mcp.tool()
def lexical_join_tool(base: str, path: str, platform: str | None = None) -> dict:
    return lexical_join_paths(base=base, path=path, platform=platform)


@mcp.tool()
def join_tool(base: str, path: str, platform: str | None = None) -> dict:
    return join_paths(base=base, path=path, platform=platform)


@mcp.tool()
def relative_to_tool(path: str, base: str, platform: str | None = None) -> dict:
    return relative_path(path=path, base=base, platform=platform)


@mcp.tool()
def rooted_join_tool(base: str, path: str, platform: str | None = None) -> dict:
    return rooted_join_path(base=base, path=path, platform=platform)


@mcp.tool()
def absolute_tool(path: str, current: str | None = None, platform: str | None = None) -> dict:
    return absolute_path(path=path, current=current, platform=platform)


@mcp.tool()
def is_inside_tool(path: str, base: str, platform: str | None = None) -> dict:
    return check_inside(path=path, base=base, platform=platform)


def main() -> None:
    load_dotenv()
    cfg = load_config()
    setup_logging(cfg.log_level)
    logger.info("Starting lexpath-mcp (platform=%s, double_slash=%s)", cfg.platform.value, cfg.double_slash.value)
    mcp.run()


if __name__ == "__main__":
    main()
