"""Stdio hosting of the skill tools via the MCP low-level server."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, CallToolResult, ErrorData, TextContent, Tool

from tome.config import load_config, validate_config
from tome.config.model import TomeConfig
from tome.constants.mcp import MCP_SERVER_INSTRUCTIONS, MCP_SERVER_NAME, TOOL_LIST_SKILLS, TOOL_READ_SKILL
from tome.exceptions import ConfigError, ManifestEscapeError, TomeError
from tome.model import DiscoveredSkill
from tome.server.tools import ToolReply, list_skills, read_skill
from tome.sync.discovery import discover_all

logger = logging.getLogger(__name__)

TOOLS: list[Tool] = [
    Tool(
        name=TOOL_LIST_SKILLS,
        description="List all discovered skills with their source and path.",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name=TOOL_READ_SKILL,
        description="Read the SKILL.md contents of a skill by name.",
        inputSchema={
            "type": "object",
            "properties": {"name": {"type": "string", "description": "Skill name as shown by list_skills."}},
            "required": ["name"],
        },
    ),
]


def create_server(skills: Sequence[DiscoveredSkill]) -> Server:
    """Build a server exposing ``list_skills`` and ``read_skill`` over ``skills``."""
    server: Server = Server(MCP_SERVER_NAME, instructions=MCP_SERVER_INSTRUCTIONS)

    @server.list_tools()
    async def handle_list_tools() -> list[Tool]:
        return TOOLS

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        logger.debug("Tool call: %s", name)
        return _to_result(dispatch_tool(skills, name, arguments or {}))

    return server


def dispatch_tool(skills: Sequence[DiscoveredSkill], name: str, arguments: dict[str, Any]) -> ToolReply:
    """Route a tool call; escapes and bad arguments become MCP errors."""
    if name == TOOL_LIST_SKILLS:
        return list_skills(skills)
    if name == TOOL_READ_SKILL:
        skill_name = arguments.get("name")
        if not isinstance(skill_name, str):
            raise McpError(ErrorData(code=INVALID_PARAMS, message="read_skill requires a string 'name'"))
        try:
            return read_skill(skills, skill_name)
        except ManifestEscapeError as exc:
            logger.error("%s", exc)
            raise McpError(ErrorData(code=INTERNAL_ERROR, message=str(exc))) from exc
    raise McpError(ErrorData(code=INVALID_PARAMS, message=f"Unknown tool: {name}"))


def _to_result(reply: ToolReply) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=reply.text)], isError=reply.is_error)


async def run_server(skills: Sequence[DiscoveredSkill]) -> None:
    """Serve over stdin/stdout until the client disconnects."""
    server = create_server(skills)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def serve(config: TomeConfig) -> None:
    """Discover skills once, then host the tool server on stdio."""
    discovery = discover_all(config)
    logger.info("Serving %d skill(s) over stdio", len(discovery.skills))
    try:
        asyncio.run(run_server(discovery.skills))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


def main() -> int:
    """Entry point for the ``tome-mcp`` script."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s", stream=sys.stderr)
    try:
        config = load_config(home=Path.home())
        validate_config(config)
        serve(config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except TomeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
