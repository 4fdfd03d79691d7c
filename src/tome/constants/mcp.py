"""Constants for MCP registration and the stdio tool server."""

from __future__ import annotations

MCP_SERVERS_KEY: str = "mcpServers"
MCP_SERVER_KEY: str = "tome"
MCP_SERVER_COMMAND: str = "tome-mcp"
MCP_SERVER_NAME: str = "tome-mcp"
MCP_SERVER_INSTRUCTIONS: str = "Tome MCP server: exposes discovered AI coding skills for reading"

MCP_CONFIG_TEMP_PREFIX: str = ".tmp-tome-"
MCP_CONFIG_TEMP_SUFFIX: str = ".json"

TOOL_LIST_SKILLS: str = "list_skills"
TOOL_READ_SKILL: str = "read_skill"
