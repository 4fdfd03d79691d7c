"""MCP tool server exposing discovered skills."""

from tome.server.tools import ToolReply, list_skills, read_skill

__all__ = ["ToolReply", "list_skills", "read_skill"]
