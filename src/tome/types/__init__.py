"""Shared type aliases for Tome."""

from .common import JsonObject, JsonScalar, JsonValue, MethodName, SourceType

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "MethodName",
    "SourceType",
]
