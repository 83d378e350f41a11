"""MCP tools for searching meetings and fetching summaries and transcripts.

Each tool is exposed as a plain async function to facilitate testing.
An MCP runtime adapter (see `server.py`) registers these with the
FastMCP runtime. The tool functions return `ToolResponse` models.
"""

from .meetings import get_summary, get_transcript, search_meetings

__all__ = [
    "search_meetings",
    "get_summary",
    "get_transcript",
]
