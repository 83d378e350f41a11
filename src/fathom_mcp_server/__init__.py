"""Fathom MCP Server package.

This package provides a read-only MCP server exposing Fathom meetings,
AI summaries and transcripts via a set of tools. Every tool call is
stateless and re-fetches from the Fathom API; nothing is cached.

Tools:
- search_meetings: filter meetings by participant/title keywords and dates.
- fathom_get_summary: AI summary for one recording.
- fathom_get_transcript: speaker-attributed transcript for one recording.

Usage example:
    from fathom_mcp_server.server import main
    if __name__ == "__main__":
        main()

Note: Tools can also be imported and registered by an external MCP runtime.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
