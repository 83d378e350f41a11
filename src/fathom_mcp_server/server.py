"""FastMCP server entrypoint.

Registers tools for the Fathom MCP Server. This module intentionally
keeps the tool implementations decoupled so they can be unit-tested
without the runtime: each registered tool only builds its input model,
awaits the plain tool function and converts the `ToolResponse` into an
MCP `CallToolResult`.
"""

import sys
from typing import Annotated, List, Optional

import dotenv
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from . import __version__
from .config import AppConfig, load_config
from .logging import configure_logging, get_logger
from .meeting_source import MeetingSource
from .schemas import (
    GetSummaryInput,
    GetTranscriptInput,
    SearchMeetingsInput,
    ToolResponse,
)
from .sources import create_meeting_source
from .tools import get_summary, get_transcript, search_meetings

logger = get_logger(__name__)

SERVER_NAME = "fathom-mcp"
SERVER_INSTRUCTIONS = (
    "A Model Context Protocol (MCP) server that integrates with Fathom AI's API "
    "to fetch meeting/call metadata, summarize meeting recordings and fetch "
    "transcripts where requested."
)

SEARCH_DESCRIPTION = (
    "Search and filter Fathom meetings by participant names, meeting title/description "
    "keywords, and/or date range. Returns metadata only (title, participants, dates, "
    "URLs, recordingId). Use recordingId with fathom_get_summary or "
    "fathom_get_transcript to get detailed content."
)
SUMMARY_DESCRIPTION = (
    "Given a recording ID from search_meetings, fetch the AI-generated summary of that "
    "meeting. Use this when the user wants a concise overview of meeting content."
)
TRANSCRIPT_DESCRIPTION = (
    "Given a recording ID from search_meetings, fetch the complete transcript with "
    "speaker names and timestamps. Use this when the user needs the full verbatim "
    "conversation details."
)
RECORDING_ID_DESCRIPTION = "The Fathom recording ID from search_meetings"


def to_call_tool_result(response: ToolResponse) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=response.text)],
        structuredContent=response.structured,
        isError=response.is_error,
    )


def register_tools(
    app: FastMCP, config: AppConfig, source: Optional[MeetingSource] = None
) -> MeetingSource:
    """Register the meeting tools on `app`.

    Creates a Fathom API source from `config` when none is given and
    returns the source the tools were bound to.
    """

    source = source if source is not None else create_meeting_source(config)

    @app.tool(name="search_meetings", description=SEARCH_DESCRIPTION)
    async def search_meetings_tool(
        participantKeywords: Annotated[
            Optional[List[str]],
            Field(
                description="Keywords to match against participant names/emails "
                "(e.g., ['John', 'smith@example.com'])"
            ),
        ] = None,
        titleKeywords: Annotated[
            Optional[List[str]],
            Field(
                description="Keywords to match against meeting titles or descriptions "
                "(e.g., ['standup', 'planning'])"
            ),
        ] = None,
        startDate: Annotated[
            Optional[str],
            Field(description="Filter meetings on or after this date (ISO format: YYYY-MM-DD)"),
        ] = None,
        endDate: Annotated[
            Optional[str],
            Field(description="Filter meetings on or before this date (ISO format: YYYY-MM-DD)"),
        ] = None,
    ) -> CallToolResult:
        params = SearchMeetingsInput(
            participant_keywords=participantKeywords,
            title_keywords=titleKeywords,
            start_date=startDate,
            end_date=endDate,
        )
        return to_call_tool_result(await search_meetings(config, source, params))

    @app.tool(name="fathom_get_summary", description=SUMMARY_DESCRIPTION)
    async def get_summary_tool(
        recordingId: Annotated[int, Field(description=RECORDING_ID_DESCRIPTION)],
    ) -> CallToolResult:
        params = GetSummaryInput(recording_id=recordingId)
        return to_call_tool_result(await get_summary(config, source, params))

    @app.tool(name="fathom_get_transcript", description=TRANSCRIPT_DESCRIPTION)
    async def get_transcript_tool(
        recordingId: Annotated[int, Field(description=RECORDING_ID_DESCRIPTION)],
    ) -> CallToolResult:
        params = GetTranscriptInput(recording_id=recordingId)
        return to_call_tool_result(await get_transcript(config, source, params))

    return source


def create_app(config: AppConfig, source: Optional[MeetingSource] = None) -> FastMCP:
    """Build the FastMCP application with all tools registered."""

    app = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)
    register_tools(app, config, source)
    return app


def main() -> None:
    """Run the FastMCP application over stdio.

    This function loads `.env` and configuration, configures logging and
    serves until interrupted. It is safe to import and call `main()` from
    other entrypoints.
    """

    dotenv.load_dotenv()
    config = load_config()
    configure_logging(config.log_level)
    app = create_app(config)

    logger.info("server starting", transport="stdio", version=__version__)
    try:
        # Serves until interrupted
        app.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("server disconnected")
    except Exception:
        logger.exception("fatal error in main")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
