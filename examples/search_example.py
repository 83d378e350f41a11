"""Example: Calling the tools without an MCP client

This script demonstrates how to search meetings and fetch a transcript
from the Fathom API using the same functions the MCP tools call.
"""

import asyncio
import sys

import dotenv

from fathom_mcp_server.config import load_config
from fathom_mcp_server.logging import configure_logging
from fathom_mcp_server.schemas import GetTranscriptInput, SearchMeetingsInput
from fathom_mcp_server.sources import create_meeting_source
from fathom_mcp_server.tools import get_transcript, search_meetings


async def run(keyword: str) -> int:
    config = load_config()
    configure_logging(config.log_level)
    if config.api_key_value is None:
        print("Error: FATHOM_API_KEY is not set")
        return 1

    source = create_meeting_source(config)
    try:
        result = await search_meetings(
            config, source, SearchMeetingsInput(title_keywords=[keyword])
        )
        print(result.text)
        if result.is_error:
            print("Warning: meeting list is incomplete")

        meetings = (result.structured or {}).get("meetings", [])
        if not meetings:
            return 0

        first = meetings[0]["recordingId"]
        transcript = await get_transcript(
            config, source, GetTranscriptInput(recording_id=first)
        )
        print(f"\nTranscript of recording {first}:")
        print(transcript.text)
        return 1 if transcript.is_error else 0
    finally:
        await source.aclose()


if __name__ == "__main__":
    dotenv.load_dotenv()
    keyword = sys.argv[1] if len(sys.argv) > 1 else "standup"
    sys.exit(asyncio.run(run(keyword)))
