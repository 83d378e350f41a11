"""Cursor pagination over the meetings list endpoint.

`fetch_all_meetings` drains every page into memory. A failed page ends
the loop: pages fetched so far are kept and the result is flagged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .logging import get_logger
from .meeting_source import MeetingSource
from .schemas import Meeting

logger = get_logger(__name__)


@dataclass
class AggregationResult:
    meetings: List[Meeting] = field(default_factory=list)
    had_error: bool = False


async def fetch_all_meetings(
    source: MeetingSource,
    include_summary: bool = False,
    include_transcript: bool = False,
) -> AggregationResult:
    """Fetch all meetings visible to the API key, page by page.

    Args:
        source: Upstream meeting source.
        include_summary: Embed AI summaries in each meeting (larger pages).
        include_transcript: Embed transcripts in each meeting (much larger pages).

    Returns:
        Meetings in upstream order, not de-duplicated, plus whether a page
        request failed. Never raises for upstream failures and never retries.
    """

    result = AggregationResult()
    cursor = ""
    has_more_pages = True
    pages = 0

    while has_more_pages:
        try:
            page = await source.list_meetings(
                cursor=cursor,
                include_summary=include_summary,
                include_transcript=include_transcript,
            )
        except Exception as exc:
            logger.error(
                "meeting page fetch failed",
                page=pages + 1,
                fetched=len(result.meetings),
                error=str(exc),
            )
            result.had_error = True
            break

        pages += 1
        result.meetings.extend(page.items)
        # A truthy cursor continues even if the page was empty
        cursor = page.next_cursor or ""
        has_more_pages = bool(cursor)

    logger.debug(
        "meetings aggregated",
        pages=pages,
        count=len(result.meetings),
        had_error=result.had_error,
    )
    return result
