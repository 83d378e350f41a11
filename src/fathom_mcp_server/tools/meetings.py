"""Meetings-related tool functions.

These functions implement the read-only meetings surface: search,
summary and transcript. Each returns a `ToolResponse` and never raises;
failures become error responses carrying a readable message.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict

from ..aggregator import fetch_all_meetings
from ..config import AppConfig
from ..errors import TimeoutErrorApp, to_error_payload
from ..filters import FilterCriteria, filter_meetings
from ..formatting import build_elicitation_prompt, format_meetings, normalize_transcript
from ..logging import get_logger
from ..meeting_source import MeetingSource
from ..schemas import (
    GetSummaryInput,
    GetTranscriptInput,
    SearchMeetingsInput,
    SearchMeetingsOutput,
    ToolResponse,
    TranscriptOutput,
)

logger = get_logger(__name__)


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _error_response(prefix: str, error: Exception) -> ToolResponse:
    return ToolResponse(text=f"{prefix}: {error}", is_error=True)


async def search_meetings(
    config: AppConfig,
    source: MeetingSource,
    params: SearchMeetingsInput,
) -> ToolResponse:
    """Search all meetings by keywords and date range.

    Meetings are fetched without summaries or transcripts to keep the
    response small. If a page fails, the meetings fetched before it are
    still filtered and returned, with the error flag set.
    """

    try:
        criteria = FilterCriteria.from_input(params, config.tzinfo)
        aggregated = await fetch_all_meetings(
            source, include_summary=False, include_transcript=False
        )
        matched = filter_meetings(aggregated.meetings, criteria)
        formatted = format_meetings(matched, config.tzinfo)

        prompt = build_elicitation_prompt(
            len(formatted), enabled=config.enable_elicitation
        )
        output = SearchMeetingsOutput(
            meetings=formatted,
            count=len(formatted),
            elicitation_prompt=prompt if config.enable_elicitation else None,
        )
        structured = output.to_json_dict()
        if not config.enable_elicitation:
            structured.pop("elicitationPrompt", None)

        logger.info(
            "search_meetings",
            total=len(aggregated.meetings),
            matched=len(formatted),
            had_error=aggregated.had_error,
        )
        return ToolResponse(
            text=_pretty(structured["meetings"]) + prompt,
            structured=structured,
            is_error=aggregated.had_error,
        )
    except Exception as exc:
        logger.error("search_meetings failed", error=to_error_payload(exc))
        return _error_response("Error searching meetings", exc)


async def get_summary(
    config: AppConfig,
    source: MeetingSource,
    params: GetSummaryInput,
) -> ToolResponse:
    """Fetch the AI summary of one recording within the summary time budget."""

    budget = config.summary_timeout_seconds
    try:
        try:
            summary: Dict[str, Any] = await asyncio.wait_for(
                source.get_summary(params.recording_id, timeout=budget),
                timeout=budget,
            )
        except asyncio.TimeoutError as exc:
            raise TimeoutErrorApp(
                f"Summary request timed out after {budget:g}s",
                {"recording_id": params.recording_id},
            ) from exc
        return ToolResponse(text=_pretty(summary), structured=summary)
    except Exception as exc:
        logger.error(
            "get_summary failed",
            error=to_error_payload(exc, recording_id=params.recording_id),
        )
        return _error_response("Error fetching summary", exc)


async def get_transcript(
    config: AppConfig,
    source: MeetingSource,
    params: GetTranscriptInput,
) -> ToolResponse:
    """Fetch and normalize the full transcript of one recording."""

    try:
        response = await source.get_transcript(params.recording_id)
        segments = normalize_transcript(response.transcript)
        output = TranscriptOutput(
            recording_id=params.recording_id,
            transcript=segments,
            total_segments=len(segments),
        )
        structured = output.to_json_dict()
        return ToolResponse(text=_pretty(structured["transcript"]), structured=structured)
    except Exception as exc:
        logger.error(
            "get_transcript failed",
            error=to_error_payload(exc, recording_id=params.recording_id),
        )
        return _error_response("Error fetching transcript", exc)
