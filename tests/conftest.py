"""Shared fixtures: an in-memory meeting source and meeting builders."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

import pytest
import structlog
from fathom_mcp_server.config import AppConfig
from fathom_mcp_server.errors import UpstreamError
from fathom_mcp_server.meeting_source import MeetingSource
from fathom_mcp_server.schemas import MeetingListPage, TranscriptResponse

Page = Tuple[List[Dict[str, Any]], Optional[str]]


def make_meeting(
    recording_id: int,
    *,
    title: Optional[str] = None,
    meeting_title: Optional[str] = None,
    start: Optional[str] = "2024-01-02T10:00:00Z",
    end: Optional[str] = "2024-01-02T10:30:00Z",
    invitees: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Meeting item in the snake_case shape of the Fathom list endpoint."""
    return {
        "recording_id": recording_id,
        "title": title,
        "meeting_title": meeting_title,
        "url": f"https://fathom.video/calls/{recording_id}",
        "share_url": f"https://fathom.video/share/{recording_id}",
        "created_at": start,
        "scheduled_start_time": start,
        "scheduled_end_time": end,
        "calendar_invitees": invitees or [],
    }


class FakeMeetingSource(MeetingSource):
    """Serves canned pages in order and records every request."""

    def __init__(
        self,
        pages: Optional[List[Page]] = None,
        *,
        fail_at: Optional[int] = None,
        summary: Optional[Dict[str, Any]] = None,
        summary_delay: float = 0.0,
        summary_error: Optional[Exception] = None,
        transcript: Optional[Dict[str, Any]] = None,
        transcript_error: Optional[Exception] = None,
    ) -> None:
        self.pages = pages or [([], None)]
        self.fail_at = fail_at
        self.summary = summary or {}
        self.summary_delay = summary_delay
        self.summary_error = summary_error
        self.transcript = transcript or {"transcript": []}
        self.transcript_error = transcript_error
        self.list_calls: List[Dict[str, Any]] = []

    async def list_meetings(
        self,
        *,
        cursor: str = "",
        include_summary: bool = False,
        include_transcript: bool = False,
    ) -> MeetingListPage:
        index = len(self.list_calls)
        self.list_calls.append(
            {
                "cursor": cursor,
                "include_summary": include_summary,
                "include_transcript": include_transcript,
            }
        )
        if self.fail_at == index:
            raise UpstreamError("Fathom API returned HTTP 502")
        items, next_cursor = self.pages[index]
        return MeetingListPage.model_validate({"items": items, "next_cursor": next_cursor})

    async def get_summary(self, recording_id: int, *, timeout: Optional[float] = None):
        if self.summary_delay:
            await asyncio.sleep(self.summary_delay)
        if self.summary_error:
            raise self.summary_error
        return self.summary

    async def get_transcript(self, recording_id: int) -> TranscriptResponse:
        if self.transcript_error:
            raise self.transcript_error
        return TranscriptResponse.model_validate(self.transcript)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(api_key="test-key", timezone="UTC", enable_elicitation=True)


@pytest.fixture
def restore_logging():
    """Undo configure_logging so later tests don't write to a closed capture stream."""
    yield
    structlog.reset_defaults()
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)
