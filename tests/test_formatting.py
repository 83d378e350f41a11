"""Unit tests for result projection, elicitation and transcript normalization."""

from __future__ import annotations

from zoneinfo import ZoneInfo

from fathom_mcp_server.formatting import (
    ELICITATION_PROMPT,
    build_elicitation_prompt,
    format_meeting,
    normalize_transcript,
)
from fathom_mcp_server.schemas import Meeting, TranscriptResponse

from .conftest import make_meeting


class TestFormatMeeting:
    def test_projection_fields(self):
        raw = make_meeting(
            42,
            title="Standup",
            meeting_title="Daily standup",
            start="2024-01-02T15:30:00Z",
            end="2024-01-02T15:45:00Z",
            invitees=[{"name": "Jo", "email": "jo@x.com", "is_external": False}],
        )
        data = format_meeting(Meeting.model_validate(raw)).to_json_dict()
        assert data["recordingId"] == 42
        assert data["title"] == "Standup"
        assert data["meetingTitle"] == "Daily standup"
        assert data["startedAt"] == "Jan 02, 2024, 03:30 PM"
        assert data["endedAt"] == "Jan 02, 2024, 03:45 PM"
        assert data["durationMinutes"] == 15
        assert data["url"] == "https://fathom.video/calls/42"
        assert data["shareUrl"] == "https://fathom.video/share/42"
        assert data["participants"][0]["name"] == "Jo"
        assert "createdAt" not in data
        assert "scheduledStartTime" not in data

    def test_duration_rounds_half_up(self):
        raw = make_meeting(1, start="2024-01-02T10:00:00Z", end="2024-01-02T10:30:30Z")
        assert format_meeting(Meeting.model_validate(raw)).duration_minutes == 31

    def test_missing_end_has_no_duration(self):
        raw = make_meeting(1, end=None)
        formatted = format_meeting(Meeting.model_validate(raw))
        assert formatted.duration_minutes is None
        assert formatted.ended_at is None

    def test_display_time_in_configured_timezone(self):
        raw = make_meeting(1, start="2024-07-01T10:00:00Z")
        formatted = format_meeting(Meeting.model_validate(raw), ZoneInfo("Europe/London"))
        assert formatted.started_at == "Jul 01, 2024, 11:00 AM"


class TestElicitation:
    def test_prompt_when_enabled_with_results(self):
        assert build_elicitation_prompt(2, enabled=True) == ELICITATION_PROMPT

    def test_no_prompt_without_results(self):
        assert build_elicitation_prompt(0, enabled=True) == ""

    def test_no_prompt_when_disabled(self):
        assert build_elicitation_prompt(3, enabled=False) == ""


class TestNormalizeTranscript:
    def test_unknown_speaker_fallback(self):
        response = TranscriptResponse.model_validate(
            {
                "transcript": [
                    {"speaker": {"display_name": None}, "text": "hi", "timestamp": "00:00:01"},
                    {"text": "no speaker", "timestamp": "00:00:02"},
                    {
                        "speaker": {
                            "display_name": "Sam",
                            "matched_calendar_invitee_email": "sam@x.com",
                        },
                        "text": "hello",
                        "timestamp": "00:00:03",
                    },
                ]
            }
        )
        segments = normalize_transcript(response.transcript)
        assert [s.speaker for s in segments] == ["Unknown Speaker", "Unknown Speaker", "Sam"]
        assert segments[2].speaker_email == "sam@x.com"
        assert segments[0].to_json_dict() == {
            "speaker": "Unknown Speaker",
            "speakerEmail": None,
            "text": "hi",
            "timestamp": "00:00:01",
        }
