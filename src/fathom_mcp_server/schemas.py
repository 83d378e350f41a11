"""Pydantic schemas for upstream records and tool inputs and outputs.

Upstream models validate Fathom API responses at the client boundary.
They accept snake_case (as sent by the API) and camelCase keys, and
ignore fields this server does not use. Tool output models serialize
with camelCase aliases, which is the stable JSON contract of the tools.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

UNKNOWN_SPEAKER = "Unknown Speaker"


class FathomModel(BaseModel):
    """Base for all models: camelCase aliases, snake_case names accepted."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# Upstream records


class Invitee(FathomModel):
    """A calendar invitee (participant) of a meeting."""

    name: Optional[str] = None
    email: Optional[str] = None
    email_domain: Optional[str] = None
    is_external: Optional[bool] = None


class Meeting(FathomModel):
    """Meeting record as returned by the list endpoint.

    Attributes:
        recording_id: Numeric Fathom recording identifier.
        title: Primary title (usually the calendar event name).
        meeting_title: Secondary/display title.
        url: Public URL of the recording.
        share_url: Share URL of the recording.
        scheduled_start_time: Scheduled start, timezone-aware.
        scheduled_end_time: Scheduled end, timezone-aware.
        calendar_invitees: Participants in upstream order.
        default_summary: Present only when summaries were requested.
        transcript: Present only when transcripts were requested.
    """

    recording_id: int
    title: Optional[str] = None
    meeting_title: Optional[str] = None
    url: Optional[str] = None
    share_url: Optional[str] = None
    created_at: Optional[datetime] = None
    scheduled_start_time: Optional[datetime] = None
    scheduled_end_time: Optional[datetime] = None
    recording_start_time: Optional[datetime] = None
    recording_end_time: Optional[datetime] = None
    calendar_invitees: List[Invitee] = Field(default_factory=list)
    default_summary: Optional[Dict[str, Any]] = None
    transcript: Optional[List[Dict[str, Any]]] = None

    @field_validator("calendar_invitees", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return [] if v is None else v

    @field_validator(
        "created_at",
        "scheduled_start_time",
        "scheduled_end_time",
        "recording_start_time",
        "recording_end_time",
        mode="after",
    )
    @classmethod
    def _assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class MeetingListPage(FathomModel):
    """One page of the cursor-paginated list endpoint."""

    items: List[Meeting] = Field(default_factory=list)
    next_cursor: Optional[str] = None
    limit: Optional[int] = None

    @field_validator("items", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return [] if v is None else v


class TranscriptSpeaker(FathomModel):
    name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("name", "display_name", "displayName"),
    )
    email: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "email", "matched_calendar_invitee_email", "matchedCalendarInviteeEmail"
        ),
    )


class TranscriptItem(FathomModel):
    speaker: Optional[TranscriptSpeaker] = None
    text: str = ""
    timestamp: Optional[str] = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _stringify_offset(cls, v):
        # Some recordings report offsets as seconds instead of HH:MM:SS
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class TranscriptResponse(FathomModel):
    transcript: List[TranscriptItem]


# Inputs


class SearchMeetingsInput(FathomModel):
    participant_keywords: Optional[List[str]] = Field(
        default=None,
        description="Keywords to match against participant names/emails",
    )
    title_keywords: Optional[List[str]] = Field(
        default=None,
        description="Keywords to match against meeting titles or descriptions",
    )
    start_date: Optional[str] = Field(
        default=None, description="Meetings on or after this date (YYYY-MM-DD)"
    )
    end_date: Optional[str] = Field(
        default=None, description="Meetings on or before this date (YYYY-MM-DD)"
    )


class GetSummaryInput(FathomModel):
    recording_id: int


class GetTranscriptInput(FathomModel):
    recording_id: int


# Outputs


class FormattedMeeting(FathomModel):
    """Display-oriented projection of a meeting returned by search."""

    recording_id: int
    title: Optional[str] = None
    meeting_title: Optional[str] = None
    started_at: Optional[str] = None
    ended_at: Optional[str] = None
    duration_minutes: Optional[int] = None
    url: Optional[str] = None
    share_url: Optional[str] = None
    participants: List[Invitee] = Field(default_factory=list)


class SearchMeetingsOutput(FathomModel):
    meetings: List[FormattedMeeting]
    count: int
    elicitation_prompt: Optional[str] = None


class TranscriptSegment(FathomModel):
    speaker: str = UNKNOWN_SPEAKER
    speaker_email: Optional[str] = None
    text: str = ""
    timestamp: Optional[str] = None


class TranscriptOutput(FathomModel):
    recording_id: int
    transcript: List[TranscriptSegment]
    total_segments: int


class ToolResponse(BaseModel):
    """Runtime-independent tool result: display text, payload, error flag."""

    text: str
    structured: Optional[Dict[str, Any]] = None
    is_error: bool = False
