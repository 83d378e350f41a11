"""Projection of meetings and transcripts into tool output shapes."""

from __future__ import annotations

import math
from datetime import timezone, tzinfo
from typing import Iterable, List, Optional

from .schemas import (
    UNKNOWN_SPEAKER,
    FormattedMeeting,
    Meeting,
    TranscriptItem,
    TranscriptSegment,
)
from .utils import format_display_time

ELICITATION_PROMPT = (
    "\n\nWould you like a summary or full transcript for any of these meetings? "
    "If so, please provide the recordingId."
)


def _duration_minutes(meeting: Meeting) -> Optional[int]:
    start, end = meeting.scheduled_start_time, meeting.scheduled_end_time
    if start is None or end is None:
        return None
    # Half-up, so 30.5 minutes reads as 31
    return math.floor((end - start).total_seconds() / 60 + 0.5)


def format_meeting(meeting: Meeting, tz: tzinfo = timezone.utc) -> FormattedMeeting:
    """Reduce a meeting record to the fields shown in search results."""
    return FormattedMeeting(
        recording_id=meeting.recording_id,
        title=meeting.title,
        meeting_title=meeting.meeting_title,
        started_at=format_display_time(meeting.scheduled_start_time, tz),
        ended_at=format_display_time(meeting.scheduled_end_time, tz),
        duration_minutes=_duration_minutes(meeting),
        url=meeting.url,
        share_url=meeting.share_url,
        participants=list(meeting.calendar_invitees),
    )


def format_meetings(
    meetings: Iterable[Meeting], tz: tzinfo = timezone.utc
) -> List[FormattedMeeting]:
    return [format_meeting(m, tz) for m in meetings]


def build_elicitation_prompt(count: int, *, enabled: bool) -> str:
    """Prompt inviting a follow-up request; empty when disabled or no matches."""
    if enabled and count > 0:
        return ELICITATION_PROMPT
    return ""


def normalize_transcript(items: Iterable[TranscriptItem]) -> List[TranscriptSegment]:
    """Flatten speaker info and substitute a label for unnamed speakers."""
    segments: List[TranscriptSegment] = []
    for item in items:
        speaker = item.speaker
        segments.append(
            TranscriptSegment(
                speaker=(speaker.name if speaker and speaker.name else UNKNOWN_SPEAKER),
                speaker_email=speaker.email if speaker else None,
                text=item.text,
                timestamp=item.timestamp,
            )
        )
    return segments
