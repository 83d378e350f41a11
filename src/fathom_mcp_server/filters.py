"""Keyword and date-range filtering of aggregated meetings.

Keyword criteria are a disjunction: participant and title keywords are
merged, and a meeting matches when any keyword appears in any invitee
name or email or in either title field. The date range is conjunctive
with the keyword criterion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from typing import Iterable, List, Optional

from .schemas import Meeting, SearchMeetingsInput
from .utils import end_of_day, start_of_day


@dataclass(frozen=True)
class FilterCriteria:
    """Normalized search criteria.

    Attributes:
        keywords: Merged participant and title keywords, lowercased.
        start: Inclusive lower bound (start of day), if any.
        end: Inclusive upper bound (end of day), if any.
    """

    keywords: List[str] = field(default_factory=list)
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @classmethod
    def from_input(
        cls, params: SearchMeetingsInput, tz: tzinfo = timezone.utc
    ) -> FilterCriteria:
        """Build criteria from tool input.

        Raises:
            BadRequestError: If a date cannot be parsed.
        """
        return cls(
            keywords=collect_keywords(params.participant_keywords, params.title_keywords),
            start=start_of_day(params.start_date, tz) if params.start_date else None,
            end=end_of_day(params.end_date, tz) if params.end_date else None,
        )


def collect_keywords(
    participant_keywords: Optional[Iterable[str]],
    title_keywords: Optional[Iterable[str]],
) -> List[str]:
    """Merge both keyword lists into one flat, lowercased list."""
    merged = [*(participant_keywords or []), *(title_keywords or [])]
    return [k.lower() for k in merged]


def _contains(value: Optional[str], keyword: str) -> bool:
    return bool(value) and keyword in value.lower()


def matches_keywords(meeting: Meeting, keywords: List[str]) -> bool:
    """True when no keywords are given or any keyword hits any field."""
    if not keywords:
        return True
    for keyword in keywords:
        for invitee in meeting.calendar_invitees:
            if _contains(invitee.name, keyword) or _contains(invitee.email, keyword):
                return True
        if _contains(meeting.title, keyword) or _contains(meeting.meeting_title, keyword):
            return True
    return False


def matches_date_range(
    meeting: Meeting, start: Optional[datetime], end: Optional[datetime]
) -> bool:
    """Check the scheduled start against inclusive bounds.

    A meeting without a scheduled start fails any supplied bound.
    """
    if start is None and end is None:
        return True
    scheduled = meeting.scheduled_start_time
    if scheduled is None:
        return False
    if start is not None and scheduled < start:
        return False
    if end is not None and scheduled > end:
        return False
    return True


def filter_meetings(meetings: Iterable[Meeting], criteria: FilterCriteria) -> List[Meeting]:
    """Return the meetings matching keywords AND date range, order preserved."""
    return [
        m
        for m in meetings
        if matches_keywords(m, criteria.keywords)
        and matches_date_range(m, criteria.start, criteria.end)
    ]
