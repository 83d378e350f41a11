"""Meeting source abstraction layer.

Defines the boundary between the tools and the upstream meeting API:
one coroutine per endpoint, each returning validated models. Tools
depend only on this interface, so tests can substitute an in-memory
source and the HTTP implementation needs no SDK-specific workarounds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .schemas import MeetingListPage, TranscriptResponse


class MeetingSource(ABC):
    """Abstract interface for meeting sources.

    Implementations raise subclasses of `AppError` on failure; they never
    retry and keep no state between calls.
    """

    @abstractmethod
    async def list_meetings(
        self,
        *,
        cursor: str = "",
        include_summary: bool = False,
        include_transcript: bool = False,
    ) -> MeetingListPage:
        """Fetch one page of meetings.

        Args:
            cursor: Opaque pagination token; "" requests the first page.
            include_summary: Whether to embed AI summaries in each item.
            include_transcript: Whether to embed transcripts in each item.

        Returns:
            The page's items and the cursor of the next page, if any.
        """
        pass

    @abstractmethod
    async def get_summary(
        self, recording_id: int, *, timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        """Fetch the AI summary of a recording.

        Args:
            recording_id: Fathom recording identifier.
            timeout: Time budget in seconds for this call.

        Returns:
            The summary object, unmodified.
        """
        pass

    @abstractmethod
    async def get_transcript(self, recording_id: int) -> TranscriptResponse:
        """Fetch the full transcript of a recording."""
        pass

    async def aclose(self) -> None:
        """Release any held connections."""
        return None
