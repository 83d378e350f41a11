"""Factory for creating meeting sources based on configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..meeting_source import MeetingSource
from .fathom_api import FathomApiSource

if TYPE_CHECKING:
    from ..config import AppConfig


def create_meeting_source(config: AppConfig) -> MeetingSource:
    """Create the meeting source for the configured Fathom account.

    The API key is not validated here; an absent key leads to upstream
    401 responses reported by each tool.

    Args:
        config: Application configuration.

    Returns:
        MeetingSource implementation talking to the Fathom API.
    """
    return FathomApiSource.from_config(config)
