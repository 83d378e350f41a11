"""Meeting source implementations."""

from .factory import create_meeting_source
from .fathom_api import FathomApiSource

__all__ = ["FathomApiSource", "create_meeting_source"]
