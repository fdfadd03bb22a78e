"""Data models for mediastream."""

import math
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Media(BaseModel):
    """A single playlist entry."""

    duration: float = 0.0  # seconds, -1 for live streams
    name: Optional[str] = None
    location: str = ""
    attributes: Dict[str, str] = Field(default_factory=dict)

    # Unrecognized directives, keyed without the leading '#'
    extension_data: Dict[str, Optional[str]] = Field(default_factory=dict)

    def __str__(self) -> str:
        """String representation of the entry."""
        return f"{self.title} ({self.location})"

    @property
    def title(self) -> str:
        """Human-readable label for the entry."""
        return self.name or self.attributes.get("tvg-name") or self.location


class Playlist(BaseModel):
    """A parsed playlist document."""

    attributes: Dict[str, str] = Field(default_factory=dict)
    title: Optional[str] = None
    entries: List[Media] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.title or 'Untitled playlist'} ({len(self.entries)} entries)"

    @property
    def total_duration(self) -> float:
        """Sum of all known entry durations in seconds."""
        return sum(
            media.duration for media in self.entries
            if math.isfinite(media.duration) and media.duration >= 0
        )
