"""Event types emitted while a page moves through the pipeline."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class EventType(str, Enum):
    """Types of events emitted during a fetch."""

    # Transport
    FETCH_STARTED = "fetch_started"
    FETCH_COMPLETED = "fetch_completed"
    FETCH_FAILED = "fetch_failed"

    # Normalization
    DOCUMENT_CLASSIFIED = "document_classified"
    SITEMAP_RENDERED = "sitemap_rendered"
    PAGE_CONVERTED = "page_converted"


@dataclass
class FetchEvent:
    """
    Event emitted during a fetch.

    Provides typed fields for common event data instead of a generic dict.

    Example:
        def on_event(event: FetchEvent) -> None:
            if event.type == EventType.DOCUMENT_CLASSIFIED:
                print(f"{event.url} is {event.kind}")
            elif event.is_error:
                print(f"Error: {event.url} - {event.error}")
    """

    type: EventType

    # Timestamp (always UTC)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # Common fields
    url: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None

    # Typed payload fields for specific events
    status_code: Optional[int] = None
    content_type: Optional[str] = None
    bytes_downloaded: Optional[int] = None
    kind: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """Check if this is an error event."""
        return self.type == EventType.FETCH_FAILED
