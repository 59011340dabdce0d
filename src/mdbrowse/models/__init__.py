"""mdbrowse configuration, document and event models."""

from .config import ByteSize, ConversionConfig, MdbrowseConfig, NetworkConfig, ServerConfig
from .events import EventType, FetchEvent
from .page import FetchRequest, PageContent, accept_header

__all__ = [
    # Config
    "ByteSize",
    "ConversionConfig",
    "MdbrowseConfig",
    "NetworkConfig",
    "ServerConfig",
    # Events
    "EventType",
    "FetchEvent",
    # Documents
    "FetchRequest",
    "PageContent",
    "accept_header",
]
