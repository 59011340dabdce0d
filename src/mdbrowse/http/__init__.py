"""HTTP transport for mdbrowse."""

from .client import DEFAULT_USER_AGENT, AsyncHttpClient
from .protocols import HttpClient, HttpResponse

__all__ = [
    "DEFAULT_USER_AGENT",
    "AsyncHttpClient",
    "HttpClient",
    "HttpResponse",
]
