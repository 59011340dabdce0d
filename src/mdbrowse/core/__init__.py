"""Core fetch API for mdbrowse."""

from .fetcher import PageFetcher, fetch_blocking, fetch_page, normalize_response

__all__ = ["PageFetcher", "fetch_blocking", "fetch_page", "normalize_response"]
