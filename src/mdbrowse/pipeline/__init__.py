"""Pipeline architecture for fetch operations."""

from .base import EventEmitter, FetchPipeline, FetchStep, PageContext

__all__ = ["EventEmitter", "FetchPipeline", "FetchStep", "PageContext"]
