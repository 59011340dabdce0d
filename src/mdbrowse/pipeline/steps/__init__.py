"""Pipeline steps for fetch and normalization."""

from .classify import ClassifyStep
from .convert import ConvertStep
from .fetch import FetchStep
from .markdown import MarkdownStep
from .sitemap import SitemapStep

__all__ = [
    "ClassifyStep",
    "ConvertStep",
    "FetchStep",
    "MarkdownStep",
    "SitemapStep",
]
