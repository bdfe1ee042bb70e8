"""Interfaces for collaborators the sync client consumes."""

from .content_resolver import IContentResolver
from .http_client import IDiaryHttpClient

__all__ = ["IContentResolver", "IDiaryHttpClient"]
