"""HTTP transport for the diary service."""

from .http_client import DiaryHttpClient

__all__ = ["DiaryHttpClient"]
