"""Test fixtures package."""

from .mock_content_resolver import MockContentResolver
from .mock_diary_client import MockDiaryClient

__all__ = ["MockContentResolver", "MockDiaryClient"]
