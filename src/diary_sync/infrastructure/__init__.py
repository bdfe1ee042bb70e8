"""Infrastructure adapters."""

from .file_content_resolver import FileContentResolver

__all__ = ["FileContentResolver"]
