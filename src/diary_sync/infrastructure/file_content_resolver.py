"""Content resolver backed by the local filesystem."""

import mimetypes
from pathlib import Path
from typing import Any, BinaryIO

from diary_sync.domain.interfaces.content_resolver import IContentResolver
from diary_sync.utils.logging import get_logger

logger = get_logger(__name__)


class FileContentResolver(IContentResolver):
    """Resolve filesystem paths (str or Path) as image references."""

    def resolve_display_name(self, reference: Any) -> str | None:
        name = Path(reference).name
        return name or None

    def resolve_mime_type(self, reference: Any) -> str | None:
        mime_type, _ = mimetypes.guess_type(str(reference))
        return mime_type

    def open_stream(self, reference: Any) -> BinaryIO | None:
        path = Path(reference)
        if not path.is_file():
            logger.warning("image_file_missing", path=str(path))
            return None
        return path.open("rb")
