"""Turn opaque image references into ordered multipart parts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from diary_sync.codec import JSON_CONTENT_TYPE
from diary_sync.domain.interfaces.content_resolver import IContentResolver
from diary_sync.exceptions import AttachmentReadError
from diary_sync.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"
DEFAULT_EXTENSION = ".jpg"

MIME_EXTENSIONS: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
}


@dataclass(frozen=True)
class ImagePart:
    """One fully read image, ready to become a multipart part."""

    reference: Any
    filename: str
    mime_type: str
    data: bytes


def extension_for(mime_type: str | None) -> str:
    """Map a MIME type to a file extension, falling back to ``.jpg``."""
    return MIME_EXTENSIONS.get(mime_type or DEFAULT_MIME_TYPE, DEFAULT_EXTENSION)


def _resolve_mime_type(resolver: IContentResolver, reference: Any) -> str:
    try:
        mime_type = resolver.resolve_mime_type(reference)
    except Exception as e:
        logger.debug("image_mime_type_unresolved", reference=str(reference), error=str(e))
        return DEFAULT_MIME_TYPE
    return mime_type or DEFAULT_MIME_TYPE


def _resolve_display_name(resolver: IContentResolver, reference: Any) -> str | None:
    try:
        return resolver.resolve_display_name(reference) or None
    except Exception as e:
        logger.debug("image_name_unresolved", reference=str(reference), error=str(e))
        return None


def resolve_filename(
    resolver: IContentResolver, reference: Any, index: int
) -> tuple[str, str]:
    """Work out the upload filename and MIME type of one image.

    A resolved name that already has an extension is used as is; otherwise
    the extension is derived from the MIME type. An unresolvable name falls
    back to ``image_<index>.jpg`` whatever the MIME type.

    Returns:
        Tuple of (filename, mime_type)
    """
    mime_type = _resolve_mime_type(resolver, reference)
    extension = extension_for(mime_type)
    name = _resolve_display_name(resolver, reference)
    if name is None:
        return f"image_{index}{DEFAULT_EXTENSION}", mime_type
    if "." in name:
        return name, mime_type
    return f"{name}{extension}", mime_type


def read_image(resolver: IContentResolver, reference: Any, index: int) -> ImagePart:
    """Resolve and fully read one image.

    Raises:
        AttachmentReadError: If the stream cannot be opened or read
    """
    filename, mime_type = resolve_filename(resolver, reference, index)

    try:
        stream = resolver.open_stream(reference)
    except Exception as e:
        raise AttachmentReadError(
            reference, message=f"Unable to open image {reference}: {e}"
        ) from e
    if stream is None:
        raise AttachmentReadError(reference)

    try:
        with stream:
            data = stream.read()
    except Exception as e:
        raise AttachmentReadError(
            reference, message=f"Unable to read image {reference}: {e}"
        ) from e

    return ImagePart(reference=reference, filename=filename, mime_type=mime_type, data=data)


def read_attachments(
    resolver: IContentResolver, references: Sequence[Any]
) -> list[ImagePart]:
    """Read every image in order; the first failure aborts the whole batch."""
    parts = [read_image(resolver, ref, index) for index, ref in enumerate(references)]
    logger.debug(
        "attachments_read",
        count=len(parts),
        total_bytes=sum(len(part.data) for part in parts),
    )
    return parts


def build_multipart(
    json_body: bytes,
    images: Sequence[ImagePart],
    json_part_name: str = "diary",
    image_part_name: str = "images",
) -> list[tuple[str, tuple[str | None, bytes, str]]]:
    """Assemble httpx multipart ``files``: the JSON part, then images in order."""
    files: list[tuple[str, tuple[str | None, bytes, str]]] = [
        (json_part_name, (None, json_body, JSON_CONTENT_TYPE))
    ]
    files.extend(
        (image_part_name, (image.filename, image.data, image.mime_type))
        for image in images
    )
    return files
