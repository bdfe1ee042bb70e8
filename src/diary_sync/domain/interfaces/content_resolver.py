"""Interface for resolving locally stored images into uploadable content."""

from abc import ABC, abstractmethod
from typing import Any, BinaryIO


class IContentResolver(ABC):
    """Interface for access to locally stored images.

    References are opaque to the sync client: a filesystem path, a content
    URI, or any other handle the platform hands out. The client only asks
    for a display name, a MIME type and a byte stream.
    """

    @abstractmethod
    def resolve_display_name(self, reference: Any) -> str | None:
        """Get the user-visible file name of a reference.

        Returns:
            Display name, or None if it cannot be determined
        """

    @abstractmethod
    def resolve_mime_type(self, reference: Any) -> str | None:
        """Get the MIME type of a reference.

        Returns:
            MIME type such as ``image/png``, or None if unknown
        """

    @abstractmethod
    def open_stream(self, reference: Any) -> BinaryIO | None:
        """Open a binary stream over the referenced content.

        The caller reads the stream fully and closes it.

        Returns:
            Readable binary stream, or None if the content is unavailable
        """
