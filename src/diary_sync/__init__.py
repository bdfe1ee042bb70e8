"""Client for a remote diary service."""

from .exceptions import (
    ApplicationError,
    AttachmentReadError,
    DecodeError,
    DiarySyncError,
    TransportFailure,
    UnexpectedError,
)
from .models import Confirmation, DiaryRecord, DiaryRequest, Page, VisibilityStatus
from .sync import DiarySyncClient, Failure, LikeToggle, Success
from .transport import DiaryHttpClient

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "AttachmentReadError",
    "Confirmation",
    "DecodeError",
    "DiaryHttpClient",
    "DiaryRecord",
    "DiaryRequest",
    "DiarySyncClient",
    "DiarySyncError",
    "Failure",
    "LikeToggle",
    "Page",
    "Success",
    "TransportFailure",
    "UnexpectedError",
    "VisibilityStatus",
    "__version__",
]
