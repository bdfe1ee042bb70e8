"""Wire models and field types for the diary service."""

from .diary import (
    DEFAULT_PROFILE_IMAGE,
    Confirmation,
    DiaryRecord,
    DiaryRequest,
    Page,
    ProfileImage,
)
from .fields import VisibilityStatus

__all__ = [
    "DEFAULT_PROFILE_IMAGE",
    "Confirmation",
    "DiaryRecord",
    "DiaryRequest",
    "Page",
    "ProfileImage",
    "VisibilityStatus",
]
