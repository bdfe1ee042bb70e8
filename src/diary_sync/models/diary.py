"""Wire models for the diary service."""

from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .fields import DateField, StatusField

DEFAULT_PROFILE_IMAGE = "default.jpg"

ItemT = TypeVar("ItemT")


class WireModel(BaseModel):
    """Base for every payload: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class DiaryRequest(WireModel):
    """A diary entry as composed by the user, before submission."""

    title: str = Field(min_length=1)
    content: str
    date: DateField
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    status: StatusField


class ProfileImage(WireModel):
    """Owner avatar attached to a diary record."""

    url: str
    image_id: int | None = None

    @property
    def is_default(self) -> bool:
        """True when the server sent its placeholder avatar."""
        return self.url == DEFAULT_PROFILE_IMAGE


class DiaryRecord(WireModel):
    """A diary entry as returned by the server."""

    diary_id: int
    user_id: int
    title: str = Field(
        validation_alias=AliasChoices("diaryTitle", "title"),
        serialization_alias="diaryTitle",
    )
    content: str
    date: DateField
    latitude: float
    longitude: float
    status: StatusField
    is_liked: bool = False
    profile_image: ProfileImage | None = None


class Page(WireModel, Generic[ItemT]):
    """One zero-indexed slice of a larger ordered result set."""

    content: list[ItemT]
    total_elements: int = 0
    total_pages: int | None = None
    number: int = 0
    size: int | None = None
    first: bool | None = None
    last: bool | None = None

    @property
    def has_next(self) -> bool:
        if self.last is not None:
            return not self.last
        if self.total_pages is not None:
            return self.number + 1 < self.total_pages
        return False


class Confirmation(WireModel):
    """Generic acknowledgement returned by delete and like endpoints."""

    model_config = ConfigDict(extra="allow")

    message: str | None = None
    status: str | int | None = None
    code: int | None = None
