"""Caller-side liked flag for a single diary.

The flag flips only after the server confirms the like or unlike; a failure
leaves it untouched and reports the message instead. There is no pending
state and concurrent calls are not serialized: whichever response arrives
last decides the final state.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from diary_sync.models.diary import Confirmation, DiaryRecord
from diary_sync.sync.diary_client import DiarySyncClient
from diary_sync.sync.result import Success, SyncResult
from diary_sync.utils.logging import get_logger

logger = get_logger(__name__)


class LikeState(Enum):
    UNLIKED = "unliked"
    LIKED = "liked"


class LikeToggle:
    """Deferred like/unlike state machine for one diary."""

    def __init__(
        self,
        client: DiarySyncClient,
        owner_id: int,
        diary_id: int,
        liked: bool = False,
        on_error: Callable[[str], None] | None = None,
    ):
        """
        Args:
            client: Client used to issue like/unlike requests
            owner_id: The acting user
            diary_id: The diary whose like is toggled
            liked: Initial state as last reported by the server
            on_error: Notified with a short message when a request fails
        """
        self._client = client
        self.owner_id = owner_id
        self.diary_id = diary_id
        self._state = LikeState.LIKED if liked else LikeState.UNLIKED
        self._on_error = on_error

    @classmethod
    def for_record(
        cls,
        client: DiarySyncClient,
        owner_id: int,
        record: DiaryRecord,
        on_error: Callable[[str], None] | None = None,
    ) -> LikeToggle:
        """Start from the liked flag the server sent with a record."""
        return cls(client, owner_id, record.diary_id, record.is_liked, on_error)

    @property
    def state(self) -> LikeState:
        return self._state

    @property
    def liked(self) -> bool:
        return self._state is LikeState.LIKED

    async def set_liked(self, liked: bool) -> SyncResult[Confirmation]:
        """Ask the server for ``liked`` and adopt it once confirmed."""
        if liked:
            result = await self._client.like_diary(self.owner_id, self.diary_id)
        else:
            result = await self._client.unlike_diary(self.owner_id, self.diary_id)

        if isinstance(result, Success):
            self._state = LikeState.LIKED if liked else LikeState.UNLIKED
            logger.debug(
                "like_state_changed",
                diary_id=self.diary_id,
                state=self._state.value,
            )
        else:
            logger.warning(
                "like_state_unchanged",
                diary_id=self.diary_id,
                state=self._state.value,
                error=result.message,
            )
            if self._on_error is not None:
                self._on_error(result.message)
        return result

    async def toggle(self) -> SyncResult[Confirmation]:
        """Request the opposite of the current confirmed state."""
        return await self.set_liked(not self.liked)
