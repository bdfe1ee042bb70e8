"""Callback-style access to the diary client.

Screens and other callback-driven callers hand over ``on_success`` /
``on_failure`` instead of awaiting. Each submitted call runs on the shared
background loop and invokes exactly one of the two callbacks, exactly once,
on the loop's thread. Callers marshal back to their own context if needed.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from concurrent.futures import Future
from typing import Any, TypeVar

from diary_sync.exceptions import DiarySyncError, UnexpectedError
from diary_sync.models.diary import Confirmation, DiaryRecord, DiaryRequest, Page
from diary_sync.models.fields import VisibilityStatus
from diary_sync.sync.diary_client import DiarySyncClient
from diary_sync.sync.result import Failure, Success, SyncResult, unexpected
from diary_sync.utils.async_runner import AsyncioRunner
from diary_sync.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

SuccessCallback = Callable[[T], None]
FailureCallback = Callable[[DiarySyncError], None]
UiPost = Callable[[Callable[[], None]], None]


class CallbackBridge:
    """Run diary operations in the background and report through callbacks."""

    def __init__(
        self,
        runner: AsyncioRunner | None = None,
        ui_post: UiPost | None = None,
    ):
        """
        Initialize the bridge.

        Args:
            runner: Background loop to run operations on (shared one by default)
            ui_post: Optional hook that schedules a callable on the caller's
                UI-safe context; unexpected failures are delivered through it
        """
        self._runner = runner or AsyncioRunner.get_global()
        self._ui_post = ui_post

    def submit(
        self,
        operation: Awaitable[SyncResult[T]],
        on_success: SuccessCallback[T],
        on_failure: FailureCallback,
    ) -> Future[SyncResult[T]]:
        """Schedule ``operation``; the returned future resolves to its result."""
        return self._runner.submit(self._run(operation, on_success, on_failure))

    async def _run(
        self,
        operation: Awaitable[SyncResult[T]],
        on_success: SuccessCallback[T],
        on_failure: FailureCallback,
    ) -> SyncResult[T]:
        try:
            result = await operation
        except Exception as e:
            result = Failure(unexpected(e))
        self._deliver(result, on_success, on_failure)
        return result

    def _deliver(
        self,
        result: SyncResult[T],
        on_success: SuccessCallback[T],
        on_failure: FailureCallback,
    ) -> None:
        if isinstance(result, Success):
            value = result.value
            self._invoke(lambda: on_success(value))
            return

        error = result.error
        if isinstance(error, UnexpectedError) and self._ui_post is not None:
            try:
                self._ui_post(lambda: self._invoke(lambda: on_failure(error)))
            except Exception:
                # hook never scheduled the callback; deliver it here instead
                logger.exception("diary_ui_post_failed", error=error.message)
            else:
                return
        self._invoke(lambda: on_failure(error))

    @staticmethod
    def _invoke(callback: Callable[[], None]) -> None:
        # a raising callback must not trigger the other one
        try:
            callback()
        except Exception:
            logger.exception("diary_callback_raised")


class DiaryCallbackApi:
    """Callback-flavoured facade over ``DiarySyncClient``.

    Every method returns immediately with a future; the outcome is reported
    through the given callbacks.
    """

    def __init__(self, client: DiarySyncClient, bridge: CallbackBridge | None = None):
        self._client = client
        self._bridge = bridge or CallbackBridge()

    @property
    def client(self) -> DiarySyncClient:
        return self._client

    def create_diary(
        self,
        owner_id: int,
        request: DiaryRequest,
        images: Sequence[Any],
        on_success: SuccessCallback[DiaryRecord],
        on_failure: FailureCallback,
    ) -> Future[SyncResult[DiaryRecord]]:
        return self._bridge.submit(
            self._client.create_diary(owner_id, request, images), on_success, on_failure
        )

    def fetch_diaries(
        self,
        owner_id: int,
        status: VisibilityStatus,
        on_success: SuccessCallback[Page[DiaryRecord]],
        on_failure: FailureCallback,
        page: int = 0,
        size: int | None = None,
    ) -> Future[SyncResult[Page[DiaryRecord]]]:
        return self._bridge.submit(
            self._client.list_diaries(owner_id, status, page, size),
            on_success,
            on_failure,
        )

    def delete_diary(
        self,
        owner_id: int,
        diary_id: int,
        on_success: SuccessCallback[Confirmation],
        on_failure: FailureCallback,
    ) -> Future[SyncResult[Confirmation]]:
        return self._bridge.submit(
            self._client.delete_diary(owner_id, diary_id), on_success, on_failure
        )

    def like_diary(
        self,
        owner_id: int,
        diary_id: int,
        on_success: SuccessCallback[Confirmation],
        on_failure: FailureCallback,
    ) -> Future[SyncResult[Confirmation]]:
        return self._bridge.submit(
            self._client.like_diary(owner_id, diary_id), on_success, on_failure
        )

    def unlike_diary(
        self,
        owner_id: int,
        diary_id: int,
        on_success: SuccessCallback[Confirmation],
        on_failure: FailureCallback,
    ) -> Future[SyncResult[Confirmation]]:
        return self._bridge.submit(
            self._client.unlike_diary(owner_id, diary_id), on_success, on_failure
        )
