"""Diary synchronization client.

Turns local intent (create a diary with photos, fetch a page, delete, like or
unlike) into requests against the diary service and classifies the outcome.
Every public operation resolves to ``Success`` or ``Failure`` and never
raises; one call issues at most one request and nothing is retried.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from diary_sync.codec import (
    decode_confirmation,
    decode_page,
    decode_record,
    encode_request,
    encode_status,
    is_null_body,
)
from diary_sync.error_codes import ErrorCode
from diary_sync.exceptions import (
    ApplicationError,
    AttachmentReadError,
    DecodeError,
    DiarySyncError,
    TransportFailure,
)
from diary_sync.models.diary import Confirmation, DiaryRecord, DiaryRequest, Page
from diary_sync.models.fields import VisibilityStatus
from diary_sync.sync.attachments import build_multipart, read_attachments
from diary_sync.sync.result import Failure, Success, SyncResult, unexpected
from diary_sync.transport.http_client import DiaryHttpClient
from diary_sync.utils.logging import get_logger

if TYPE_CHECKING:
    from diary_sync.config import Config
    from diary_sync.domain.interfaces.content_resolver import IContentResolver
    from diary_sync.domain.interfaces.http_client import IDiaryHttpClient

logger = get_logger(__name__)

T = TypeVar("T")

NULL_BODY_MESSAGE = "Response body is null"
UNPARSEABLE_BODY_MESSAGE = "Response body could not be parsed"
UNKNOWN_ERROR_TEXT = "Unknown error"


def _status_failure_message(response: httpx.Response) -> str:
    return f"Failed with HTTP status: {response.status_code}"


def _body_failure_message(response: httpx.Response) -> str:
    if is_null_body(response.content):
        return NULL_BODY_MESSAGE
    return UNPARSEABLE_BODY_MESSAGE


def _create_failure_message(response: httpx.Response) -> str:
    text = None if is_null_body(response.content) else response.text
    return f"Error: {text or UNKNOWN_ERROR_TEXT}"


class DiarySyncClient:
    """Client for diary CRUD operations.

    The HTTP client is injected; the sync client never creates a global one.
    Images for ``create_diary`` are read through the injected content
    resolver.
    """

    def __init__(
        self,
        http_client: IDiaryHttpClient,
        content_resolver: IContentResolver | None = None,
        *,
        default_page_size: int = 5,
        json_part_name: str = "diary",
        image_part_name: str = "images",
    ):
        """
        Initialize the sync client.

        Args:
            http_client: Transport used for every request
            content_resolver: Resolver for image references passed to create_diary
            default_page_size: Page size used when list_diaries gets none
            json_part_name: Multipart name of the JSON diary part
            image_part_name: Multipart name of each image part
        """
        self._http = http_client
        self._resolver = content_resolver
        self.default_page_size = default_page_size
        self.json_part_name = json_part_name
        self.image_part_name = image_part_name

    @classmethod
    def from_config(
        cls, config: Config, content_resolver: IContentResolver | None = None
    ) -> DiarySyncClient:
        """Build a client and its HTTP transport from the settings model."""
        return cls(
            DiaryHttpClient.from_config(config),
            content_resolver,
            default_page_size=config.default_page_size,
            json_part_name=config.json_part_name,
            image_part_name=config.image_part_name,
        )

    @property
    def http_client(self) -> IDiaryHttpClient:
        return self._http

    async def create_diary(
        self,
        owner_id: int,
        request: DiaryRequest,
        images: Sequence[Any] | None = (),
    ) -> SyncResult[DiaryRecord]:
        """Create a diary entry with its photos in one multipart request.

        Images are read in order, fully, before anything is sent; a single
        unreadable image fails the whole call with ``AttachmentReadError``.

        Args:
            owner_id: User the diary belongs to
            request: The diary to create
            images: Opaque image references, in upload order

        Returns:
            Success with the created record, or Failure
        """
        log = logger.bind(operation="create", owner_id=owner_id)

        try:
            references = list(images or ())
            log.info("diary_create_started", image_count=len(references))
            body = encode_request(request)
            parts = []
            if references:
                if self._resolver is None:
                    msg = "images were given but no content resolver is configured"
                    raise ValueError(msg)
                parts = await asyncio.to_thread(
                    read_attachments, self._resolver, references
                )
            files = build_multipart(
                body, parts, self.json_part_name, self.image_part_name
            )
        except AttachmentReadError as e:
            return self._failed(log, e)
        except Exception as e:
            return self._failed(log, unexpected(e))

        return await self._exchange(
            log,
            "POST",
            f"/users/{owner_id}/diaries",
            decode_record,
            files=files,
            failure_message=_create_failure_message,
            body_failure_message=_create_failure_message,
        )

    async def list_diaries(
        self,
        owner_id: int,
        status: VisibilityStatus,
        page: int = 0,
        size: int | None = None,
    ) -> SyncResult[Page[DiaryRecord]]:
        """Fetch one zero-indexed page of diaries visible under ``status``.

        Returns:
            Success with the page, or Failure
        """
        size = self.default_page_size if size is None else size
        log = logger.bind(operation="list", owner_id=owner_id, page=page, size=size)

        try:
            if page < 0 or size < 1:
                msg = f"invalid page {page} / size {size}"
                raise ValueError(msg)
            params = {"status": encode_status(status), "page": page, "size": size}
        except Exception as e:
            return self._failed(log, unexpected(e))

        result = await self._exchange(
            log,
            "GET",
            f"/users/{owner_id}/diaries",
            decode_page,
            params=params,
        )
        if isinstance(result, Success):
            log.info(
                "diary_page_loaded",
                count=len(result.value.content),
                total_elements=result.value.total_elements,
            )
        return result

    async def delete_diary(
        self, owner_id: int, diary_id: int
    ) -> SyncResult[Confirmation]:
        """Delete a diary entry."""
        log = logger.bind(operation="delete", owner_id=owner_id, diary_id=diary_id)
        return await self._exchange(
            log,
            "DELETE",
            f"/users/{owner_id}/diaries/{diary_id}",
            decode_confirmation,
        )

    async def like_diary(self, owner_id: int, diary_id: int) -> SyncResult[Confirmation]:
        """Mark a diary as liked by ``owner_id``.

        The client never infers toggle direction; callers choose between
        ``like_diary`` and ``unlike_diary``.
        """
        log = logger.bind(operation="like", owner_id=owner_id, diary_id=diary_id)
        return await self._exchange(
            log,
            "POST",
            f"/users/{owner_id}/diaries/{diary_id}/like",
            decode_confirmation,
        )

    async def unlike_diary(
        self, owner_id: int, diary_id: int
    ) -> SyncResult[Confirmation]:
        """Remove the like of ``owner_id`` from a diary."""
        log = logger.bind(operation="unlike", owner_id=owner_id, diary_id=diary_id)
        return await self._exchange(
            log,
            "DELETE",
            f"/users/{owner_id}/diaries/{diary_id}/like",
            decode_confirmation,
        )

    async def _exchange(
        self,
        log: Any,
        method: str,
        path: str,
        decoder: Callable[[bytes], T],
        *,
        params: dict[str, Any] | None = None,
        files: list[tuple[str, Any]] | None = None,
        failure_message: Callable[[httpx.Response], str] = _status_failure_message,
        body_failure_message: Callable[[httpx.Response], str] = _body_failure_message,
    ) -> SyncResult[T]:
        """Send one request and classify the response."""
        try:
            response = await self._http.request(method, path, params=params, files=files)
        except TransportFailure as e:
            return self._failed(log, e)
        except Exception as e:
            return self._failed(log, unexpected(e))

        if not response.is_success:
            return self._failed(
                log,
                ApplicationError(
                    failure_message(response),
                    status_code=response.status_code,
                    error_text=response.text or None,
                ),
            )

        if is_null_body(response.content):
            return self._failed(
                log,
                ApplicationError(
                    body_failure_message(response),
                    status_code=response.status_code,
                    error_code=ErrorCode.APP_EMPTY_BODY.value,
                ),
            )

        try:
            value = decoder(response.content)
        except DecodeError as e:
            if e.error_code == ErrorCode.DEC_INVALID_JSON.value:
                # plain text or HTML instead of JSON
                return self._failed(
                    log,
                    ApplicationError(
                        body_failure_message(response),
                        status_code=response.status_code,
                        error_text=response.text,
                        error_code=ErrorCode.APP_UNPARSEABLE_BODY.value,
                    ),
                )
            return self._failed(log, e)
        except Exception as e:
            return self._failed(log, unexpected(e))

        log.info("diary_request_succeeded", status=response.status_code)
        return Success(value)

    @staticmethod
    def _failed(log: Any, error: DiarySyncError) -> Failure:
        log.warning(
            "diary_request_failed",
            error=error.message,
            error_code=error.error_code,
            error_type=type(error).__name__,
        )
        return Failure(error)

    async def aclose(self) -> None:
        """Close the underlying HTTP transport."""
        await self._http.aclose()

    async def __aenter__(self) -> DiarySyncClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
