"""Pytest configuration and fixtures for the test suite."""

from datetime import date

import pytest
import respx

from diary_sync.models.diary import DiaryRequest
from diary_sync.models.fields import VisibilityStatus
from diary_sync.sync.diary_client import DiarySyncClient
from diary_sync.transport.http_client import DiaryHttpClient
from tests.fixtures import MockContentResolver, MockDiaryClient

BASE_URL = "http://diary.test/api"


@pytest.fixture
def base_url():
    """Base URL every mocked route is registered under."""
    return BASE_URL


@pytest.fixture
def api():
    """Provide a respx router scoped to the diary API."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def content_resolver():
    """Provide an in-memory content resolver for testing."""
    return MockContentResolver()


@pytest.fixture
def http_client():
    """Provide an HTTP client pointed at the mocked API."""
    return DiaryHttpClient(BASE_URL, timeout=5.0)


@pytest.fixture
def sync_client(http_client, content_resolver):
    """Provide a sync client wired to the mocked API and resolver."""
    return DiarySyncClient(http_client, content_resolver)


@pytest.fixture
def mock_diary_client():
    """Provide a client whose like/unlike responses the test releases."""
    return MockDiaryClient()


@pytest.fixture
def sample_request():
    """Provide a diary request for testing."""
    return DiaryRequest(
        title="Harbour walk",
        content="Fog over the water, then sun.",
        date=date(2024, 5, 17),
        latitude=35.1028,
        longitude=129.0403,
        status=VisibilityStatus.PUBLIC,
    )


@pytest.fixture
def record_payload():
    """Provide a diary record as the server sends it."""
    return {
        "diaryId": 42,
        "userId": 7,
        "diaryTitle": "Harbour walk",
        "content": "Fog over the water, then sun.",
        "date": "2024-05-17",
        "latitude": 35.1028,
        "longitude": 129.0403,
        "status": "PUBLIC",
        "isLiked": False,
        "profileImage": {"url": "default.jpg"},
    }


@pytest.fixture
def page_payload(record_payload):
    """Provide a page of diary records as the server sends it."""
    second = {**record_payload, "diaryId": 43, "diaryTitle": "Night market", "isLiked": True}
    return {
        "content": [record_payload, second],
        "totalElements": 7,
        "totalPages": 4,
        "number": 0,
        "size": 2,
        "first": True,
        "last": False,
    }
