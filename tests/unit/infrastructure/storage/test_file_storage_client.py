"""Tests for FileStorageClient using httpx.MockTransport."""

import json

import httpx
import pytest

from authsrv.infrastructure.storage import FileStorageClient
from authsrv_config import Settings

BASE_URL = "http://storage.example.com"


class RecordingHandler:
    """Transport handler that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, text: str = "deleted"):
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)


def _client(handler) -> FileStorageClient:
    return FileStorageClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))


class TestDeleteProfilePicture:
    async def test_sends_delete_with_user_id_body(self):
        handler = RecordingHandler()
        client = _client(handler)

        assert await client.delete_profile_picture("avatar-1.png", user_id=7)

        request = handler.requests[0]
        assert request.method == "DELETE"
        assert str(request.url) == f"{BASE_URL}/upload/profile/avatar-1.png"
        assert json.loads(request.content) == {"user_id": 7}
        await client.close()

    async def test_url_qualified_filename_uses_basename(self):
        handler = RecordingHandler()
        client = _client(handler)

        await client.delete_profile_picture("https://cdn.example.com/uploads/a.png", 7)

        assert handler.requests[0].url.path == "/upload/profile/a.png"
        await client.close()

    @pytest.mark.parametrize("status_code", [404, 500])
    async def test_error_status_is_reported_not_raised(self, status_code):
        client = _client(RecordingHandler(status_code=status_code, text="nope"))

        assert await client.delete_profile_picture("a.png", 7) is False
        await client.close()

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("connection refused"),
            httpx.ReadTimeout("timed out"),
        ],
    )
    async def test_transport_failure_is_reported_not_raised(self, error):
        def handler(request: httpx.Request) -> httpx.Response:
            raise error

        client = _client(handler)

        assert await client.delete_profile_picture("a.png", 7) is False
        await client.close()

    async def test_disabled_without_base_url(self):
        client = FileStorageClient(base_url=None)

        assert not client.enabled
        assert await client.delete_profile_picture("a.png", 7) is False


class TestConstruction:
    def test_from_settings(self):
        settings = Settings(
            upload_server_url=f"{BASE_URL}/",
            upload_server_timeout=5.0,
            _env_file=None,
        )

        client = FileStorageClient.from_settings(settings)

        assert client.enabled

    def test_from_default_settings_is_disabled(self):
        assert not FileStorageClient.from_settings(Settings(_env_file=None)).enabled

    async def test_close_is_idempotent(self):
        client = _client(RecordingHandler())
        await client.delete_profile_picture("a.png", 7)

        await client.close()
        await client.close()
