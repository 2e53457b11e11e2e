"""HTTP client for the profile picture storage service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from authsrv.domain.account import FileStoragePort

if TYPE_CHECKING:
    from authsrv_config.settings import Settings

logger = logging.getLogger(__name__)


class FileStorageClient(FileStoragePort):
    """Best-effort client for ``DELETE /upload/profile/{filename}``.

    Disabled when no base URL is configured. Every failure is logged and
    reported as ``False``; nothing is raised to the caller.
    """

    def __init__(
        self,
        base_url: str | None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/") if base_url else None
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> FileStorageClient:
        return cls(
            base_url=settings.upload_server_url,
            timeout=settings.upload_server_timeout,
        )

    @property
    def enabled(self) -> bool:
        return self._base_url is not None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url or "",
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def delete_profile_picture(self, filename: str, user_id: int) -> bool:
        if not self.enabled:
            logger.debug("File storage disabled, keeping file %s", filename)
            return False

        name = filename.rsplit("/", 1)[-1]
        try:
            client = await self._get_client()
            response = await client.request(
                "DELETE",
                f"/upload/profile/{name}",
                json={"user_id": user_id},
            )
            response.raise_for_status()
        except httpx.ConnectError as e:
            logger.warning("File storage connection failed: %s", e)
            return False
        except httpx.TimeoutException as e:
            logger.warning("File storage timeout: %s", e)
            return False
        except httpx.HTTPStatusError as e:
            logger.warning(
                "File storage returned error %d for %s: %s",
                e.response.status_code,
                name,
                e.response.text[:200] if e.response.text else "no body",
            )
            return False
        except Exception as e:
            logger.warning(
                "Profile picture delete failed (%s): %s",
                type(e).__name__,
                e,
            )
            return False

        logger.info("Deleted profile picture %s: %s", name, response.text[:200])
        return True
