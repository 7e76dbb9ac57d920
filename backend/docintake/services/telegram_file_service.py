"""
Telegram File Service - fetches uploaded file bytes from the bot file endpoint.

One GET per call against <base>/file/bot<token>/<remote_path>. No caching,
no retries, no timeout beyond the HTTP client's default.
"""
from typing import Optional
import httpx
from ..api.exceptions import DownloadFailed
from ..core.config import ProcessorConfig
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class TelegramFileClient:
    """Downloads raw file content for an opaque Telegram file path."""

    def __init__(self, config: ProcessorConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            config: Processor configuration (token and base URL)
            transport: Optional httpx transport, used to plug in a fake server
        """
        self._token = config.bot_token
        self._base_url = config.api_base_url
        self._transport = transport

    def build_file_url(self, remote_path: str) -> str:
        return f"{self._base_url}/file/bot{self._token}/{remote_path.lstrip('/')}"

    def _redacted_url(self, remote_path: str) -> str:
        return f"{self._base_url}/file/bot***/{remote_path.lstrip('/')}"

    async def download(self, remote_path: str) -> bytes:
        """
        Fetch the bytes of a hosted file.

        Args:
            remote_path: File path reported by the bot platform

        Returns:
            Response body as bytes

        Raises:
            DownloadFailed: On any transport error or non-2xx status
        """
        url = self.build_file_url(remote_path)
        logger.debug(f"Downloading {self._redacted_url(remote_path)}")
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                content = response.content
        except httpx.HTTPStatusError as e:
            logger.error(
                f"❌ Error downloading file from Telegram: {self._redacted_url(remote_path)} "
                f"returned HTTP {e.response.status_code}"
            )
            raise DownloadFailed() from e
        except httpx.HTTPError as e:
            logger.error(
                f"❌ Error downloading file from Telegram: {self._redacted_url(remote_path)}: "
                f"{type(e).__name__}",
                exc_info=True
            )
            raise DownloadFailed() from e

        logger.debug(f"Downloaded {len(content)} bytes from {self._redacted_url(remote_path)}")
        return content
