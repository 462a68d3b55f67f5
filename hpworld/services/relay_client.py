from typing import Optional

import httpx

from hpworld.config.app_config import RELAY_URL
from hpworld.models.errors import NetworkError, RelayError
from hpworld.utils.logger import get_logger

logger = get_logger("relay_client")


class RelayClient:
    """Posts a form payload to the relay endpoint (POST /api/save)."""

    def __init__(self, url: str = None, client: Optional[httpx.AsyncClient] = None):
        self.url = url or RELAY_URL
        self._client = client

    async def _post(self, payload: dict) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self.url, json=payload)
        async with httpx.AsyncClient() as client:
            return await client.post(self.url, json=payload)

    async def save(self, payload: dict) -> None:
        try:
            resp = await self._post(payload)
        except httpx.HTTPError as e:
            raise NetworkError(f"Relay unreachable: {e}") from e

        logger.info("Relay response status: %s", resp.status_code)
        try:
            result = resp.json()
        except ValueError as e:
            raise NetworkError(f"Unreadable relay response ({resp.status_code})") from e

        if not isinstance(result, dict):
            raise NetworkError(f"Unreadable relay response ({resp.status_code})")
        if not result.get("success"):
            raise RelayError(result.get("error") or "Unknown error")
