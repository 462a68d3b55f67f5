import secrets
from typing import Callable, Optional

import httpx

from hpworld.config.app_config import COUPON_CONFIG
from hpworld.models.errors import DownstreamError, NetworkError
from hpworld.models.schema import CouponRequest
from hpworld.utils.logger import get_logger

logger = get_logger("coupon_client")

CAMPAIGN_MAP = {
    "Desktop & Laptops": "C100190",
    "Printers": "C100182",
    "Accessories": "C100184",
    "Other": "C100184",
}
DEFAULT_CAMPAIGN_ID = "C100183"


def resolve_campaign(interest: Optional[str]) -> str:
    return CAMPAIGN_MAP.get(interest, DEFAULT_CAMPAIGN_ID)


def new_request_id() -> str:
    """Fresh numeric request id, one per coupon call."""
    return str(secrets.randbelow(9 * 10 ** 11) + 10 ** 11)


class CouponClient:
    def __init__(
        self,
        url: str = None,
        channel_id: str = None,
        program_id: str = None,
        request_ids: Callable[[], str] = new_request_id,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url or COUPON_CONFIG["url"]
        self.channel_id = channel_id or COUPON_CONFIG["channel_id"]
        self.program_id = program_id or COUPON_CONFIG["program_id"]
        self.request_ids = request_ids
        self._client = client

    def build_request(self, mobile: str, campaign_id: str) -> CouponRequest:
        return CouponRequest(
            channel_id=self.channel_id,
            request_id=self.request_ids(),
            campaign_id=campaign_id,
            issuer_mobile_no=mobile,
            program_id=self.program_id,
        )

    async def _post(self, payload: dict) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self.url, json=payload)
        async with httpx.AsyncClient() as client:
            return await client.post(self.url, json=payload)

    async def issue(self, request: CouponRequest) -> str:
        """Send one coupon request and return the issued coupon code.

        Raises:
            NetworkError: the call could not be completed.
            DownstreamError: non-success status, or no coupon code in the body.
        """
        payload = request.model_dump(by_alias=True)
        logger.info("Coupon API payload: %s", payload)
        try:
            resp = await self._post(payload)
        except httpx.HTTPError as e:
            raise NetworkError(f"Coupon API unreachable: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            body = {}
        logger.info("Coupon API response %s: %s", resp.status_code, body)

        data = body.get("data") if isinstance(body, dict) else None
        code = data.get("couponCode") if isinstance(data, dict) else None
        if resp.is_success and code:
            return code
        message = body.get("responseMessage") if isinstance(body, dict) else None
        raise DownstreamError(message or "No coupon code received", status_code=resp.status_code)
