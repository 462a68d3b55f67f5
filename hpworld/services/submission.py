from typing import List, Optional

from hpworld.models.errors import DownstreamError, NetworkError, RelayError
from hpworld.models.schema import OTHER_INTEREST, CouponOutcome, FormData, SubmissionResult, unique_interests
from hpworld.services.coupon_client import CouponClient, resolve_campaign
from hpworld.services.relay_client import RelayClient
from hpworld.utils.logger import get_logger

logger = get_logger("submission")

NETWORK_ALERT = "Network error occurred. Please try again."


def final_interests(interests: List[str], other_text: str = "") -> List[str]:
    """Replace "Other" in place with the user's own text (dropped when blank)."""
    custom = (other_text or "").strip()
    result = []
    for interest in interests:
        if interest == OTHER_INTEREST:
            if custom:
                result.append(custom)
        else:
            result.append(interest)
    return unique_interests(result)


class SubmissionOrchestrator:
    """Runs one form submission: relay first, then coupons one call at a time.

    The relay call decides the outcome. Coupon calls only run after the relay
    accepted the data, and a failed coupon call is recorded without stopping
    the ones after it.
    """

    def __init__(self, relay_client: RelayClient, coupon_client: CouponClient):
        self.relay_client = relay_client
        self.coupon_client = coupon_client

    async def submit(self, form: FormData, other_text: str = "") -> SubmissionResult:
        interests = final_interests(form.interests, other_text)
        payload = form.model_copy(update={"interests": interests}).to_wire()
        logger.info("Submitting form data: %s", payload)

        try:
            await self.relay_client.save(payload)
        except RelayError as e:
            logger.error("Relay submission failed: %s", e)
            return SubmissionResult(success=False, error=f"Submission failed: {e}", interests=interests)
        except NetworkError as e:
            logger.error("Network error: %s", e)
            return SubmissionResult(success=False, error=NETWORK_ALERT, interests=interests)

        # Campaigns follow the options picked, before "Other" is replaced
        selected: List[Optional[str]] = list(form.interests) or [None]
        coupons = []
        for interest in selected:
            coupons.append(await self._issue(form.mobile, interest))

        if form.referred_by.strip():
            coupons.append(await self._issue(form.referred_by, selected[0], is_referral=True))

        return SubmissionResult(success=True, interests=interests, coupons=coupons)

    async def _issue(self, mobile: str, interest: Optional[str], is_referral: bool = False) -> CouponOutcome:
        request = self.coupon_client.build_request(mobile, resolve_campaign(interest))
        outcome = CouponOutcome(
            mobile=mobile,
            interest=interest,
            campaign_id=request.campaign_id,
            request_id=request.request_id,
            is_referral=is_referral,
        )
        try:
            outcome.coupon_code = await self.coupon_client.issue(request)
            logger.info("Coupon %s issued to %s for %s", outcome.coupon_code, mobile, interest or "default")
        except (DownstreamError, NetworkError) as e:
            logger.error("Coupon issuance failed for %s (%s): %s", mobile, request.campaign_id, e)
            outcome.error = str(e)
        return outcome
