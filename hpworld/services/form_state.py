"""
Headless state for the signup form.

Mirrors what the browser form does: per-field validation on every change,
the "Other" interest free-text input, the disabled state of the submit button,
and the transition to the thank-you view once a submission succeeds.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

from hpworld.models.errors import ValidationError
from hpworld.models.schema import OTHER_INTEREST, FormData, SubmissionResult, unique_interests
from hpworld.services.submission import SubmissionOrchestrator
from hpworld.services.validators import FIELDS, REQUIRED_FIELDS, validate, validate_all
from hpworld.utils.logger import get_logger
from hpworld.utils.qrcode import generate_qr_png

logger = get_logger("form_state")

THANK_YOU_TITLE = "Thank You!"
THANK_YOU_MESSAGE = "You will receive your Gift Voucher on given whatsapp number."


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


@dataclass
class Voucher:
    coupon_code: str
    mobile: str
    qr_png: bytes


@dataclass
class Confirmation:
    title: str = THANK_YOU_TITLE
    message: str = THANK_YOU_MESSAGE
    vouchers: List[Voucher] = field(default_factory=list)


class FormController:
    def __init__(self, data: FormData = None):
        self.data = data or FormData()
        self.errors: Dict[str, Optional[str]] = {}
        self.other_interest = ""
        self.state = FormState.EDITING
        self.alert: Optional[str] = None
        self.result: Optional[SubmissionResult] = None

    @property
    def values(self) -> dict:
        return self.data.to_wire()

    @property
    def shows_other_input(self) -> bool:
        return OTHER_INTEREST in self.data.interests

    def set_field(self, name: str, value) -> Optional[str]:
        """Update one field (wire name) and merge its fresh error into the map."""
        if name not in FIELDS:
            raise KeyError(name)
        if name == "interests":
            self.select_interests(value)
            return None
        values = self.values
        values[name] = value
        self.data = FormData.model_validate(values)
        error = validate(name, self.values[name])
        self.errors[name] = error
        return error

    def select_interests(self, interests: Iterable[str]) -> None:
        if isinstance(interests, str):
            interests = [interests]
        self.data = self.data.model_copy(update={"interests": unique_interests(interests)})
        if not self.shows_other_input:
            self.other_interest = ""
        self.errors["interests"] = None

    def toggle_interest(self, interest: str) -> None:
        current = list(self.data.interests)
        if interest in current:
            current.remove(interest)
        else:
            current.append(interest)
        self.select_interests(current)

    def set_other_interest(self, text: str) -> None:
        self.other_interest = text

    def is_form_valid(self) -> bool:
        values = self.values
        for name in REQUIRED_FIELDS:
            if values[name].strip() == "" or validate(name, values[name]):
                return False
        return not any(self.errors.values())

    @property
    def can_submit(self) -> bool:
        return self.state == FormState.EDITING and self.is_form_valid()

    async def submit(self, orchestrator: SubmissionOrchestrator) -> SubmissionResult:
        if self.state != FormState.EDITING:
            raise ValidationError(f"Cannot submit while {self.state.value}")
        self.errors = {name: None for name in FIELDS}
        self.errors.update(validate_all(self.data))
        if not self.can_submit:
            raise ValidationError("Please correct the highlighted fields")

        self.state = FormState.SUBMITTING
        self.alert = None
        try:
            result = await orchestrator.submit(self.data, self.other_interest)
        except Exception:
            self.state = FormState.EDITING
            raise
        self.result = result

        if result.success:
            self.state = FormState.SUBMITTED
            logger.info("Form submission successful, interests: %s", result.interests)
        else:
            self.state = FormState.EDITING
            self.alert = result.error
        return result

    @property
    def confirmation(self) -> Optional[Confirmation]:
        if self.state != FormState.SUBMITTED:
            return None
        vouchers = [
            Voucher(coupon_code=c.coupon_code, mobile=c.mobile, qr_png=generate_qr_png(c.coupon_code))
            for c in self.result.coupons
            if c.issued
        ]
        return Confirmation(vouchers=vouchers)
