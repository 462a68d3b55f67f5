import asyncio
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from hpworld.models.errors import ValidationError
from hpworld.models.schema import FormData, UserEntry
from hpworld.services.best_effort import StepOutcome, best_effort_async
from hpworld.services.google_form import GoogleFormForwarder
from hpworld.services.repository import UserEntryRepository
from hpworld.services.validators import is_valid_email, is_valid_mobile, is_valid_pin_code
from hpworld.utils.logger import get_logger

logger = get_logger("relay")


@dataclass
class RelayReceipt:
    entry: UserEntry
    snapshot: StepOutcome
    forward: StepOutcome


def check_payload(data: FormData) -> None:
    """Server-side re-validation of a submission. Raises ValidationError."""
    if not data.name.strip() or not data.mobile.strip():
        raise ValidationError("Missing required fields")
    if not is_valid_mobile(data.mobile):
        raise ValidationError("Invalid mobile number format", field="mobile")
    if data.email.strip() and not is_valid_email(data.email):
        raise ValidationError("Invalid email format", field="email")
    if data.pin_code.strip() and not is_valid_pin_code(data.pin_code):
        raise ValidationError("Invalid PIN code format", field="pinCode")
    if data.referred_by.strip() and not is_valid_mobile(data.referred_by):
        raise ValidationError("Invalid referred by mobile number format", field="referredBy")


def new_entry(data: FormData) -> UserEntry:
    return UserEntry(
        **data.model_dump(),
        id=uuid.uuid4().hex,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


class RelayService:
    def __init__(self, repository: UserEntryRepository, forwarder: GoogleFormForwarder):
        self.repository = repository
        self.forwarder = forwarder

    async def accept(self, data: FormData) -> RelayReceipt:
        check_payload(data)

        entry = new_entry(data)
        self.repository.append(entry)
        logger.info("Accepted entry %s (%d stored)", entry.id, len(self.repository))

        snapshot = await best_effort_async("local snapshot", asyncio.to_thread, self.repository.snapshot)
        forward = await best_effort_async("google form forward", self.forwarder.forward, entry)
        return RelayReceipt(entry=entry, snapshot=snapshot, forward=forward)
