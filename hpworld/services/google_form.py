from typing import Dict, List, Optional, Union

import httpx

from hpworld.config.app_config import GOOGLE_FORM_URL, google_form_config
from hpworld.models.schema import UserEntry
from hpworld.services.best_effort import StepSkipped
from hpworld.utils.logger import get_logger

logger = get_logger("google_form")

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded;charset=UTF-8"}


def build_form_fields(entry: UserEntry, entries: dict) -> Dict[str, Union[str, List[str]]]:
    """Map an entry onto `entry.<id>` fields. Unmapped or empty values are left out."""
    wire = entry.to_wire()
    fields = {}
    for field, entry_id in entries.items():
        value = wire.get(field)
        if field == "interests":
            # Checkbox questions take one repeated field per choice
            value = [interest for interest in value if interest]
        if value:
            fields[f"entry.{entry_id}"] = value
    return fields


class GoogleFormForwarder:
    def __init__(self, config: dict = None, client: Optional[httpx.AsyncClient] = None):
        self._config = config
        self._client = client

    @property
    def config(self) -> dict:
        return self._config if self._config is not None else google_form_config()

    async def forward(self, entry: UserEntry) -> int:
        """POST the entry to the configured Google Form and return the HTTP status.

        Raises StepSkipped when the form id or the name/mobile entries are not
        configured. Any status is tolerated; Google Forms usually answers 200
        or a 302 redirect.
        """
        config = self.config
        form_id = config.get("form_id")
        entries = config.get("entries", {})
        if not (form_id and entries.get("name") and entries.get("mobile")):
            raise StepSkipped("Google Forms env vars missing")

        url = GOOGLE_FORM_URL.format(form_id=form_id)
        fields = build_form_fields(entry, entries)
        if self._client is not None:
            resp = await self._client.post(url, data=fields, headers=FORM_HEADERS)
        else:
            async with httpx.AsyncClient() as client:
                resp = await client.post(url, data=fields, headers=FORM_HEADERS)

        if resp.status_code >= 400:
            logger.warning("Google Forms submission status: %s", resp.status_code)
        else:
            logger.info("Google Forms submission status: %s", resp.status_code)
        return resp.status_code
