from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union

INTEREST_OPTIONS = ["Desktop & Laptops", "Printers", "Accessories", "Other"]
OTHER_INTEREST = "Other"
AGE_GROUPS = ["0-12", "12-18", "18-35", "35-60", "60+"]


class FormData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    mobile: str = ""
    email: str = ""
    interests: List[str] = Field(default_factory=list)
    age_group: str = ""
    occupation: str = ""
    pin_code: str = ""
    referred_by: str = ""

    @field_validator("name", "mobile", "email", "age_group", "occupation", "pin_code", "referred_by", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("interests", mode="before")
    @classmethod
    def _interest_set(cls, value: Union[None, str, List[str]]) -> List[str]:
        # A single-select value is the one-element case of the set
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        return unique_interests(value)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class UserEntry(FormData):
    id: str
    timestamp: str


class CouponRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    channel_id: str = Field(alias="channelID")
    request_id: str = Field(alias="requestID")
    campaign_id: str = Field(alias="campaignID")
    issuer_mobile_no: str = Field(alias="issuerMobileNo")
    program_id: str = Field(alias="programID")


class CouponOutcome(BaseModel):
    mobile: str
    interest: Optional[str] = None
    campaign_id: str
    request_id: Optional[str] = None
    coupon_code: Optional[str] = None
    error: Optional[str] = None
    is_referral: bool = False

    @property
    def issued(self) -> bool:
        return self.coupon_code is not None


class SubmissionResult(BaseModel):
    success: bool
    error: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    coupons: List[CouponOutcome] = Field(default_factory=list)


def unique_interests(values) -> List[str]:
    """Ordered, de-duplicated interests. Blank strings mean no interest."""
    seen = []
    for value in values:
        if isinstance(value, str) and not value.strip():
            continue
        if value not in seen:
            seen.append(value)
    return seen
