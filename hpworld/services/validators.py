import re
from typing import Dict, Optional

from hpworld.models.schema import FormData

NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
MOBILE_PATTERN = re.compile(r"^[6-9]\d{9}$", re.ASCII)
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PIN_CODE_PATTERN = re.compile(r"^\d{6}$", re.ASCII)

MOBILE_MESSAGE = "Enter valid 10-digit mobile number starting with 6-9"

# Wire names, as the form and the relay payload use them
FIELDS = ["name", "mobile", "email", "interests", "ageGroup", "occupation", "pinCode", "referredBy"]
REQUIRED_FIELDS = ["name", "mobile"]


def is_valid_mobile(value: str) -> bool:
    return MOBILE_PATTERN.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_pin_code(value: str) -> bool:
    return PIN_CODE_PATTERN.fullmatch(value) is not None


def validate(field: str, value) -> Optional[str]:
    """Return the error message for one field value, or None when it is valid."""
    if value is None:
        value = ""
    if field == "name":
        if value.strip() == "":
            return "Full Name is required"
        if not NAME_PATTERN.fullmatch(value):
            return "Full Name can only contain letters and spaces"
        return None
    if field == "mobile":
        if value == "":
            return "Mobile number is required"
        if not is_valid_mobile(value):
            return MOBILE_MESSAGE
        return None
    if field == "email":
        if value != "" and not is_valid_email(value):
            return "Enter a valid email address"
        return None
    if field == "pinCode":
        if value != "" and not is_valid_pin_code(value):
            return "Enter a valid 6-digit PIN code"
        return None
    if field == "referredBy":
        if value != "" and not is_valid_mobile(value):
            return MOBILE_MESSAGE
        return None
    # interests, ageGroup, occupation
    return None


def validate_all(data: FormData) -> Dict[str, str]:
    wire = data.to_wire()
    errors = {}
    for field in FIELDS:
        message = validate(field, wire[field])
        if message:
            errors[field] = message
    return errors
