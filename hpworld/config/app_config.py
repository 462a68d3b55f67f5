from dotenv import load_dotenv
import os

load_dotenv()

GOOGLE_FORM_URL = "https://docs.google.com/forms/d/e/{form_id}/formResponse"

# Form field -> env var holding the Google Form entry id
GOOGLE_ENTRY_ENV = {
    "name": "GOOGLE_ENTRY_NAME",
    "mobile": "GOOGLE_ENTRY_MOBILE",
    "email": "GOOGLE_ENTRY_EMAIL",
    "occupation": "GOOGLE_ENTRY_OCCUPATION",
    "interests": "GOOGLE_ENTRY_INTERESTS",
    "ageGroup": "GOOGLE_ENTRY_AGEGROUP",
    "pinCode": "GOOGLE_ENTRY_PINCODE",
    "referredBy": "GOOGLE_ENTRY_REFERRED_BY",
}

COUPON_CONFIG = {
    "url": os.getenv("COUPON_API_URL", "https://test-cms.apeirosai.com/cms/api/v1/issueCoupon"),
    "channel_id": os.getenv("COUPON_CHANNEL_ID", "WEB"),
    "program_id": os.getenv("COUPON_PROGRAM_ID", "81"),
}

RELAY_URL = os.getenv("RELAY_URL", "http://localhost:8000/api/save")


def google_form_config() -> dict:
    """Read the Google Form id and entry mapping from the environment.

    Read on every call so the forward step follows the live environment.
    Entries whose variable is unset or blank are left out.
    """
    entries = {}
    for field, env_name in GOOGLE_ENTRY_ENV.items():
        value = os.getenv(env_name, "").strip()
        if value:
            entries[field] = value
    return {
        "form_id": os.getenv("GOOGLE_FORM_ID", "").strip() or None,
        "entries": entries,
    }


def data_file_path() -> str:
    return os.getenv("DATA_FILE") or os.path.join(os.getcwd(), "data.json")
