"""Phone number checks for the contact registry, backed by phonenumbers."""

import phonenumbers


def parse_phone(raw: str, region: str | None) -> phonenumbers.PhoneNumber | None:
    """Parse raw as dialled from region. None when it is blank, unparsable or not a real number."""
    text = (raw or "").strip()
    if not text:
        return None
    try:
        parsed = phonenumbers.parse(text, region)
    except phonenumbers.NumberParseException:
        return None
    return parsed if phonenumbers.is_valid_number(parsed) else None


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """E.164 form of raw (e.g. "0456 773 223" in AU -> "+61456773223"), or None."""
    parsed = parse_phone(raw, default_region)
    if parsed is None:
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


class PhoneValidator:
    """Accepts phone numbers that are valid when dialled from one region.

    National numbers ("0456773223") are read in that region; numbers with a
    "+" country code are accepted from any country.
    """

    def __init__(self, region: str) -> None:
        region = region.strip().upper()
        if region not in phonenumbers.SUPPORTED_REGIONS:
            raise ValueError(f"Unknown phone region: {region!r}")
        self.region = region

    def __call__(self, phone_number: str) -> bool:
        return parse_phone(phone_number, self.region) is not None

    def __repr__(self) -> str:
        return f"PhoneValidator(region={self.region!r})"


def phone_validator(default_region: str) -> PhoneValidator:
    """Validator for ContactManager. Raises ValueError for an unknown region code."""
    return PhoneValidator(default_region)
