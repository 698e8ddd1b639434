"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.csv_source import load_contacts_csv
from contactbook.infrastructure.memory_store import InMemoryContactStore
from contactbook.infrastructure.phone import (
    PhoneValidator,
    normalize_phone,
    parse_phone,
    phone_validator,
)

__all__ = [
    "InMemoryContactStore",
    "PhoneValidator",
    "load_contacts_csv",
    "normalize_phone",
    "parse_phone",
    "phone_validator",
]
