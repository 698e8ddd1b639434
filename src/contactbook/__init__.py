"""
Contactbook core: clean-architecture layout.

- domain: Contact entity and InvalidContactError. No outer dependencies.
- application: the registry (ContactManager), ports (ContactStore), result types.
- infrastructure: adapters (InMemoryContactStore, phone validation, CSV rows).
"""

from contactbook.application import (
    ContactAdded,
    ContactManager,
    ContactStore,
    Invalid,
)
from contactbook.domain import Contact, InvalidContactError
from contactbook.infrastructure import InMemoryContactStore, phone_validator


def create_contact_manager(default_region: str | None = None) -> ContactManager:
    """Start a new, empty registry session backed by memory.

    With default_region set, phone numbers must be valid for that region.
    """
    validator = phone_validator(default_region) if default_region else None
    return ContactManager(InMemoryContactStore(), phone_validator=validator)


__all__ = [
    "Contact",
    "ContactAdded",
    "ContactManager",
    "ContactStore",
    "InMemoryContactStore",
    "Invalid",
    "InvalidContactError",
    "create_contact_manager",
]
