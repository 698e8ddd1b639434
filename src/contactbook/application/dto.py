"""Result types for contact creation."""

from dataclasses import dataclass

from contactbook.domain import Contact


@dataclass(frozen=True)
class ContactAdded:
    """Contact was created and stored."""

    contact: Contact


@dataclass(frozen=True)
class Invalid:
    """Contact was rejected (e.g. missing first name). Nothing was stored."""

    field: str
    reason: str
