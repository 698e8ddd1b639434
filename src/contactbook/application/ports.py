"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class ContactStore(Protocol):
    """Holds the contacts of one registry session."""

    def add(self, contact: Contact) -> None:
        """Append a contact."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        ...

    def __len__(self) -> int: ...
