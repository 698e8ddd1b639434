"""In-memory implementation of ContactStore (no persistence)."""

from contactbook.domain import Contact


class InMemoryContactStore:
    """Stores contacts in memory. Order preserved by insertion; discarded with the session."""

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def add(self, contact: Contact) -> None:
        self._contacts.append(contact)

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)
