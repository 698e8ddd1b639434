"""Contact registry: add and list. One store per registry session."""

import logging
from collections.abc import Callable

from contactbook.application.dto import ContactAdded, Invalid
from contactbook.application.ports import ContactStore
from contactbook.domain import Contact, InvalidContactError

logger = logging.getLogger(__name__)


class ContactManager:
    """Registry of contacts: add_contact validates and appends, get_all_contacts lists in order."""

    def __init__(
        self,
        store: ContactStore,
        *,
        phone_validator: Callable[[str], bool] | None = None,
    ) -> None:
        self._store = store
        self._phone_validator = phone_validator

    def add_contact(
        self, first_name: str, last_name: str, phone_number: str
    ) -> Contact:
        """Create a contact and store it. Raises InvalidContactError; store is left unchanged."""
        try:
            contact = Contact(
                first_name=first_name,
                last_name=last_name,
                phone_number=phone_number,
            )
            if self._phone_validator and not self._phone_validator(phone_number):
                raise InvalidContactError(
                    "phone_number", f"Invalid phone number: {phone_number!r}."
                )
        except InvalidContactError as e:
            logger.warning("Rejected contact: %s", e.reason)
            raise

        self._store.add(contact)
        logger.debug(
            "Added contact %s %s (%d total)", first_name, last_name, len(self._store)
        )
        return contact

    def try_add_contact(
        self, first_name: str, last_name: str, phone_number: str
    ) -> ContactAdded | Invalid:
        """Like add_contact, but returns Invalid instead of raising."""
        try:
            contact = self.add_contact(first_name, last_name, phone_number)
        except InvalidContactError as e:
            return Invalid(field=e.field, reason=e.reason)
        return ContactAdded(contact=contact)

    def get_all_contacts(self) -> list[Contact]:
        """Return all contacts in insertion order (empty if none were added)."""
        return self._store.list_all()

    @property
    def count(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return self.count
