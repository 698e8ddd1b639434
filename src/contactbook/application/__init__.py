"""Application layer: the contact registry, ports, and result types. Depends only on domain."""

from contactbook.application.contact_manager import ContactManager
from contactbook.application.dto import ContactAdded, Invalid
from contactbook.application.ports import ContactStore

__all__ = [
    "ContactAdded",
    "ContactManager",
    "ContactStore",
    "Invalid",
]
