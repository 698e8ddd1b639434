"""Domain layer: entities and errors. No dependencies on outer layers."""

from contactbook.domain.entities import Contact
from contactbook.domain.errors import InvalidContactError

__all__ = ["Contact", "InvalidContactError"]
