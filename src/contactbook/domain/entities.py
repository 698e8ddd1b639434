"""Domain entities: Contact."""

from dataclasses import dataclass, fields

from contactbook.domain.errors import InvalidContactError


@dataclass(frozen=True)
class Contact:
    """
    A person's first name, last name and phone number.
    A Contact is immutable once created and cannot hold a missing field.
    """

    first_name: str
    last_name: str
    phone_number: str

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) is None:
                raise InvalidContactError(f.name)
