"""Tests for the Contact entity."""

import dataclasses

import pytest

from contactbook.domain import Contact, InvalidContactError


def test_contact_equality_by_field_values():
    assert Contact("Sanjay", "Sahu", "0456773223") == Contact(
        first_name="Sanjay", last_name="Sahu", phone_number="0456773223"
    )
    assert Contact("Sanjay", "Sahu", "0456773223") != Contact("Sanjay", "Sahu", "0456773224")


def test_contact_is_immutable():
    contact = Contact("Sanjay", "Sahu", "0456773223")
    with pytest.raises(dataclasses.FrozenInstanceError):
        contact.phone_number = "0123456789"


@pytest.mark.parametrize("field", ["first_name", "last_name", "phone_number"])
def test_contact_rejects_none_field(field):
    values = {"first_name": "Sanjay", "last_name": "Sahu", "phone_number": "0456773223"}
    values[field] = None
    with pytest.raises(InvalidContactError) as exc:
        Contact(**values)
    assert exc.value.field == field
    assert field in str(exc.value)


def test_error_reason_override():
    err = InvalidContactError("phone_number", "Invalid phone number: 'abc'.")
    assert err.field == "phone_number"
    assert str(err) == "Invalid phone number: 'abc'."
