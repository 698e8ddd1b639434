"""
Load contacts from a CSV file into one registry session and print them.
Run: python -m contactbook contacts.csv
"""

import logging
import sys

from contactbook import ContactAdded, create_contact_manager
from contactbook.config import load_settings
from contactbook.infrastructure import load_contacts_csv

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: python -m contactbook <contacts.csv>", file=sys.stderr)
        return 2
    csv_path = args[0]

    try:
        settings = load_settings()
        manager = create_contact_manager(default_region=settings.default_region)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )

    try:
        rows = load_contacts_csv(csv_path)
    except (OSError, ValueError) as e:
        print(f"Cannot read {csv_path}: {e}", file=sys.stderr)
        return 2

    rejected = 0
    for first, last, phone in rows:
        result = manager.try_add_contact(first, last, phone)
        if not isinstance(result, ContactAdded):
            rejected += 1

    for contact in manager.get_all_contacts():
        print(f"{contact.first_name} {contact.last_name}\t{contact.phone_number}")
    logger.info("Loaded %d contacts, rejected %d", len(manager), rejected)
    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
