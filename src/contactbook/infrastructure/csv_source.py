"""Read contact rows (first_name,last_name,phone_number) from a CSV file."""

import csv
from pathlib import Path

HEADER = ("first_name", "last_name", "phone_number")


def load_contacts_csv(path: str | Path) -> list[tuple[str, str, str]]:
    """Return rows as (first, last, phone) strings. Header, blank and '#' lines are skipped.

    Values are kept as text so phone numbers keep their leading zeros. A leading
    byte-order mark (as written by spreadsheet exports) is ignored.
    """
    rows = []
    with open(path, newline="", encoding="utf-8-sig") as f:
        for lineno, row in enumerate(csv.reader(f), start=1):
            cells = [c.strip() for c in row]
            if not cells or not any(cells) or cells[0].startswith("#"):
                continue
            if tuple(c.lower() for c in cells) == HEADER:
                continue
            if len(cells) != 3:
                raise ValueError(
                    f"{path}:{lineno}: expected 3 columns, got {len(cells)}."
                )
            rows.append((cells[0], cells[1], cells[2]))
    return rows
