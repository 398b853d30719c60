"""End-to-end conversion from Markdown files on disk."""

from __future__ import annotations

import csv
from pathlib import Path

from casemd.case_extraction import Source
from casemd.conversion import convert_to_csv, convert_to_workbook
from casemd.row_projection import SPREADSHEET_HEADERS
from openpyxl import load_workbook

LOGIN_SHEET = """# Login inspection

## Authentication
### Password login
#### Valid credentials
1. Open the login page
2. Submit a known user
* [ ] Dashboard is shown
* [ ] Session cookie is set

#### Locked account
1. Submit a locked user
* [ ] Lockout message is shown
"""

PAYMENT_SHEET = """# Payment inspection

## Checkout
#### Card payment
1. Pay with a test card
* [x] Receipt is emailed
"""


def _write_sources(tmp_path: Path) -> list[Path]:
    login = tmp_path / "login.md"
    payment = tmp_path / "nested" / "payment.md"
    duplicate = tmp_path / "other" / "login.md"
    for path, content in ((login, LOGIN_SHEET), (payment, PAYMENT_SHEET), (duplicate, "")):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return [login, payment, duplicate]


def _open_sources(paths: list[Path]) -> list[Source]:
    return [Source(name=str(path), content=path.read_bytes()) for path in paths]


def test_workbook_contains_a_sheet_per_file(tmp_path: Path) -> None:
    output_path = tmp_path / "inspection.xlsx"

    with output_path.open("wb") as handle:
        convert_to_workbook(_open_sources(_write_sources(tmp_path)), handle)

    workbook = load_workbook(output_path)
    assert workbook.sheetnames == ["login", "payment", "login_2"]

    login = workbook["login"]
    assert [cell.value for cell in login[1]] == list(SPREADSHEET_HEADERS)
    assert login.max_row == 3
    assert login["A2"].value == "Authentication"
    assert login["B2"].value == "Password login"
    assert login["C3"].value == "Locked account"
    assert login["D2"].value == "Open the login page\nSubmit a known user"
    assert login["E2"].value == "* [ ] Dashboard is shown\n* [ ] Session cookie is set"
    assert login["F2"].value is None

    payment = workbook["payment"]
    assert payment["B2"].value is None
    assert payment["E2"].value == "* [x] Receipt is emailed"

    assert workbook["login_2"].max_row == 1


def test_csv_concatenates_every_file(tmp_path: Path) -> None:
    output_path = tmp_path / "inspection.csv"

    with output_path.open("w", encoding="utf-8", newline="") as handle:
        convert_to_csv(_open_sources(_write_sources(tmp_path)), handle)

    with output_path.open(encoding="utf-8", newline="") as handle:
        records = list(csv.reader(handle))

    assert records[0] == list(SPREADSHEET_HEADERS)
    assert [record[2] for record in records[1:]] == [
        "Valid credentials",
        "Locked account",
        "Card payment",
    ]
    assert all(len(record) == len(SPREADSHEET_HEADERS) for record in records)
