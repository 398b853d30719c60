"""Google Sheets HTTP client."""

from __future__ import annotations

import logging

import httpx

from .spreadsheet_models import RemoteSpreadsheet
from .spreadsheet_payload import build_spreadsheet_payload

DEFAULT_SHEETS_ENDPOINT = "https://sheets.googleapis.com/v4/spreadsheets"
DEFAULT_TIMEOUT_SECONDS = 30
ERROR_BODY_LIMIT = 4096

logger = logging.getLogger(__name__)


class SheetsApiError(Exception):
    """Raised when the Sheets API rejects or garbles a request."""


class GoogleSheetsClient:  # pylint: disable=too-few-public-methods
    """Creates spreadsheets through the Google Sheets REST API.

    The access token must grant the ``https://www.googleapis.com/auth/spreadsheets``
    scope.
    """

    def __init__(
        self,
        access_token: str,
        *,
        endpoint: str = DEFAULT_SHEETS_ENDPOINT,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not access_token:
            raise ValueError("Missing Google Sheets access token.")
        self._access_token = access_token
        self._endpoint = endpoint
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client

    def create_spreadsheet(self, spreadsheet: RemoteSpreadsheet) -> str:
        payload = build_spreadsheet_payload(spreadsheet)
        headers = {"Authorization": f"Bearer {self._access_token}"}
        logger.debug(
            "Creating spreadsheet %r with %d sheets", spreadsheet.title, len(payload["sheets"])
        )

        try:
            if self._http_client is not None:
                response = self._http_client.post(self._endpoint, json=payload, headers=headers)
            else:
                with httpx.Client(timeout=self._timeout_seconds) as client:
                    response = client.post(self._endpoint, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise SheetsApiError(f"Call Google Sheets API: {exc}") from exc

        if response.status_code not in (200, 201):
            message = response.text[:ERROR_BODY_LIMIT].strip()
            if message:
                raise SheetsApiError(
                    f"Google Sheets API error ({response.status_code}): {message}"
                )
            raise SheetsApiError(f"Google Sheets API error ({response.status_code})")

        try:
            body = response.json()
        except ValueError as exc:
            raise SheetsApiError(f"Decode Google Sheets response: {exc}") from exc
        spreadsheet_id = body.get("spreadsheetId") if isinstance(body, dict) else None
        if not spreadsheet_id:
            raise SheetsApiError("Google Sheets response missing spreadsheetId.")

        logger.info("Created Google Spreadsheet %s", spreadsheet_id)
        return str(spreadsheet_id)
