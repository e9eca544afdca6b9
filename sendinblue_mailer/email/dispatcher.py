from __future__ import annotations

"""POST a built payload to SendinBlue and classify the outcome.

- status <= 299: DeliveryResult
- status > 299: ApiError (with a redacted view of the request)
- no response at all: TransportError

No retries and no timeout of our own: a timeout is only applied when the
caller configured one.
"""

import json
from typing import Any

import requests

from sendinblue_mailer.config import FILTERED
from sendinblue_mailer.errors import ApiError, MissingApiKeyError, TransportError
from sendinblue_mailer.models import DeliveryResult


_SECRET_FIELDS = {"key", "api-key", "api_key"}


def require_api_key(api_key: str | None, options: dict[str, Any] | None = None) -> str:
    if api_key in (None, ""):
        raise MissingApiKeyError(options)
    return str(api_key)


def request_headers(api_key: str) -> dict[str, str]:
    return {"Content-Type": "application/json", "api-key": api_key}


def dispatch(
    payload: dict[str, Any],
    *,
    api_key: str | None,
    base_uri: str,
    send_path: str,
    api_version: str,
    timeout_seconds: int | None = None,
) -> DeliveryResult:
    key = require_api_key(api_key)
    url = f"{base_uri.rstrip('/')}{send_path}"
    headers = request_headers(key)
    body = json.dumps(payload)

    try:
        response = requests.post(url, data=body, headers=headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise TransportError(
            f"There was a problem reaching the SendinBlue API {api_version}: {exc!r}",
            url=url,
            reason=exc,
        ) from exc

    if response.status_code > 299:
        redacted = redact_request(url, headers, payload)
        raise ApiError(
            _api_error_message(api_version, response.text, redacted),
            url=url,
            status_code=response.status_code,
            request=redacted,
            response=response.text,
        )

    return DeliveryResult(
        status_code=response.status_code,
        headers=dict(response.headers),
        body=response.text,
    )


def redact_request(url: str, headers: dict[str, str], payload: dict[str, Any]) -> dict[str, Any]:
    """Diagnostic copy of an outgoing request with credentials replaced."""
    safe_headers = {
        name: FILTERED if name.lower() in _SECRET_FIELDS else value
        for name, value in headers.items()
    }
    safe_body = {
        field: FILTERED if field.lower() in _SECRET_FIELDS else value
        for field, value in payload.items()
    }
    return {"url": url, "headers": safe_headers, "body": safe_body}


def _api_error_message(api_version: str, response_text: str, redacted: dict[str, Any]) -> str:
    return (
        f"There was a problem sending the email through the SendinBlue API {api_version}.\n\n"
        "Response:\n\n"
        f"{response_text!r}\n\n"
        "Parameters:\n\n"
        f"{redacted!r}\n"
    )
