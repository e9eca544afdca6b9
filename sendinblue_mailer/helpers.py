from __future__ import annotations

"""Helpers for SendinBlue-specific message features.

Every helper returns a new Email; the message passed in is left untouched.
"""

from typing import Any

from sendinblue_mailer.models import Email


def put_private(email: Email, key: str, value: Any) -> Email:
    return email.model_copy(update={"private": {**email.private, key: value}})


def put_header(email: Email, name: str, value: str | None) -> Email:
    return email.model_copy(update={"headers": {**email.headers, name: value}})


def tag(email: Email, tag: str) -> Email:
    """Add a tag used to categorize outgoing emails in SendinBlue statistics.

    Tags are prepended, so the most recent call comes first:

        tag(tag(email, "tag2"), "tag1").private["tags"] == ["tag1", "tag2"]
    """
    tags = email.private.get("tags") or []
    return put_private(email, "tags", [tag, *tags])


def template(email: Email, template_id: Any, params: Any = None) -> Email:
    """Send using a SendinBlue template; the id must match the template in SendinBlue.

        template(email, "9746128")
        template(email, "9746128", {"name": "Name", "content": "John"})
    """
    updated = put_private(email, "templateId", template_id)
    return put_private(updated, "params", params if params is not None else {})
