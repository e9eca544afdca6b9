from __future__ import annotations

from typing import Any, Mapping


REPLY_TO_HEADER = "reply-to"
REPLY_TO_EMAIL_HEADER = "reply-to-email"
REPLY_TO_NAME_HEADER = "reply-to-name"


def reply_to_v2(headers: Mapping[str, str | None]) -> str | None:
    """v2 takes the combined `reply-to` header verbatim."""
    return headers.get(REPLY_TO_HEADER)


def reply_to_v3(headers: Mapping[str, str | None]) -> dict[str, str] | None:
    """v3 composes `replyTo` from two headers, each key added independently."""
    reply_to: dict[str, str] = {}
    if REPLY_TO_EMAIL_HEADER in headers and headers[REPLY_TO_EMAIL_HEADER] is not None:
        reply_to["email"] = str(headers[REPLY_TO_EMAIL_HEADER])
    if REPLY_TO_NAME_HEADER in headers:
        reply_to["name"] = headers[REPLY_TO_NAME_HEADER] or ""
    return reply_to or None


def template_fields(private: Mapping[str, Any]) -> dict[str, Any]:
    if "templateId" not in private:
        return {}
    params = private.get("params")
    return {
        "templateId": private["templateId"],
        "params": params if params is not None else {},
    }


def tag_list(private: Mapping[str, Any]) -> list[str] | None:
    # Already in payload order; see helpers.tag.
    tags = private.get("tags")
    if not tags:
        return None
    return list(tags)
