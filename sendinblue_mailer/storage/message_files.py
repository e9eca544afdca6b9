from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from sendinblue_mailer.errors import MessageFileError
from sendinblue_mailer.models import Attachment, Email, has_url_scheme


_EMAIL_KEYS = {
    "from",
    "sender",
    "to",
    "cc",
    "bcc",
    "subject",
    "html_body",
    "text_body",
    "headers",
}


def load_email_file(path: Path) -> Email:
    """Load a message from YAML/JSON.

    Relative attachment paths resolve against the message file's directory.
    `template_id`, `params` and `tags` land in the private store; tags are
    taken in final payload order.
    """
    if not path.exists():
        raise MessageFileError(
            f"message file does not exist: {path}",
            stage="message_file",
            url=str(path),
        )

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise MessageFileError(
            "message file must be yaml/yml/json",
            stage="message_file",
            url=str(path),
        )

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MessageFileError(
            f"cannot read message file: {exc}",
            stage="message_file",
            url=str(path),
        ) from exc

    try:
        raw = json.loads(text) if suffix == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise MessageFileError(
            f"cannot parse message file: {exc}",
            stage="message_file",
            url=str(path),
        ) from exc

    if not isinstance(raw, dict):
        raise MessageFileError(
            "message file content must be an object",
            stage="message_file",
            url=str(path),
        )

    private: dict[str, Any] = {}
    if raw.get("template_id") is not None:
        private["templateId"] = raw["template_id"]
        private["params"] = raw.get("params") or {}
    tags = _tag_list(raw.get("tags"), source=path)
    if tags:
        private["tags"] = tags

    fields: dict[str, Any] = {k: v for k, v in raw.items() if k in _EMAIL_KEYS}
    fields["private"] = private

    try:
        fields["attachments"] = [
            _attachment_from_item(item, base_dir=path.parent, source=path)
            for item in raw.get("attachments") or []
        ]
        return Email.model_validate(fields)
    except ValidationError as exc:
        raise MessageFileError(
            f"invalid message file: {exc}",
            stage="message_file",
            url=str(path),
        ) from exc


def _attachment_from_item(item: Any, *, base_dir: Path, source: Path) -> Attachment:
    if isinstance(item, str):
        item = {"path": item}
    if not isinstance(item, dict) or not item.get("path"):
        raise MessageFileError(
            "each attachment must be a path or an object with a path",
            stage="message_file",
            url=str(source),
        )
    attachment_path = str(item["path"])
    if not has_url_scheme(attachment_path) and not Path(attachment_path).is_absolute():
        attachment_path = str(base_dir / attachment_path)
    return Attachment(
        path=attachment_path,
        filename=item.get("filename"),
        content_type=item.get("content_type"),
    )


def _tag_list(value: Any, *, source: Path) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise MessageFileError(
            "tags must be a string or a list of strings",
            stage="message_file",
            url=str(source),
        )
    return [str(t) for t in value]
