from __future__ import annotations

"""Payload builders for the two SendinBlue API generations.

Both dialects share the same field order (sender, to, reply-to, cc, bcc,
subject, html, text, attachments, then dialect extras). Everything that
differs is a class attribute on the concrete builder:

                 v2.0                      v3
  sender         "from": [address, name]   "sender": {email, name?}
  recipients     {address: name|null}      [{email, name?}, ...]
  reply-to       "replyto": "<header>"     "replyTo": {email?, name?}
  bodies         "html" / "text"           "htmlContent" / "textContent"
  attachments    {filename: base64}        [{content, name} | {url, name}]
  extras         none                      templateId/params, tags

Absent source data means the key is left out, never set to null.
"""

from typing import Any, Callable, ClassVar, Protocol

from sendinblue_mailer.models import Email
from sendinblue_mailer.payload.addresses import (
    address_list,
    address_mapping,
    sender_object,
    sender_pair,
)
from sendinblue_mailer.payload.attachments import (
    AttachmentReader,
    attachment_list,
    attachment_mapping,
    read_attachment_bytes,
)
from sendinblue_mailer.payload.metadata import reply_to_v2, reply_to_v3, tag_list, template_fields


class PayloadBuilder(Protocol):
    dialect: str
    api_version: str
    send_path: str

    def build(self, email: Email) -> dict[str, Any]:
        """Build the complete request body for one message."""


class _DialectBuilder:
    dialect: ClassVar[str]
    api_version: ClassVar[str]
    send_path: ClassVar[str]

    sender_field: ClassVar[str]
    reply_to_field: ClassVar[str]
    html_field: ClassVar[str]
    text_field: ClassVar[str]

    sender: ClassVar[Callable[[Any], Any]]
    recipients: ClassVar[Callable[[Any], Any]]
    reply_to: ClassVar[Callable[[Any], Any]]

    def __init__(self, *, reader: AttachmentReader = read_attachment_bytes) -> None:
        self.reader = reader

    def build(self, email: Email) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if email.sender is not None:
            payload[self.sender_field] = self.sender(email.sender)
        self._put_recipients(payload, "to", email.to)
        reply_to = self.reply_to(email.headers)
        if reply_to is not None:
            payload[self.reply_to_field] = reply_to
        self._put_recipients(payload, "cc", email.cc)
        self._put_recipients(payload, "bcc", email.bcc)
        if email.subject is not None:
            payload["subject"] = email.subject
        if email.html_body is not None:
            payload[self.html_field] = email.html_body
        if email.text_body is not None:
            payload[self.text_field] = email.text_body
        if email.attachments:
            payload["attachment"] = self.attachments(email)
        payload.update(self.extras(email))
        return payload

    def attachments(self, email: Email) -> Any:
        raise NotImplementedError

    def extras(self, email: Email) -> dict[str, Any]:
        return {}

    def _put_recipients(self, payload: dict[str, Any], field: str, entries: list[Any]) -> None:
        if entries:
            payload[field] = self.recipients(entries)


class V2PayloadBuilder(_DialectBuilder):
    dialect = "v2"
    api_version = "v2.0"
    send_path = "/v2.0/email"

    sender_field = "from"
    reply_to_field = "replyto"
    html_field = "html"
    text_field = "text"

    sender = staticmethod(sender_pair)
    recipients = staticmethod(address_mapping)
    reply_to = staticmethod(reply_to_v2)

    def attachments(self, email: Email) -> dict[str, str]:
        return attachment_mapping(email.attachments, reader=self.reader)


class V3PayloadBuilder(_DialectBuilder):
    dialect = "v3"
    api_version = "v3.0"
    send_path = "/v3/smtp/email"

    sender_field = "sender"
    reply_to_field = "replyTo"
    html_field = "htmlContent"
    text_field = "textContent"

    sender = staticmethod(sender_object)
    recipients = staticmethod(address_list)
    reply_to = staticmethod(reply_to_v3)

    def attachments(self, email: Email) -> list[dict[str, str]]:
        return attachment_list(email.attachments, reader=self.reader)

    def extras(self, email: Email) -> dict[str, Any]:
        fields = template_fields(email.private)
        tags = tag_list(email.private)
        if tags is not None:
            fields["tags"] = tags
        return fields


_BUILDERS: dict[str, type[_DialectBuilder]] = {
    V2PayloadBuilder.dialect: V2PayloadBuilder,
    V3PayloadBuilder.dialect: V3PayloadBuilder,
}


def get_builder(dialect: str, *, reader: AttachmentReader = read_attachment_bytes) -> PayloadBuilder:
    builder_cls = _BUILDERS.get(dialect.strip().lower())
    if builder_cls is None:
        raise ValueError(f"dialect must be one of {sorted(_BUILDERS)}")
    return builder_cls(reader=reader)
