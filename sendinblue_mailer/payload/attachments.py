from __future__ import annotations

"""Attachment resolution.

Each descriptor resolves to exactly one of:
- InlineAttachment: bytes embedded in the payload as base64
- LinkAttachment: a remote URL the provider downloads itself

Resolution order:
1) data present -> inline (filename, or the last segment of path)
2) path is a URL -> link (filename, or the last non-empty URL path segment)
3) local path -> read from disk -> inline (filename, or the path basename)
"""

import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol, Union, cast
from urllib.parse import unquote, urlparse

from sendinblue_mailer.errors import AttachmentReadError, UnsupportedAttachmentError
from sendinblue_mailer.models import Attachment, AttachmentKind


class AttachmentReader(Protocol):
    def __call__(self, path: str) -> bytes: ...


@dataclass(frozen=True)
class InlineAttachment:
    content: bytes
    name: str

    @property
    def encoded_content(self) -> str:
        return base64.b64encode(self.content).decode("ascii")

    def to_payload(self) -> dict[str, str]:
        return {"content": self.encoded_content, "name": self.name}


@dataclass(frozen=True)
class LinkAttachment:
    url: str
    name: str

    def to_payload(self) -> dict[str, str]:
        return {"url": self.url, "name": self.name}


ResolvedAttachment = Union[InlineAttachment, LinkAttachment]


def read_attachment_bytes(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise AttachmentReadError(
            f"cannot read attachment {path}: {exc}",
            stage="attachments",
            url=path,
        ) from exc


def resolve_attachment(
    descriptor: Attachment,
    *,
    reader: AttachmentReader = read_attachment_bytes,
) -> ResolvedAttachment:
    kind = descriptor.kind
    if kind is AttachmentKind.INLINE:
        # INLINE is only assigned when the descriptor carries bytes.
        data = cast(bytes, descriptor.data)
        name = descriptor.filename or local_name(str(descriptor.path))
        return InlineAttachment(content=data, name=name)

    path = str(descriptor.path)
    if kind is AttachmentKind.REMOTE:
        return LinkAttachment(url=path, name=descriptor.filename or url_name(path))

    data = reader(path)
    return InlineAttachment(content=data, name=descriptor.filename or local_name(path))


def attachment_list(
    descriptors: Iterable[Attachment],
    *,
    reader: AttachmentReader = read_attachment_bytes,
) -> list[dict[str, str]]:
    return [resolve_attachment(d, reader=reader).to_payload() for d in descriptors]


def attachment_mapping(
    descriptors: Iterable[Attachment],
    *,
    reader: AttachmentReader = read_attachment_bytes,
) -> dict[str, str]:
    """filename -> base64. A repeated filename replaces the earlier attachment."""
    mapping: dict[str, str] = {}
    for descriptor in descriptors:
        resolved = resolve_attachment(descriptor, reader=reader)
        if not isinstance(resolved, InlineAttachment):
            raise UnsupportedAttachmentError(
                "link attachments are not supported by the v2.0 API",
                stage="attachments",
                url=resolved.url,
            )
        mapping[resolved.name] = resolved.encoded_content
    return mapping


def local_name(path: str) -> str:
    return Path(path).name or path


def url_name(url: str) -> str:
    parsed = urlparse(url)
    segments = [s for s in parsed.path.split("/") if s]
    if segments:
        return unquote(segments[-1])
    return parsed.hostname or url
