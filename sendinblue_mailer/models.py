from __future__ import annotations

"""Message data model consumed by the payload builders.

Hierarchy:
- Address: one sender/recipient entry (name is optional and distinct from "")
- Attachment: inline bytes, a local path, or a remote URL
- Email: the transport-agnostic message, including headers and the
  "private" auxiliary store (template id/params, tags)
- DeliveryResult: what a successful POST returns

Messages are frozen: builders read them, helpers return modified copies.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from urllib.parse import urlparse

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_validator,
    model_validator,
)


class AttachmentKind(str, Enum):
    INLINE = "inline"
    LOCAL = "local"
    REMOTE = "remote"


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    name: str | None = None

    @field_validator("address")
    @classmethod
    def _address_not_empty(cls, value: str) -> str:
        v = value.strip()
        if not v:
            raise ValueError("address cannot be empty")
        return v


def coerce_address(value: Any) -> Address:
    """Accept a bare address, a (name, address) pair, a mapping or an Address."""
    if isinstance(value, Address):
        return value
    if isinstance(value, str):
        return Address(address=value)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        name, address = value
        return Address(address=address, name=name)
    if isinstance(value, dict):
        address = value.get("address", value.get("email"))
        return Address(address=address, name=value.get("name"))
    raise ValueError(f"unsupported address entry: {value!r}")


def has_url_scheme(path: str) -> bool:
    # Single-letter schemes are Windows drive letters ("C:\\report.pdf").
    scheme = urlparse(path).scheme
    return len(scheme) > 1


class Attachment(BaseModel):
    """Attachment descriptor.

    The kind is classified once, after validation, and never changes:
    - INLINE: data is present
    - REMOTE: path is a URL with a scheme
    - LOCAL: any other path, read from disk at build time
    """

    model_config = ConfigDict(frozen=True)

    data: bytes | None = None
    path: str | None = None
    filename: str | None = None
    content_type: str | None = None

    _kind: AttachmentKind = PrivateAttr()

    @model_validator(mode="after")
    def _has_source(self) -> Attachment:
        if self.data is None and not self.path:
            raise ValueError("attachment needs data or a path")
        if self.data is not None and not self.filename and not self.path:
            raise ValueError("inline attachment needs a filename or a path")
        return self

    def model_post_init(self, __context: Any) -> None:
        if self.data is not None:
            self._kind = AttachmentKind.INLINE
        elif has_url_scheme(str(self.path)):
            self._kind = AttachmentKind.REMOTE
        else:
            self._kind = AttachmentKind.LOCAL

    @property
    def kind(self) -> AttachmentKind:
        return self._kind

    @classmethod
    def from_path(cls, path: str, *, filename: str | None = None) -> Attachment:
        return cls(path=path, filename=filename)


class Email(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sender: Address | None = Field(default=None, validation_alias=AliasChoices("sender", "from"))
    to: list[Address] = Field(default_factory=list)
    cc: list[Address] = Field(default_factory=list)
    bcc: list[Address] = Field(default_factory=list)
    subject: str | None = None
    html_body: str | None = None
    text_body: str | None = None
    headers: dict[str, str | None] = Field(default_factory=dict)
    attachments: list[Attachment] = Field(default_factory=list)
    private: dict[str, Any] = Field(default_factory=dict)

    @field_validator("sender", mode="before")
    @classmethod
    def _coerce_sender(cls, value: Any) -> Address | None:
        if value is None:
            return None
        return coerce_address(value)

    @field_validator("to", "cc", "bcc", mode="before")
    @classmethod
    def _coerce_recipients(cls, value: Any) -> list[Address]:
        if value is None:
            return []
        # A lone (name, address) tuple is one recipient, not two.
        if isinstance(value, (str, tuple, dict, Address)):
            value = [value]
        return [coerce_address(item) for item in value]


class DeliveryResult(BaseModel):
    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
