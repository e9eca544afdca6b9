from __future__ import annotations

import pytest

from sendinblue_mailer.models import Address, Attachment, AttachmentKind, Email, coerce_address


def test_coerce_address_accepts_all_entry_shapes() -> None:
    assert coerce_address("a@bar.com") == Address(address="a@bar.com")
    assert coerce_address(("Name", "a@bar.com")) == Address(address="a@bar.com", name="Name")
    assert coerce_address({"email": "a@bar.com", "name": "N"}) == Address(address="a@bar.com", name="N")
    assert coerce_address({"address": "a@bar.com"}).name is None


def test_missing_name_and_empty_name_are_distinct() -> None:
    assert coerce_address((None, "a@bar.com")).name is None
    assert coerce_address(("", "a@bar.com")).name == ""
    assert coerce_address((None, "a@bar.com")) != coerce_address(("", "a@bar.com"))


def test_email_accepts_from_alias_and_single_recipient() -> None:
    email = Email.model_validate(
        {
            "from": ("From", "from@foo.com"),
            "to": ("ToName", "to@bar.com"),
            "cc": "cc@bar.com",
            "bcc": None,
        }
    )

    assert email.sender == Address(address="from@foo.com", name="From")
    assert email.to == [Address(address="to@bar.com", name="ToName")]
    assert email.cc == [Address(address="cc@bar.com")]
    assert email.bcc == []


def test_attachment_kind_is_classified_from_the_descriptor() -> None:
    assert Attachment(data=b"x", filename="a.txt").kind is AttachmentKind.INLINE
    assert Attachment(data=b"x", path="https://example.com/a.txt").kind is AttachmentKind.INLINE
    assert Attachment(path="https://example.com/logo.png").kind is AttachmentKind.REMOTE
    assert Attachment(path="./test/support/attachment.png").kind is AttachmentKind.LOCAL
    assert Attachment(path="/tmp/report.pdf", filename="r.pdf").kind is AttachmentKind.LOCAL
    assert Attachment(path="C:\\reports\\report.pdf").kind is AttachmentKind.LOCAL


def test_attachment_kind_survives_copy() -> None:
    original = Attachment.from_path("https://example.com/logo.png")
    copied = original.model_copy(update={"filename": "logo.png"})

    assert copied.kind is AttachmentKind.REMOTE


def test_attachment_rejects_descriptor_without_source() -> None:
    with pytest.raises(Exception):
        Attachment(filename="orphan.txt")

    with pytest.raises(Exception):
        Attachment(data=b"bytes without a name")


def test_email_is_frozen() -> None:
    email = Email(subject="Hello")

    with pytest.raises(Exception):
        email.subject = "Changed"  # type: ignore[misc]
