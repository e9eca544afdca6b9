from __future__ import annotations

from sendinblue_mailer.payload.metadata import reply_to_v2, reply_to_v3, tag_list, template_fields


def test_reply_to_v2_copies_header_verbatim() -> None:
    assert reply_to_v2({"reply-to": "Foo <foo@bar.com>"}) == "Foo <foo@bar.com>"
    assert reply_to_v2({}) is None


def test_reply_to_v2_header_name_is_case_sensitive() -> None:
    assert reply_to_v2({"Reply-To": "foo@bar.com"}) is None


def test_reply_to_v3_composes_both_headers() -> None:
    headers = {"reply-to-email": "foo@bar.com", "reply-to-name": "Foo"}

    assert reply_to_v3(headers) == {"email": "foo@bar.com", "name": "Foo"}


def test_reply_to_v3_name_only() -> None:
    assert reply_to_v3({"reply-to-name": "Foo"}) == {"name": "Foo"}


def test_reply_to_v3_empty_or_missing_name_value_is_empty_string() -> None:
    assert reply_to_v3({"reply-to-email": "foo@bar.com", "reply-to-name": ""}) == {
        "email": "foo@bar.com",
        "name": "",
    }
    assert reply_to_v3({"reply-to-name": None}) == {"name": ""}


def test_reply_to_v3_absent_without_headers() -> None:
    assert reply_to_v3({"x-other": "1"}) is None


def test_template_fields_default_params() -> None:
    assert template_fields({"templateId": "hello"}) == {"templateId": "hello", "params": {}}
    assert template_fields({"templateId": 42, "params": {"name": "John"}}) == {
        "templateId": 42,
        "params": {"name": "John"},
    }
    assert template_fields({"params": {"ignored": True}}) == {}


def test_tag_list_copies_non_empty_tags() -> None:
    tags = ["tag1", "tag2"]
    copied = tag_list({"tags": tags})

    assert copied == ["tag1", "tag2"]
    assert copied is not tags
    assert tag_list({"tags": []}) is None
    assert tag_list({}) is None
