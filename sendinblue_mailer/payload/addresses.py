from __future__ import annotations

from typing import Any, Iterable

from sendinblue_mailer.models import Address, coerce_address


def address_mapping(entries: Iterable[Any]) -> dict[str, str | None]:
    """v2 recipients: address -> name. Duplicate addresses keep the last name."""
    mapping: dict[str, str | None] = {}
    for entry in entries:
        address = coerce_address(entry)
        mapping[address.address] = address.name
    return mapping


def address_list(entries: Iterable[Any]) -> list[dict[str, str]]:
    """v3 recipients: ordered objects, duplicates kept."""
    return [sender_object(entry) for entry in entries]


def sender_pair(entry: Any) -> list[str]:
    address = coerce_address(entry)
    return [address.address, address.name if address.name is not None else ""]


def sender_object(entry: Any) -> dict[str, str]:
    address: Address = coerce_address(entry)
    obj = {"email": address.address}
    if address.name is not None:
        obj["name"] = address.name
    return obj
