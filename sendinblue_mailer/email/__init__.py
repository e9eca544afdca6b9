"""Delivery of built payloads to the SendinBlue HTTP API."""

from sendinblue_mailer.email.api_backend import SendinBlueBackend
from sendinblue_mailer.email.dispatcher import dispatch

__all__ = ["SendinBlueBackend", "dispatch"]
