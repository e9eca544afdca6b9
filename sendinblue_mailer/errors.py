from __future__ import annotations

from typing import Any


class SendinBlueError(Exception):
    """Base error type for adapter-specific exceptions."""


class MissingApiKeyError(SendinBlueError, ValueError):
    """Raised when no API key is configured. Always raised before any I/O."""

    def __init__(self, options: dict[str, Any] | None = None):
        message = (
            "There was no API key set for the SendinBlue adapter.\n\n"
            "* Here are the config options that were passed in:\n\n"
            f"{options!r}"
        )
        super().__init__(message)
        self.options = options


class ExternalCallError(SendinBlueError):
    """Raised for failures of an external collaborator (file system, HTTP)."""

    def __init__(self, message: str, *, stage: str, url: str | None = None):
        super().__init__(message)
        self.stage = stage
        self.url = url


class AttachmentReadError(ExternalCallError):
    """A local attachment could not be read."""


class UnsupportedAttachmentError(ExternalCallError):
    """The dialect cannot carry this kind of attachment."""


class MessageFileError(ExternalCallError):
    """A message file could not be loaded."""


class ApiError(ExternalCallError):
    """The provider answered with a status above 299."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None,
        status_code: int,
        request: dict[str, Any],
        response: str,
    ):
        super().__init__(message, stage="delivery", url=url)
        self.status_code = status_code
        self.request = request
        self.response = response


class TransportError(ExternalCallError):
    """The HTTP request never produced a response."""

    def __init__(self, message: str, *, url: str | None, reason: BaseException | None = None):
        super().__init__(message, stage="delivery", url=url)
        self.reason = reason
