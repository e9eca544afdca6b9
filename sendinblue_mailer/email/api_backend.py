from __future__ import annotations

from typing import Any

from sendinblue_mailer.config import AppConfig
from sendinblue_mailer.email.dispatcher import dispatch, require_api_key
from sendinblue_mailer.errors import ExternalCallError, SendinBlueError
from sendinblue_mailer.models import DeliveryResult, Email
from sendinblue_mailer.payload.attachments import AttachmentReader, read_attachment_bytes
from sendinblue_mailer.payload.builders import PayloadBuilder, get_builder
from sendinblue_mailer.storage.runs import StructuredLogger


class SendinBlueBackend:
    """Transactional email backend for the SendinBlue HTTP API (v2.0 or v3)."""

    def __init__(
        self,
        *,
        config: AppConfig,
        logger: StructuredLogger,
        builder: PayloadBuilder | None = None,
        reader: AttachmentReader = read_attachment_bytes,
    ) -> None:
        self.config = config
        self.logger = logger
        self.builder = builder or get_builder(config.dialect, reader=reader)

    @staticmethod
    def handle_config(config: AppConfig) -> AppConfig:
        require_api_key(config.api_key, config.redacted())
        return config

    def supports_attachments(self) -> bool:
        return True

    def build_payload(self, email: Email) -> dict[str, Any]:
        return self.builder.build(email)

    def deliver(self, email: Email) -> DeliveryResult:
        # The key is checked before the payload is built, so a bad config
        # never touches attachments or the network.
        api_key = require_api_key(self.config.api_key, self.config.redacted())
        try:
            payload = self.build_payload(email)
            return dispatch(
                payload,
                api_key=api_key,
                base_uri=self.config.base_uri,
                send_path=self.builder.send_path,
                api_version=self.builder.api_version,
                timeout_seconds=self.config.request_timeout_seconds,
            )
        except SendinBlueError as exc:
            self.logger.error(
                "delivery_failed",
                stage=exc.stage if isinstance(exc, ExternalCallError) else "delivery",
                dialect=self.builder.dialect,
                error_type=exc.__class__.__name__,
                error_message=str(exc),
                url=exc.url if isinstance(exc, ExternalCallError) else None,
                status_code=getattr(exc, "status_code", None),
            )
            raise
