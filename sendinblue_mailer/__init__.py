"""SendinBlue transactional email adapter (API v2.0 and v3)."""

from sendinblue_mailer.email.api_backend import SendinBlueBackend
from sendinblue_mailer.helpers import put_header, put_private, tag, template
from sendinblue_mailer.models import Address, Attachment, DeliveryResult, Email

__all__ = [
    "Address",
    "Attachment",
    "DeliveryResult",
    "Email",
    "SendinBlueBackend",
    "put_header",
    "put_private",
    "tag",
    "template",
]
