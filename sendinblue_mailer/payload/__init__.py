"""Message-to-payload transformation for the SendinBlue v2.0 and v3 APIs."""

from sendinblue_mailer.payload.builders import (
    PayloadBuilder,
    V2PayloadBuilder,
    V3PayloadBuilder,
    get_builder,
)

__all__ = ["PayloadBuilder", "V2PayloadBuilder", "V3PayloadBuilder", "get_builder"]
