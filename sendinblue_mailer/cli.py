from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from uuid import uuid4

from sendinblue_mailer.config import SUPPORTED_DIALECTS, AppConfig, load_config
from sendinblue_mailer.email.api_backend import SendinBlueBackend
from sendinblue_mailer.errors import ExternalCallError, SendinBlueError
from sendinblue_mailer.storage.message_files import load_email_file
from sendinblue_mailer.storage.runs import StructuredLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sendinblue-mailer", description="SendinBlue transactional email adapter")
    subparsers = parser.add_subparsers(dest="command")

    payload_parser = subparsers.add_parser("payload", help="print the API payload for a message file")
    send_parser = subparsers.add_parser("send", help="deliver a message file through the SendinBlue API")

    for sub in (payload_parser, send_parser):
        sub.add_argument("message", help="path to a YAML/JSON message file")
        sub.add_argument(
            "--dialect",
            choices=list(SUPPORTED_DIALECTS),
            default=None,
            help="API generation (default: SENDINBLUE_DIALECT or v3)",
        )
        sub.add_argument("--env-file", default=".env", help="dotenv file with SENDINBLUE_* settings")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    `payload` prints the request body and needs no API key; `send` delivers
    and prints the status code and response body as JSON.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in {"payload", "send"}:
        parser.print_help()
        return 1

    try:
        cfg = load_config(env_file=args.env_file)
    except ValueError as exc:
        # pydantic ValidationError is a ValueError, as is a non-integer timeout.
        print(json.dumps(_error_summary(exc, stage="config"), ensure_ascii=True), file=sys.stderr)
        return 1
    if args.dialect:
        cfg = cfg.model_copy(update={"dialect": args.dialect})
    backend = _build_backend(cfg)

    try:
        email = load_email_file(Path(args.message))
        if args.command == "payload":
            print(json.dumps(backend.build_payload(email), indent=2, ensure_ascii=True))
            return 0
        result = backend.deliver(email)
    except SendinBlueError as exc:
        print(json.dumps(_error_summary(exc), ensure_ascii=True), file=sys.stderr)
        return 1

    backend.logger.info(
        "delivery_sent",
        stage="delivery",
        dialect=cfg.dialect,
        status_code=result.status_code,
        url=f"{cfg.base_uri}{backend.builder.send_path}",
    )
    print(json.dumps({"status_code": result.status_code, "body": result.body}, indent=2, ensure_ascii=True))
    return 0


def _build_backend(config: AppConfig) -> SendinBlueBackend:
    logger = StructuredLogger(path=config.log_path, run_id=uuid4().hex[:12], log_level=config.log_level)
    return SendinBlueBackend(config=config, logger=logger)


def _error_summary(exc: Exception, *, stage: str | None = None) -> dict[str, str | None]:
    return {
        "error_type": exc.__class__.__name__,
        "error_message": str(exc),
        "stage": exc.stage if isinstance(exc, ExternalCallError) else stage,
        "url": exc.url if isinstance(exc, ExternalCallError) else None,
    }
