from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from fake_sendinblue import FakeSendinBlue
from sendinblue_mailer.storage.runs import StructuredLogger


PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + bytes(range(48))


@pytest.fixture
def fake_sendinblue(monkeypatch: pytest.MonkeyPatch) -> Iterator[FakeSendinBlue]:
    # requests would otherwise route 127.0.0.1 through a configured proxy
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)
    server = FakeSendinBlue().start()
    yield server
    server.shutdown()


@pytest.fixture
def run_logger(tmp_path: Path) -> StructuredLogger:
    return StructuredLogger(path=tmp_path / "run.log", run_id="test-run")


@pytest.fixture
def png_path(tmp_path: Path) -> Path:
    path = tmp_path / "support" / "attachment.png"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def clean_sendinblue_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SENDINBLUE_API_KEY",
        "SENDINBLUE_BASE_URI",
        "SENDINBLUE_DIALECT",
        "SENDINBLUE_TIMEOUT_SECONDS",
        "LOG_PATH",
        "LOG_LEVEL",
    ):
        # setenv first so teardown also clears values a .env file loaded
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
