"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import json
import sys

import pytest

from mail_canon import cli
from mail_canon.core.config import AppSettings, OutputSettings, load_app_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    load_app_settings.cache_clear()


def test_execute_writes_document(sample_payload: bytes) -> None:
    sink = io.StringIO()

    cli.execute(AppSettings(), io.BytesIO(sample_payload), sink)

    output = sink.getvalue()
    assert output.endswith("}\n")
    assert json.loads(output)["messageId"] == "<1234@example.com>"


def test_execute_honours_output_settings(sample_payload: bytes) -> None:
    sink = io.StringIO()
    settings = AppSettings(output=OutputSettings(format="astn", indentation="\t"))

    cli.execute(settings, io.BytesIO(sample_payload), sink)

    assert sink.getvalue().startswith("(\n\t'attachments': [")


def test_main_reports_empty_input(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"")))

    exit_code = cli.main([])

    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: No data received" in captured.err


def test_main_renders_stdin(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    sample_payload: bytes,
) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(sample_payload)))

    exit_code = cli.main([])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["subject"] == "Test Email"
