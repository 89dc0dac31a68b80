"""CLI integration smoke tests."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from sinkchain import __version__
from sinkchain.cli import app

runner = CliRunner()


def test_cli_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_cli_roundtrip_reversible(sink_path: Path, override_settings) -> None:
    """`sinkchain roundtrip` writes through the default chain and reads back."""

    result = runner.invoke(app, ["roundtrip", str(sink_path), "--text", "hello world"])

    assert result.exit_code == 0, result.stdout
    assert "Chain: EncryptionDecorator(fernet) -> CompressionDecorator(zlib)" in result.stdout
    assert "Result: hello world" in result.stdout
    assert sink_path.exists()
    assert "hello world" not in sink_path.read_text(encoding="utf-8")


def test_cli_roundtrip_label_mode(sink_path: Path, override_settings) -> None:
    result = runner.invoke(app, ["roundtrip", str(sink_path), "--mode", "label"])

    assert result.exit_code == 0, result.stdout
    assert "Result: [/encrypted][/compressed][compressed][encrypted]hello world" in result.stdout
    assert "On disk: [compressed][encrypted]hello world" in result.stdout


def test_cli_roundtrip_absent_result(temp_dir: Path, override_settings) -> None:
    target = temp_dir / "missing" / "t.txt"

    result = runner.invoke(app, ["roundtrip", str(target)])

    assert result.exit_code == 1
    assert "Result: <absent>" in result.stdout


def test_cli_rejects_unknown_layer(sink_path: Path, override_settings) -> None:
    result = runner.invoke(app, ["roundtrip", str(sink_path), "--layers", "rot13"])

    assert result.exit_code == 2
    assert not sink_path.exists()


def test_cli_rejects_unknown_mode(sink_path: Path, override_settings) -> None:
    result = runner.invoke(app, ["roundtrip", str(sink_path), "--mode", "rot13"])

    assert result.exit_code == 2


def test_cli_reports_unusable_key(sink_path: Path, override_settings) -> None:
    (override_settings.get_config_dir() / "sink.key").write_bytes(b"garbage")

    result = runner.invoke(app, ["roundtrip", str(sink_path)])

    assert result.exit_code == 2
    assert "Fernet key" in result.output
    assert not sink_path.exists()
