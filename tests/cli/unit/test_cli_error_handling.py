"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from runtime_launcher.cli import main


def test_missing_required_argument_returns_clean_click_error(capsys) -> None:
    exit_code = main(["command", "wasm"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing argument" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["command", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_backend_returns_domain_error(capsys) -> None:
    exit_code = main(["command", "jvm", "a.jar"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Unknown target backend 'jvm'" in captured.err


def test_invalid_configuration_returns_domain_error(capsys, tmp_path: Path) -> None:
    exit_code = main(["--config", str(tmp_path / "absent.yaml"), "locate"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err


def test_generate_config_refuses_to_overwrite(capsys, tmp_path: Path) -> None:
    output_path = tmp_path / "launcher.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
