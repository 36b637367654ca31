from __future__ import annotations

from pathlib import Path

import pytest

from yamlprops.cli.main import _setup_logging
from yamlprops.common import LoggingConfig
from yamlprops.registry import FileRegistryStore, RegistryDocument


def _write_registry(path: Path, logging: LoggingConfig) -> Path:
    FileRegistryStore(path).save(RegistryDocument(logging=logging))
    return path


@pytest.fixture
def default_registry(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("YAMLPROPS_REGISTRY_FILE", raising=False)
    return _write_registry(tmp_path / "xdg" / "yamlprops" / "registry.yaml", LoggingConfig(log_level="WARNING"))


def test_uses_default_registry_logging_section(default_registry: Path, mocker) -> None:
    setup = mocker.patch("yamlprops.cli.main.setup_cli_logging")

    _setup_logging(["get"])

    assert setup.call_args.kwargs["config"].log_level == "WARNING"


@pytest.mark.parametrize("style", ["separate", "equals"])
def test_registry_file_option_selects_logging_section(
    default_registry: Path, tmp_path: Path, mocker, style: str
) -> None:
    other = _write_registry(tmp_path / "other.yaml", LoggingConfig(log_level="DEBUG", format="json"))
    setup = mocker.patch("yamlprops.cli.main.setup_cli_logging")
    args = ["get", "--registry-file", str(other)] if style == "separate" else ["get", f"--registry-file={other}"]

    _setup_logging(args)

    config = setup.call_args.kwargs["config"]
    assert config.log_level == "DEBUG"
    assert config.format == "json"


def test_registry_file_option_with_logging_disabled(default_registry: Path, tmp_path: Path, mocker) -> None:
    other = _write_registry(tmp_path / "quiet.yaml", LoggingConfig(enabled=False))
    setup = mocker.patch("yamlprops.cli.main.setup_cli_logging")

    _setup_logging(["names", "example", "--registry-file", str(other)])

    setup.assert_not_called()


def test_environment_registry_file_is_the_fallback(
    default_registry: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mocker
) -> None:
    env_file = _write_registry(tmp_path / "env.yaml", LoggingConfig(log_level="ERROR"))
    monkeypatch.setenv("YAMLPROPS_REGISTRY_FILE", str(env_file))
    setup = mocker.patch("yamlprops.cli.main.setup_cli_logging")

    _setup_logging(["categories"])

    assert setup.call_args.kwargs["config"].log_level == "ERROR"
