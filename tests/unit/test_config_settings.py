"""Unit tests for application settings configuration."""

from pathlib import Path

import pytest

from connector_admin.config import DEFAULT_BACKEND_URL, Settings, resolve_backend_url
from connector_admin.domain.exceptions import ConfigurationError
from connector_admin.infrastructure.dependencies import build_gateway, build_shell
from connector_admin.infrastructure.gateways import HttpDataGateway, LocalFileGateway


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_backend_url_from_environment(monkeypatch):
    monkeypatch.setenv("BACKEND_URL", "https://abc.ngrok-free.app/")

    settings = Settings(_env_file=None)

    assert settings.resolved_backend_url == "https://abc.ngrok-free.app"


def test_unusable_page_size_falls_back_to_default():
    assert Settings(_env_file=None, page_size=0).page_size == 10


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_blank_backend_url_uses_default(raw):
    assert resolve_backend_url(raw) == DEFAULT_BACKEND_URL


@pytest.mark.parametrize("raw", ["localhost:5000", "ftp://files.example.com", "http://"])
def test_malformed_backend_url_is_a_configuration_error(raw):
    with pytest.raises(ConfigurationError, match="BACKEND_URL"):
        resolve_backend_url(raw)


def test_build_gateway_selects_backend(tmp_path):
    http_settings = Settings(_env_file=None, backend_url="http://api.test")
    file_settings = Settings(_env_file=None, data_backend="file", data_file=str(tmp_path / "d.json"))

    assert isinstance(build_gateway(http_settings), HttpDataGateway)
    assert isinstance(build_gateway(file_settings), LocalFileGateway)


def test_build_gateway_applies_backend_url_defaults():
    blank = build_gateway(Settings(_env_file=None, backend_url=""))
    trailing = build_gateway(Settings(_env_file=None, backend_url="http://api.test/"))

    assert blank.base_url == DEFAULT_BACKEND_URL
    assert trailing.base_url == "http://api.test"


def test_build_gateway_fails_fast_on_bad_url():
    with pytest.raises(ConfigurationError):
        build_gateway(Settings(_env_file=None, backend_url="not a url"))


def test_build_shell_uses_configured_credentials():
    settings = Settings(_env_file=None, admin_username="ops", admin_password="s3cret", page_size=25)

    shell = build_shell(settings)

    assert shell.login("ops", "s3cret")
    assert shell.navigate("users").view().page_size == 25
