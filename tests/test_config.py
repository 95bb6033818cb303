"""Tests for environment driven configuration."""
import os

import pytest

from restvpn_cli.config import DEFAULT_API_ADDR, Config, load_env_file


def test_defaults_when_unset():
    config = Config.from_env({})

    assert config.api_addr == DEFAULT_API_ADDR == "http://localhost:5000"
    assert config.api_key == ""
    assert not config.has_api_key
    assert not config.debug


def test_empty_values_fall_back_to_defaults():
    config = Config.from_env({"RESTVPN_ADDR": "", "RESTVPN_KEY": ""})

    assert config.api_addr == DEFAULT_API_ADDR
    assert not config.has_api_key


def test_values_are_read():
    config = Config.from_env({
        "RESTVPN_ADDR": "http://api.test",
        "RESTVPN_KEY": "secret",
        "RESTVPN_DEBUG": "True",
    })

    assert config.api_addr == "http://api.test"
    assert config.api_key == "secret"
    assert config.has_api_key
    assert config.debug


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RESTVPN_KEY", "abc")

    assert Config.from_env().api_key == "abc"


def test_env_file_does_not_override_exported_values(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.setattr(os, "environ", os.environ.copy())
    (tmp_path / ".env").write_text("RESTVPN_ADDR=http://from-file\nRESTVPN_KEY=file-key\n")
    monkeypatch.setenv("RESTVPN_KEY", "exported")

    assert load_env_file()
    config = Config.from_env()

    assert config.api_addr == "http://from-file"
    assert config.api_key == "exported"
