"""Tests for the credential profile store."""

import json
import os
import stat

import pytest

from gitz.config import (
    CONFIG_KEY, Credentials, api_base, config_path, load_credentials, load_profile,
)
from gitz.errors import ConfigError


def answer(monkeypatch, *replies):
    """Feed *replies* to ui.prompt in order; EOF once they run out."""
    replies = iter(replies)

    def fake_input():
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def write_store(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


class TestLoadCredentials:

    def test_existing_profile_does_not_prompt(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        write_store(path, {CONFIG_KEY: {"username": "alice", "api_token": "secret"}})
        answer(monkeypatch)

        assert load_credentials(path=str(path)) == Credentials("alice", "secret")

    def test_missing_file_prompts_and_persists(self, tmp_path, monkeypatch):
        path = tmp_path / "nested" / "config.json"
        answer(monkeypatch, "alice", "secret")

        creds = load_credentials(path=str(path))

        assert creds == Credentials("alice", "secret")
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved == {CONFIG_KEY: {"username": "alice", "api_token": "secret"}}
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_only_missing_fields_are_prompted(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "config.json"
        write_store(path, {
            CONFIG_KEY: {"username": "alice"},
            "other": {"username": "bob", "api_token": "x"},
        })
        answer(monkeypatch, "secret")

        creds = load_credentials(path=str(path))

        assert creds.api_token == "secret"
        assert "your api token on github" in capsys.readouterr().err
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["other"] == {"username": "bob", "api_token": "x"}
        assert saved[CONFIG_KEY]["api_token"] == "secret"

    def test_eof_while_prompting_is_config_error(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        answer(monkeypatch)

        with pytest.raises(ConfigError, match="username is required"):
            load_credentials(path=str(path))
        assert not path.exists()

    def test_ctrl_c_while_prompting_propagates(self, tmp_path, monkeypatch):
        def interrupt():
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupt)
        with pytest.raises(KeyboardInterrupt):
            load_credentials(path=str(tmp_path / "config.json"))

    def test_blank_answer_is_config_error(self, tmp_path, monkeypatch):
        answer(monkeypatch, "alice", "   ")
        with pytest.raises(ConfigError, match="api_token is required"):
            load_credentials(path=str(tmp_path / "config.json"))


class TestLoadProfile:

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Failed to load config"):
            load_profile(CONFIG_KEY, path=str(path))

    def test_root_must_be_object(self, tmp_path):
        path = tmp_path / "config.json"
        write_store(path, ["alice"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_profile(CONFIG_KEY, path=str(path))

    def test_profile_must_be_object(self, tmp_path):
        path = tmp_path / "config.json"
        write_store(path, {CONFIG_KEY: "alice"})
        with pytest.raises(ConfigError, match="must be a JSON object"):
            load_profile(CONFIG_KEY, path=str(path))

    def test_unwritable_store(self, tmp_path, monkeypatch):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        answer(monkeypatch, "value")
        with pytest.raises(ConfigError, match="Failed to save config"):
            load_profile("p", require={"key": "a key"}, path=str(blocker / "config.json"))

    def test_no_requirements_returns_what_is_there(self, tmp_path):
        path = tmp_path / "config.json"
        write_store(path, {"p": {"a": 1}})
        assert load_profile("p", path=str(path)) == {"a": 1}


class TestEnvironment:

    def test_config_path_override(self, monkeypatch):
        monkeypatch.setenv("GITZ_CONFIG", "/tmp/gitz.json")
        assert config_path() == "/tmp/gitz.json"

    def test_config_path_default(self, monkeypatch):
        monkeypatch.delenv("GITZ_CONFIG", raising=False)
        assert config_path().endswith(os.path.join(".gitz", "config.json"))

    def test_api_base_default(self, monkeypatch):
        monkeypatch.delenv("GITZ_API_BASE", raising=False)
        assert api_base() == "http://github.com/api/v2/json/issues"

    def test_api_base_override(self, monkeypatch):
        monkeypatch.setenv("GITZ_API_BASE", "https://issues.example.test/")
        assert api_base() == "https://issues.example.test"
