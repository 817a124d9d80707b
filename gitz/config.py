"""
config — Runtime configuration and the credential profile store.

Credentials are kept in a JSON file of named profiles.
Search order:
1) $GITZ_CONFIG (explicit path)
2) ~/.gitz/config.json

A profile that is absent or incomplete is completed interactively and
written back, so the first run asks once and later runs are silent.
"""

import json
import logging
import os
from dataclasses import dataclass

from .errors import ConfigError
from .ui import QUIT, prompt

log = logging.getLogger(__name__)


DEFAULT_API_BASE = "http://github.com/api/v2/json/issues"
PROJECT_ENV = "GITZ_PROJECT"
CONFIG_KEY = "developer.github.com"

REQUIRED_FIELDS = {
    "username": "your username on github",
    "api_token": "your api token on github",
}


@dataclass(frozen=True)
class Credentials:
    username: str
    api_token: str


def api_base():
    return os.getenv("GITZ_API_BASE", DEFAULT_API_BASE).rstrip("/")


def config_path():
    return os.getenv("GITZ_CONFIG") or os.path.expanduser("~/.gitz/config.json")


def _read_store(path):
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Failed to load config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to load config at {path}: root must be a JSON object")
    return data


def _write_store(path, data):
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")
    except OSError as exc:
        raise ConfigError(f"Failed to save config at {path}: {exc}") from exc


def load_profile(name, require=None, path=None):
    """Return the profile called *name*, prompting for missing fields.

    *require* maps each required key to the description shown when the
    user has to type it in. Prompted values are persisted before returning.
    """
    require = require or {}
    path = path or config_path()
    store = _read_store(path)

    profile = store.get(name) or {}
    if not isinstance(profile, dict):
        raise ConfigError(f"Profile {name!r} in {path} must be a JSON object")
    profile = dict(profile)

    missing = [key for key in require if not profile.get(key)]
    if not missing:
        return profile

    for key in missing:
        value = prompt(require[key])
        if value in (QUIT, None):
            raise ConfigError(f"{key} is required in profile {name!r}")
        profile[key] = value

    store[name] = profile
    _write_store(path, store)
    log.info("saved profile %s to %s", name, path)
    return profile


def load_credentials(path=None):
    profile = load_profile(CONFIG_KEY, require=REQUIRED_FIELDS, path=path)
    return Credentials(username=profile["username"], api_token=profile["api_token"])
