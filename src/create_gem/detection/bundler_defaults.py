"""Read Bundler's own ``gem.*`` settings to seed wizard defaults.

Settings come from the global Bundler config file, overlaid with
``BUNDLE_GEM__*`` environment variables, the same precedence Bundler uses.
"""

import logging
import os
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

FALLBACKS = {
    "exe": False,
    "coc": None,
    "changelog": None,
    "ext": False,
    "git": True,
    "github_username": None,
    "mit": None,
    "test": None,
    "ci": None,
    "linter": None,
    "edit": None,
    "bundle_install": False,
}

KEY_MAP = {
    "coc": "gem.coc",
    "changelog": "gem.changelog",
    "ext": "gem.ext",
    "git": "gem.git",
    "github_username": "gem.github_username",
    "mit": "gem.mit",
    "test": "gem.test",
    "ci": "gem.ci",
    "linter": "gem.linter",
}


def settings_key(env_key: str) -> str:
    """Convert ``BUNDLE_GEM__TEST`` to ``gem.test``."""
    return env_key.removeprefix("BUNDLE_").lower().replace("__", ".")


def config_file_path(env=None) -> Path:
    env = os.environ if env is None else env
    if env.get("BUNDLE_USER_CONFIG"):
        return Path(env["BUNDLE_USER_CONFIG"])
    if env.get("BUNDLE_USER_HOME"):
        return Path(env["BUNDLE_USER_HOME"]) / "config"
    return Path(env.get("HOME", Path.home())) / ".bundle" / "config"


def read_settings(env=None) -> dict:
    """Return Bundler settings keyed like ``gem.test``."""
    env = os.environ if env is None else env
    settings = {}
    path = config_file_path(env)
    if path.is_file():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Bundler config at {path} is not a mapping")
        for key, value in data.items():
            settings[settings_key(str(key))] = value
    for key, value in env.items():
        if key.startswith("BUNDLE_GEM__"):
            settings[settings_key(key)] = value
    return settings


def normalize(value):
    if value == "true":
        return True
    if value == "false":
        return False
    return value


class BundlerDefaults:
    """Bundler's preferred values for each option.

    Args:
        settings: Mapping of Bundler settings (``gem.test`` style keys).
            When omitted they are read from the Bundler config file and
            environment.
        env: Environment used when reading settings.
    """

    def __init__(self, settings=None, env=None):
        self._settings = settings
        self._env = env

    def detect(self) -> dict:
        defaults = dict(FALLBACKS)
        try:
            settings = self._settings if self._settings is not None else read_settings(self._env)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.debug("Ignoring unreadable Bundler settings: %s", e)
            return defaults

        for option_key, bundler_key in KEY_MAP.items():
            value = normalize(settings.get(bundler_key))
            if value is not None:
                defaults[option_key] = value
        return defaults
