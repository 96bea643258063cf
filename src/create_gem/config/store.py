"""Store: YAML persistence for presets and last-used options."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from create_gem.errors import ConfigError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def default_path(env=None) -> Path:
    env = os.environ if env is None else env
    config_home = env.get("XDG_CONFIG_HOME") or os.path.join(Path.home(), ".config")
    return Path(config_home) / "create-gem" / "config.yml"


class Store:
    """Owns load/save of the config file.

    The file holds ``version``, ``last_used`` and ``presets``. Writes go to a
    temporary file that is renamed over the config file.
    """

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else default_path()

    def last_used(self) -> Dict:
        return self._data()["last_used"]

    def save_last_used(self, options) -> None:
        payload = self._data()
        payload["last_used"] = _stringify_keys(options)
        self._write(payload)

    def preset(self, name) -> Optional[Dict]:
        return self._data()["presets"].get(str(name))

    def preset_names(self) -> List[str]:
        return sorted(self._data()["presets"])

    def save_preset(self, name, options) -> None:
        payload = self._data()
        payload["presets"][str(name)] = _stringify_keys(options)
        self._write(payload)

    def delete_preset(self, name) -> None:
        """Delete a preset; a missing preset is not an error."""
        payload = self._data()
        payload["presets"].pop(str(name), None)
        self._write(payload)

    def _data(self) -> Dict:
        raw = self._load()
        return {
            "version": raw.get("version", SCHEMA_VERSION),
            "last_used": self._section(raw, "last_used"),
            "presets": self._section(raw, "presets"),
        }

    def _section(self, raw, name) -> Dict:
        section = raw.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ConfigError(f"Invalid config file at {self.path}: {name} must be a mapping")
        return dict(section)

    def _load(self) -> Dict:
        if not self.path.is_file():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid config file at {self.path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config file at {self.path}: expected a mapping")
        return data

    def _write(self, payload) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix="create-gem", suffix=".yml", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(payload, f, sort_keys=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug("Wrote config to %s", self.path)


def _stringify_keys(options) -> Dict:
    return {str(key): value for key, value in options.items()}
