"""In-memory stand-ins for the store, detector and runner."""

import copy

from packaging.version import Version

from create_gem.detection.runtime import RuntimeInfo
from create_gem.errors import CreateGemError


class FakeStore:

    def __init__(self, last_used=None, presets=None):
        self._last_used = dict(last_used or {})
        self._presets = copy.deepcopy(presets or {})
        self.saved_last_used = []
        self.deleted = []

    def last_used(self):
        return dict(self._last_used)

    def save_last_used(self, options):
        self._last_used = dict(options)
        self.saved_last_used.append(dict(options))

    def preset(self, name):
        preset = self._presets.get(name)
        return dict(preset) if preset is not None else None

    def preset_names(self):
        return sorted(self._presets)

    def save_preset(self, name, options):
        self._presets[name] = dict(options)

    def delete_preset(self, name):
        self.deleted.append(name)
        self._presets.pop(name, None)


class FakeDetector:

    def __init__(self, bundler="3.1.0", ruby="3.3.0", rubygems="3.5.3", error=None):
        self._info = RuntimeInfo(
            ruby=Version(ruby) if ruby else None,
            rubygems=Version(rubygems) if rubygems else None,
            bundler=Version(bundler),
        )
        self._error = error
        self.calls = []

    def detect(self, bundler_version=None):
        self.calls.append(bundler_version)
        if self._error is not None:
            raise self._error
        if bundler_version is not None:
            return RuntimeInfo(ruby=self._info.ruby, rubygems=self._info.rubygems, bundler=Version(bundler_version))
        return self._info


class FakeRunner:

    def __init__(self, fail=False):
        self._fail = fail
        self.commands = []

    def run(self, command, dry_run=False):
        self.commands.append((list(command), dry_run))
        if self._fail:
            raise CreateGemError(f"Command failed: {' '.join(command)}")
        return True
