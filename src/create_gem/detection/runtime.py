"""Detect the Ruby, RubyGems and Bundler versions of the current machine."""

import logging
import subprocess
from dataclasses import dataclass

from packaging.version import InvalidVersion, Version

from create_gem.detection.bundler_version import BundlerVersionDetector
from create_gem.errors import UnsupportedBundlerVersionError

logger = logging.getLogger(__name__)

RUBY_VERSION_COMMAND = ["ruby", "-e", "print RUBY_VERSION"]
RUBYGEMS_VERSION_COMMAND = ["gem", "--version"]


@dataclass(frozen=True)
class RuntimeInfo:
    """Detected versions. Ruby and RubyGems are ``None`` when unavailable."""

    ruby: Version | None
    rubygems: Version | None
    bundler: Version


class RuntimeDetector:
    """Collects runtime versions, requiring only Bundler to be present."""

    def __init__(self, bundler_detector=None, run=subprocess.run):
        self._run = run
        self._bundler_detector = bundler_detector or BundlerVersionDetector(run=run)

    def detect(self, bundler_version=None) -> RuntimeInfo:
        """Detect runtime versions.

        Args:
            bundler_version: Use this Bundler version instead of running
                ``bundle --version``.

        Raises:
            UnsupportedBundlerVersionError: If Bundler cannot be detected.
        """
        if bundler_version is not None:
            try:
                bundler = Version(str(bundler_version))
            except InvalidVersion:
                raise UnsupportedBundlerVersionError(
                    f"Invalid bundler version: {bundler_version!r}"
                ) from None
        else:
            bundler = self._bundler_detector.detect()
        return RuntimeInfo(
            ruby=self._optional_version(RUBY_VERSION_COMMAND),
            rubygems=self._optional_version(RUBYGEMS_VERSION_COMMAND),
            bundler=bundler,
        )

    def _optional_version(self, cmd):
        try:
            result = self._run(cmd, capture_output=True, text=True)
        except OSError as e:
            logger.debug("Could not run %s: %s", cmd[0], e)
            return None
        if result.returncode != 0:
            logger.debug("%s exited with %s", cmd[0], result.returncode)
            return None
        try:
            return Version(result.stdout.strip())
        except InvalidVersion:
            logger.debug("Unrecognized %s version output: %r", cmd[0], result.stdout)
            return None
