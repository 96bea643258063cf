"""Detect the installed Bundler version by running ``bundle --version``."""

import logging
import re
import subprocess

from packaging.version import InvalidVersion, Version

from create_gem.errors import UnsupportedBundlerVersionError

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"(\d+\.\d+\.\d+)")


def parse_version_output(output: str) -> Version:
    """Extract the first ``N.N.N`` version from command output.

    Raises:
        UnsupportedBundlerVersionError: If no version can be found.
    """
    match = VERSION_PATTERN.search(output or "")
    if match is None:
        raise UnsupportedBundlerVersionError(f"Cannot parse bundler version from: {output!r}")
    try:
        return Version(match.group(1))
    except InvalidVersion:
        raise UnsupportedBundlerVersionError(f"Cannot parse bundler version from: {output!r}") from None


class BundlerVersionDetector:
    """Runs the ``bundle`` executable and parses its version."""

    def __init__(self, bundle_command="bundle", run=subprocess.run):
        self._bundle_command = bundle_command
        self._run = run

    def detect(self) -> Version:
        cmd = [self._bundle_command, "--version"]
        logger.debug("Detecting bundler version: %s", " ".join(cmd))
        try:
            result = self._run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            raise UnsupportedBundlerVersionError(
                f"Bundler executable not found: {self._bundle_command}"
            ) from None
        return parse_version_output((result.stdout or "") + (result.stderr or ""))
