"""Static table of the ``bundle gem`` options each Bundler version supports.

Rows are checked in order and the first matching range wins. Ranges are
expected not to overlap; nothing enforces it.

Bounds are compared with plain ``Version`` ordering, so a pre-release sorts
below its release: ``3.0.0.pre1`` falls in ``>=2.4, <3.0``.
"""

import operator
import re
from dataclasses import dataclass, field
from typing import Mapping

from packaging.version import InvalidVersion, Version

from create_gem.errors import InconsistentCatalogError, UnsupportedBundlerVersionError
from create_gem.options import catalog

REQUIREMENT_PATTERN = re.compile(r"\s*(>=|<=|==|!=|>|<)\s*(\S+)\s*")

_OPERATORS = {
    ">=": operator.ge,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    "<": operator.lt,
}


def parse_requirement(requirement):
    """Split ``">=3.0"`` into ``(operator.ge, Version("3.0"))``."""
    match = REQUIREMENT_PATTERN.fullmatch(requirement)
    if match is None:
        raise InconsistentCatalogError(f"Invalid version requirement: {requirement!r}")
    op, bound = match.groups()
    try:
        return _OPERATORS[op], Version(bound)
    except InvalidVersion:
        raise InconsistentCatalogError(f"Invalid version requirement: {requirement!r}") from None


@dataclass(frozen=True)
class CompatibilityEntry:
    """One row of the table: a Bundler version range and its options.

    ``supported_options`` maps option keys to the allowed values for enum
    options, or to ``None`` when any value valid for the option's kind is
    accepted.
    """

    requirements: tuple[str, ...]
    supported_options: Mapping[str, tuple[str, ...] | None] = field(default_factory=dict)

    def matches(self, version: Version) -> bool:
        for requirement in self.requirements:
            compare, bound = parse_requirement(requirement)
            if not compare(version, bound):
                return False
        return True

    def supports(self, key) -> bool:
        return str(key) in self.supported_options

    def allowed_values(self, key) -> tuple[str, ...] | None:
        """Return the allowed values for ``key``, or ``None`` if unrestricted.

        Callers must check ``supports`` first.
        """
        try:
            return self.supported_options[str(key)]
        except KeyError:
            raise InconsistentCatalogError(
                f"Option {key} is not part of the compatibility entry for {self.describe()}"
            ) from None

    def supported_keys(self) -> list[str]:
        return [key for key in catalog.ordered_keys() if self.supports(key)]

    def describe(self) -> str:
        return ", ".join(self.requirements)


_ALL_TESTS = ("minitest", "rspec", "test-unit")
_ALL_CI = ("circle", "github", "gitlab")
_ALL_LINTERS = ("rubocop", "standard")

TABLE = (
    CompatibilityEntry(
        requirements=(">=2.4", "<3.0"),
        supported_options={
            "exe": None,
            "coc": None,
            "ext": ("c",),
            "git": None,
            "github_username": None,
            "mit": None,
            "test": _ALL_TESTS,
            "ci": _ALL_CI,
            "edit": None,
            "bundle_install": None,
        },
    ),
    CompatibilityEntry(
        requirements=(">=3.0", "<4.0"),
        supported_options={
            "exe": None,
            "coc": None,
            "changelog": None,
            "ext": ("c",),
            "git": None,
            "github_username": None,
            "mit": None,
            "test": _ALL_TESTS,
            "ci": _ALL_CI,
            "linter": _ALL_LINTERS,
            "edit": None,
            "bundle_install": None,
        },
    ),
    CompatibilityEntry(
        requirements=(">=4.0", "<5.0"),
        supported_options={
            "exe": None,
            "coc": None,
            "changelog": None,
            "ext": ("c", "go", "rust"),
            "git": None,
            "github_username": None,
            "mit": None,
            "test": _ALL_TESTS,
            "ci": _ALL_CI,
            "linter": _ALL_LINTERS,
            "edit": None,
            "bundle_install": None,
        },
    ),
)


def supported_ranges(table=TABLE) -> list[str]:
    """Human-readable version ranges for every entry, in table order."""
    return [entry.describe() for entry in table]


def _unsupported(version, table, reason=None):
    ranges = supported_ranges(table)
    message = reason or f"Unsupported bundler version: {version}."
    message += f" Supported ranges: {' | '.join(ranges)}"
    return UnsupportedBundlerVersionError(message, version=version, supported_ranges=ranges)


def entry_for(bundler_version, table=TABLE) -> CompatibilityEntry:
    """Find the compatibility entry for a Bundler version.

    Args:
        bundler_version: A ``packaging`` ``Version`` or a version string.
        table: Entries to search, in priority order.

    Returns:
        The first entry whose range contains the version.

    Raises:
        UnsupportedBundlerVersionError: If the version cannot be parsed or
            no entry matches.
    """
    try:
        version = bundler_version if isinstance(bundler_version, Version) else Version(str(bundler_version))
    except InvalidVersion:
        raise _unsupported(
            bundler_version, table, reason=f"Invalid bundler version: {bundler_version!r}."
        ) from None

    for entry in table:
        if entry.matches(version):
            return entry
    raise _unsupported(bundler_version, table)
