"""Catalog of every ``bundle gem`` option create-gem knows about.

``DEFINITIONS`` describes each option's kind and command-line tokens.
``ORDER`` is the sequence used for validation, command building and the
wizard.
"""

from dataclasses import dataclass
from enum import Enum

from create_gem.errors import UnknownOptionError


class OptionKind(Enum):
    TOGGLE = "toggle"
    FLAG = "flag"
    ENUM = "enum"
    STRING = "string"


@dataclass(frozen=True)
class OptionDefinition:
    """Kind and tokens of a single ``bundle gem`` option.

    Toggles use ``on``/``off``, one-way flags use ``on``, enums use
    ``flag``/``none``/``values`` and strings use ``flag``.
    """

    key: str
    kind: OptionKind
    on: str | None = None
    off: str | None = None
    flag: str | None = None
    none: str | None = None
    values: tuple[str, ...] = ()


def _toggle(key, on, off):
    return OptionDefinition(key, OptionKind.TOGGLE, on=on, off=off)


def _enum(key, flag, none, values):
    return OptionDefinition(key, OptionKind.ENUM, flag=flag, none=none, values=tuple(values))


DEFINITIONS = {
    definition.key: definition
    for definition in (
        _toggle("exe", "--exe", "--no-exe"),
        _toggle("coc", "--coc", "--no-coc"),
        _toggle("changelog", "--changelog", "--no-changelog"),
        _enum("ext", "--ext", "--no-ext", ["c", "go", "rust"]),
        OptionDefinition("git", OptionKind.FLAG, on="--git"),
        OptionDefinition("github_username", OptionKind.STRING, flag="--github-username"),
        _toggle("mit", "--mit", "--no-mit"),
        _enum("test", "--test", "--no-test", ["minitest", "rspec", "test-unit"]),
        _enum("ci", "--ci", "--no-ci", ["circle", "github", "gitlab"]),
        _enum("linter", "--linter", "--no-linter", ["rubocop", "standard"]),
        OptionDefinition("edit", OptionKind.STRING, flag="--edit"),
        _toggle("bundle_install", "--bundle", "--no-bundle"),
    )
}

ORDER = tuple(DEFINITIONS)


def is_known(key) -> bool:
    return str(key) in DEFINITIONS


def definition_of(key) -> OptionDefinition:
    """Return the definition for ``key``.

    Raises:
        UnknownOptionError: If the key is not in the catalog.
    """
    try:
        return DEFINITIONS[str(key)]
    except KeyError:
        raise UnknownOptionError(key) from None


def ordered_keys() -> tuple[str, ...]:
    return ORDER
