"""Validates a gem name and selected options against a compatibility entry."""

import re

from create_gem.errors import ValidationError
from create_gem.options import catalog
from create_gem.options.catalog import OptionKind

GEM_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


class Validator:
    """Checks selected options for the detected Bundler version.

    Checks run in order and stop at the first failure: the gem name, then for
    each option its key, its support in this Bundler version, the shape of its
    value, and finally whether an enum value is allowed by this version.
    """

    def __init__(self, compatibility_entry):
        self._entry = compatibility_entry

    def validate(self, gem_name, options) -> bool:
        """Validate the gem name and every option.

        Returns:
            True when everything is valid.

        Raises:
            ValidationError: Describing the first problem found.
        """
        self._validate_gem_name(gem_name)
        for key, value in options.items():
            self._validate_option_key(key)
            self._validate_supported_option(key)
            self._validate_value(key, value)
            self._validate_supported_value(key, value)
        return True

    @staticmethod
    def _validate_gem_name(gem_name):
        if isinstance(gem_name, str) and GEM_NAME_PATTERN.fullmatch(gem_name):
            return
        raise ValidationError(f"Invalid gem name: {gem_name!r}")

    @staticmethod
    def _validate_option_key(key):
        if not catalog.is_known(key):
            raise ValidationError(f"Unknown option: {key}")

    def _validate_supported_option(self, key):
        if not self._entry.supports(key):
            raise ValidationError(f"Option {key} is not supported by this bundler version")

    @staticmethod
    def _value_matches_kind(definition, value):
        if value is None:
            return True
        match definition.kind:
            case OptionKind.TOGGLE | OptionKind.FLAG:
                return isinstance(value, bool)
            case OptionKind.ENUM:
                return value is False or (isinstance(value, str) and value in definition.values)
            case OptionKind.STRING:
                return isinstance(value, str)
        return False

    def _validate_value(self, key, value):
        if not self._value_matches_kind(catalog.definition_of(key), value):
            raise ValidationError(f"Invalid value for {key}: {value!r}")

    def _validate_supported_value(self, key, value):
        if value is None or isinstance(value, bool):
            return
        allowed = self._entry.allowed_values(key)
        if allowed is None or value in allowed:
            return
        raise ValidationError(
            f"Value {value!r} for {key} is not supported by this bundler version"
        )
