"""CommandBuilder: turns a gem name and selected options into a ``bundle gem`` command."""

from typing import List, Mapping

from create_gem.errors import InconsistentCatalogError
from create_gem.options import catalog
from create_gem.options.catalog import OptionKind

BASE_COMMAND = ("bundle", "gem")


class CommandBuilder:
    """Builds the ``bundle gem`` argument list.

    Options are emitted in catalog order. Nothing is validated here, so
    callers run the ``Validator`` first.
    """

    def build(self, gem_name: str, options: Mapping[str, object] = None) -> List[str]:
        """Build the command list.

        Args:
            gem_name: Name of the gem to create.
            options: Selected options keyed by catalog key.

        Returns:
            Command list suitable for subprocess.
        """
        options = options or {}
        command = [*BASE_COMMAND, gem_name]
        for key in catalog.ordered_keys():
            if key in options:
                command.extend(self._tokens_for(key, options[key]))
        return command

    @staticmethod
    def _tokens_for(key, value) -> List[str]:
        definition = catalog.definition_of(key)
        match definition.kind:
            case OptionKind.TOGGLE:
                if value is True:
                    return [definition.on]
                if value is False:
                    return [definition.off]
                return []
            case OptionKind.FLAG:
                return [definition.on] if value is True else []
            case OptionKind.ENUM:
                if isinstance(value, str):
                    return [f"{definition.flag}={value}"]
                if value is False:
                    return [definition.none]
                return []
            case OptionKind.STRING:
                if isinstance(value, str) and value:
                    return [f"{definition.flag}={value}"]
                return []
        raise InconsistentCatalogError(f"Unknown option kind for {key}: {definition.kind}")
