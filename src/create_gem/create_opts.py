"""Options dataclass for the create-gem command."""

from dataclasses import dataclass

import click


@dataclass
class CreateGemOpts:
    """All options for the create-gem command."""

    gem_name: str | None = None
    preset: str | None = None
    save_preset: str | None = None
    list_presets: bool = False
    show_preset: str | None = None
    delete_preset: str | None = None
    doctor: bool = False
    version: bool = False
    dry_run: bool = False
    bundler_version: str | None = None
    verbose: bool = False

    @property
    def create_action(self):
        return bool(self.preset or self.save_preset or self.gem_name)

    @property
    def query_action(self):
        return bool(self.list_presets or self.show_preset)

    def validate_actions(self):
        """Raise click.UsageError if mutually exclusive actions are combined."""
        if self.query_action and (self.delete_preset or self.create_action):
            raise click.UsageError("Preset query options cannot be combined with other actions")

        if self.delete_preset and self.create_action:
            raise click.UsageError("--delete-preset cannot be combined with create actions")

        if self.doctor and (self.query_action or self.delete_preset or self.create_action):
            raise click.UsageError("--doctor cannot be combined with other actions")

        other_action = self.doctor or self.query_action or self.delete_preset or self.create_action
        if self.version and other_action:
            raise click.UsageError("--version cannot be combined with other actions")
