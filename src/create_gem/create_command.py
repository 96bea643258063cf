"""CreateGemCommand: dispatches the create-gem actions and runs the create flow."""

import json
import sys
from dataclasses import dataclass
from typing import Callable

import click

from create_gem.command_builder import CommandBuilder
from create_gem.compatibility import matrix
from create_gem.config.store import Store
from create_gem.detection.bundler_defaults import BundlerDefaults
from create_gem.detection.runtime import RuntimeDetector
from create_gem.errors import ValidationError
from create_gem.options.validator import Validator
from create_gem.runner import Runner
from create_gem.templates.template_renderer import render_template
from create_gem.ui.palette import Palette
from create_gem.ui.prompter import Prompter
from create_gem.version import VERSION
from create_gem.wizard.session import WizardSession

CREATE = "create"
EDIT_AGAIN = "edit again"


def _default_bundler_defaults():
    return BundlerDefaults().detect()


@dataclass
class CreateGemDeps:
    """Injectable dependencies for the create-gem command."""

    store: Store = None
    detector: RuntimeDetector = None
    runner: Runner = None
    prompter: Prompter = None
    palette: Palette = None
    bundler_defaults_fn: Callable[[], dict] = None

    def __post_init__(self):
        if self.store is None:
            self.store = Store()
        if self.detector is None:
            self.detector = RuntimeDetector()
        if self.runner is None:
            self.runner = Runner()
        if self.prompter is None:
            self.prompter = Prompter()
        if self.palette is None:
            self.palette = Palette()
        if self.bundler_defaults_fn is None:
            self.bundler_defaults_fn = _default_bundler_defaults


def format_value(value) -> str:
    return json.dumps(value)


class CreateGemCommand:
    """Runs one create-gem invocation for the given options."""

    def __init__(self, opts, deps=None):
        self.opts = opts
        self.deps = deps or CreateGemDeps()

    def execute(self):
        try:
            self._dispatch()
        except KeyboardInterrupt:
            click.echo("", err=True)
            click.echo(click.style("See ya!", fg="green"), err=True)
            sys.exit(130)

    def _dispatch(self):
        opts = self.opts
        if opts.version:
            click.echo(VERSION)
        elif opts.doctor:
            self.doctor()
        elif opts.list_presets:
            self.list_presets()
        elif opts.show_preset:
            self.show_preset()
        elif opts.delete_preset:
            self.deps.store.delete_preset(opts.delete_preset)
        else:
            self.create()

    def doctor(self):
        runtime = self.deps.detector.detect(bundler_version=self.opts.bundler_version)
        entry = matrix.entry_for(self.opts.bundler_version or runtime.bundler)
        click.echo(render_template(
            "doctor.j2",
            ruby=runtime.ruby,
            rubygems=runtime.rubygems,
            bundler=runtime.bundler,
            options=entry.supported_keys(),
        ))

    def list_presets(self):
        for name in self.deps.store.preset_names():
            click.echo(name)

    def show_preset(self):
        name = self.opts.show_preset
        preset = self.deps.store.preset(name)
        if preset is None:
            raise ValidationError(f"Preset not found: {name}")
        click.echo(name)
        for key, value in sorted(preset.items()):
            click.echo(f"  {key}: {format_value(value)}")

    def create(self):
        deps = self.deps
        runtime = deps.detector.detect(bundler_version=self.opts.bundler_version)
        entry = matrix.entry_for(self.opts.bundler_version or runtime.bundler)
        builder = CommandBuilder()

        gem_name = self._resolve_gem_name()
        if self.opts.preset:
            options = self._load_preset_options()
        else:
            options = self._run_wizard(
                gem_name=gem_name,
                entry=entry,
                builder=builder,
                runtime=runtime,
                last_used=deps.store.last_used(),
                bundler_defaults=deps.bundler_defaults_fn(),
            )

        Validator(entry).validate(gem_name, options)
        command = builder.build(gem_name, options)
        deps.runner.run(command, dry_run=self.opts.dry_run)
        deps.store.save_last_used(options)
        self._save_preset_if_requested(options)

    def _resolve_gem_name(self):
        if self.opts.gem_name:
            return self.opts.gem_name
        if self.opts.preset:
            raise ValidationError("Gem name is required when --preset is provided")
        return self.deps.prompter.text("Gem name:", allow_empty=False)

    def _load_preset_options(self):
        preset = self.deps.store.preset(self.opts.preset)
        if preset is None:
            raise ValidationError(f"Preset not found: {self.opts.preset}")
        return dict(preset)

    def _run_wizard(self, *, gem_name, entry, builder, runtime, last_used, bundler_defaults):
        prompter = self.deps.prompter
        palette = self.deps.palette
        with prompter.frame("Controls"):
            prompter.say(render_template(
                "controls.j2",
                back_key=palette.color("control_back", "Ctrl+B"),
                exit_key=palette.color("control_exit", "Ctrl+C"),
            ))

        defaults = last_used
        while True:
            options = WizardSession(
                entry,
                defaults,
                prompter,
                bundler_defaults=bundler_defaults,
                palette=palette,
            ).run()

            self._show_summary(builder.build(gem_name, options), runtime)
            action = prompter.choose("Next step", [CREATE, EDIT_AGAIN], default=CREATE, allow_back=False)
            if action == CREATE:
                return options
            defaults = options

    def _show_summary(self, command, runtime):
        palette = self.deps.palette
        versions = [
            ("ruby", runtime.ruby),
            ("rubygems", runtime.rubygems),
            ("bundler", runtime.bundler),
        ]
        runtime_parts = [
            f"{palette.color('runtime_name', name)} {palette.color('runtime_value', str(version or 'unknown'))}"
            for name, version in versions
        ]
        with self.deps.prompter.frame("create-gem summary"):
            self.deps.prompter.say(render_template(
                "summary.j2",
                runtime_label=palette.color("summary_label", "Runtime:"),
                runtime=runtime_parts,
                command_label=palette.color("summary_label", "Command:"),
                command=palette.format_command(command),
            ))

    def _save_preset_if_requested(self, options):
        prompter = self.deps.prompter
        if self.opts.save_preset:
            self.deps.store.save_preset(self.opts.save_preset, options)
            return
        if self.opts.preset:
            return
        if not prompter.confirm("Save these options as a preset?", default=False):
            return
        name = prompter.text("Preset name:", allow_empty=False)
        self.deps.store.save_preset(name, options)
