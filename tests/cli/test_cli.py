"""CLI tests for the create-gem command."""

import pytest
from click.testing import CliRunner

from create_gem.cli import main
from create_gem.config.store import Store
from create_gem.create_command import CreateGemDeps
from create_gem.errors import UnsupportedBundlerVersionError
from create_gem.ui.palette import Palette
from create_gem.version import VERSION
from fake_collaborators import FakeDetector, FakeRunner, FakeStore
from fake_prompter import FakePrompter


def _deps(store=None, detector=None, runner=None, prompter=None, bundler_defaults=None):
    return CreateGemDeps(
        store=store or FakeStore(),
        detector=detector or FakeDetector(bundler="3.1.0"),
        runner=runner or FakeRunner(),
        prompter=prompter or FakePrompter(),
        palette=Palette(enabled=False),
        bundler_defaults_fn=lambda: dict(bundler_defaults or {}),
    )


def run(deps, *args):
    return CliRunner().invoke(main, list(args), obj=deps)


@pytest.mark.unit
class TestQueries:

    def test_prints_version(self):
        result = run(_deps(), "--version")
        assert result.exit_code == 0
        assert result.output.strip() == VERSION

    def test_lists_presets(self):
        store = FakeStore(presets={"team": {"exe": True}, "alpha": {}})
        result = run(_deps(store=store), "--list-presets")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["alpha", "team"]

    def test_shows_preset_values_sorted(self):
        store = FakeStore(presets={"team": {"test": "rspec", "exe": True, "ci": False}})
        result = run(_deps(store=store), "--show-preset", "team")
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "team",
            "  ci: false",
            "  exe: true",
            '  test: "rspec"',
        ]

    def test_show_missing_preset_fails(self):
        result = run(_deps(), "--show-preset", "ghost")
        assert result.exit_code == 1
        assert "Preset not found: ghost" in result.output

    def test_deletes_preset(self):
        store = FakeStore(presets={"old": {}})
        result = run(_deps(store=store), "--delete-preset", "old")
        assert result.exit_code == 0
        assert store.preset_names() == []

    def test_corrupt_presets_section_is_reported(self, tmp_path):
        config_path = tmp_path / "config.yml"
        config_path.write_text("presets: not-a-map\n")
        result = run(_deps(store=Store(config_path)), "--list-presets")
        assert result.exit_code == 1
        assert f"Error: Invalid config file at {config_path}: presets must be a mapping" in result.output

    def test_conflicting_actions_are_usage_errors(self):
        result = run(_deps(), "--list-presets", "--doctor")
        assert result.exit_code == 2
        assert "cannot be combined" in result.output


@pytest.mark.unit
class TestDoctor:

    def test_prints_versions_and_supported_options(self):
        result = run(_deps(detector=FakeDetector(bundler="2.5.0")), "--doctor")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[:3] == ["ruby: 3.3.0", "rubygems: 3.5.3", "bundler: 2.5.0"]
        assert lines[3].startswith("supported options: exe, coc, ext, git")
        assert "linter" not in lines[3]

    def test_uses_bundler_version_override(self):
        detector = FakeDetector(bundler="3.1.0")
        result = run(_deps(detector=detector), "--doctor", "--bundler-version", "4.0.0")
        assert "bundler: 4.0.0" in result.output
        assert detector.calls == ["4.0.0"]

    def test_unsupported_version_fails_with_ranges(self):
        result = run(_deps(detector=FakeDetector(bundler="1.17.3")), "--doctor")
        assert result.exit_code == 1
        assert "Unsupported bundler version: 1.17.3" in result.output
        assert ">=2.4, <3.0 | >=3.0, <4.0 | >=4.0, <5.0" in result.output

    def test_prerelease_override_resolves_to_lower_range(self):
        result = run(_deps(), "--doctor", "--bundler-version", "3.0.0.pre1")
        assert result.exit_code == 0
        assert "linter" not in result.output.splitlines()[3]

    def test_unsupported_override_is_reported_as_typed(self):
        result = run(_deps(), "--doctor", "--bundler-version", "9.0.0.pre1")
        assert result.exit_code == 1
        assert "Unsupported bundler version: 9.0.0.pre1." in result.output

    def test_missing_bundler_fails(self):
        error = UnsupportedBundlerVersionError("Bundler executable not found: bundle")
        result = run(_deps(detector=FakeDetector(error=error)), "--doctor")
        assert result.exit_code == 1
        assert "Bundler executable not found" in result.output


@pytest.mark.unit
class TestPresetFlow:

    def test_runs_preset_in_dry_run_mode(self):
        store = FakeStore(presets={"team": {"exe": True, "test": "rspec"}})
        runner = FakeRunner()
        result = run(_deps(store=store, runner=runner), "my_gem", "--preset", "team", "--dry-run")
        assert result.exit_code == 0
        assert runner.commands == [(["bundle", "gem", "my_gem", "--exe", "--test=rspec"], True)]
        assert store.last_used() == {"exe": True, "test": "rspec"}

    def test_missing_preset_fails_without_running(self):
        runner = FakeRunner()
        result = run(_deps(runner=runner), "my_gem", "--preset", "ghost")
        assert result.exit_code == 1
        assert "Preset not found: ghost" in result.output
        assert runner.commands == []

    def test_preset_requires_gem_name(self):
        result = run(_deps(store=FakeStore(presets={"team": {}})), "--preset", "team")
        assert result.exit_code == 1
        assert "Gem name is required when --preset is provided" in result.output

    def test_invalid_preset_values_never_run(self):
        store = FakeStore(presets={"team": {"linter": "rubocop"}})
        runner = FakeRunner()
        result = run(
            _deps(store=store, runner=runner, detector=FakeDetector(bundler="2.5.0")),
            "my_gem", "--preset", "team",
        )
        assert result.exit_code == 1
        assert "Option linter is not supported by this bundler version" in result.output
        assert runner.commands == []
        assert store.saved_last_used == []

    def test_invalid_gem_name_fails(self):
        result = run(_deps(store=FakeStore(presets={"team": {}})), "1bad", "--preset", "team")
        assert result.exit_code == 1
        assert "Invalid gem name: '1bad'" in result.output


@pytest.mark.unit
class TestInteractiveFlow:

    def test_runs_wizard_using_defaults(self):
        store = FakeStore(last_used={"exe": True, "test": "rspec"})
        runner = FakeRunner()
        prompter = FakePrompter()
        result = run(
            _deps(store=store, runner=runner, prompter=prompter, bundler_defaults={"git": True}),
            "my_gem",
        )
        assert result.exit_code == 0, result.output
        command, dry_run = runner.commands[0]
        assert command[:5] == ["bundle", "gem", "my_gem", "--exe", "--no-coc"]
        assert "--git" in command
        assert "--test=rspec" in command
        assert dry_run is False
        assert prompter.frames == ["Controls", "create-gem summary"]

    def test_prompts_for_gem_name_when_missing(self):
        prompter = FakePrompter(texts=["prompted_gem"])
        runner = FakeRunner()
        result = run(_deps(prompter=prompter, runner=runner), "--dry-run")
        assert result.exit_code == 0, result.output
        assert runner.commands[0][0][2] == "prompted_gem"
        assert prompter.seen_texts[0] == "Gem name:"

    def test_edit_again_reruns_wizard_with_previous_answers(self):
        store = FakeStore()
        runner = FakeRunner()
        detector = FakeDetector(bundler="2.5.0")
        # first pass: exe yes, rest default; then "edit again"; second pass all defaults
        first_pass = ["yes"] + [None] * 9
        second_pass = [None] * 10
        prompter = FakePrompter(choices=first_pass + ["edit again"] + second_pass + ["create"])
        result = run(_deps(store=store, runner=runner, detector=detector, prompter=prompter), "my_gem")
        assert result.exit_code == 0, result.output
        assert runner.commands[0][0][3] == "--exe"
        assert prompter.frames.count("create-gem summary") == 2

    def test_save_preset_flag_stores_options(self):
        store = FakeStore()
        result = run(_deps(store=store), "my_gem", "--save-preset", "team", "--dry-run")
        assert result.exit_code == 0, result.output
        assert store.preset("team") == store.last_used()

    def test_confirmed_preset_prompt_stores_options(self):
        store = FakeStore()
        prompter = FakePrompter(confirms=[True], texts=["mine"])
        result = run(_deps(store=store, prompter=prompter), "my_gem", "--dry-run")
        assert result.exit_code == 0, result.output
        assert store.preset_names() == ["mine"]

    def test_interrupt_exits_130(self):
        class InterruptingPrompter(FakePrompter):
            def choose(self, question, options, default=None, allow_back=True):
                raise KeyboardInterrupt

        store = FakeStore()
        result = run(_deps(store=store, prompter=InterruptingPrompter()), "my_gem")
        assert result.exit_code == 130
        assert "See ya!" in result.output
        assert store.saved_last_used == []

    def test_failed_command_reports_error(self):
        result = run(_deps(runner=FakeRunner(fail=True)), "my_gem")
        assert result.exit_code == 1
        assert "Command failed" in result.output
