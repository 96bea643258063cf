"""Numbered-option menu and text input for the interactive wizard."""

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

import click

from create_gem.wizard.answers import Signal

CTRL_B = "\x02"
BACK_KEYS = ("b", "<", CTRL_B)


@dataclass
class MenuConfig:
    """I/O configuration for menu display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stdout)


def _display_options(prompt, options, default, output):
    click.echo("", file=output)
    click.echo(prompt, file=output)
    for i, option in enumerate(options):
        label = f"  {i + 1}) {option}"
        if i + 1 == default:
            label += " [default]"
        click.echo(label, file=output)
    click.echo("", file=output)


def _build_prompt_text(option_count, default, allow_back):
    prompt_text = f"Enter your choice (1-{option_count})"
    if default:
        prompt_text += f" [default: {default}]"
    if allow_back:
        prompt_text += " or b to go back"
    prompt_text += ": "
    return prompt_text


def _read_input(prompt_text, config):
    try:
        return config.input_fn(prompt_text)
    except EOFError:
        click.echo("", file=config.output)
        click.echo("Input closed. Exiting.", file=config.output)
        sys.exit(0)


def _parse_choice(raw_input, option_count, default, allow_back):
    raw_input = raw_input.strip()
    if allow_back and raw_input.lower() in BACK_KEYS:
        return Signal.BACK
    if raw_input == "" and default:
        return default
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def get_user_choice(prompt, default, options, *, config=None, allow_back=False):
    """Display numbered options and return the user's selection.

    Args:
        prompt: Header text displayed above the options.
        default: 1-based index of the default option.
        options: List of option label strings.
        config: MenuConfig with input_fn and output stream (defaults apply).
        allow_back: Accept ``b`` or Ctrl+B as a request to go back.

    Returns:
        1-based index of the selected option, or ``Signal.BACK``.

    Raises:
        SystemExit(0): On EOF (e.g. piped input closed).
    """
    if config is None:
        config = MenuConfig()

    _display_options(prompt, options, default, config.output)
    prompt_text = _build_prompt_text(len(options), default, allow_back)

    while True:
        choice = _read_input(prompt_text, config)
        parsed = _parse_choice(choice, len(options), default, allow_back)
        if parsed is not None:
            return parsed
        click.echo(
            f"Invalid choice. Please enter a number between 1 and {len(options)}.",
            file=config.output,
        )


def get_user_text(prompt, *, default=None, allow_empty=True, config=None):
    """Read a line of free text.

    Empty input returns ``default`` when one is given. Without a default,
    empty input is returned as ``""`` if ``allow_empty``, otherwise the
    prompt repeats.
    """
    if config is None:
        config = MenuConfig()

    prompt_text = f"{prompt} "
    if default:
        prompt_text = f"{prompt} [{default}] "

    while True:
        value = _read_input(prompt_text, config).strip()
        if value:
            return value
        if default:
            return default
        if allow_empty:
            return ""
        click.echo("A value is required.", file=config.output)
