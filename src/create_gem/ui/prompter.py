"""Prompter: every question the wizard and CLI ask goes through here."""

from contextlib import contextmanager

import click

from create_gem.ui.menu import MenuConfig, get_user_choice, get_user_text
from create_gem.wizard.answers import Signal

FRAME_RULE = "=" * 48


class Prompter:
    """Asks questions on top of the numbered menu.

    ``choose`` returns the selected option string or ``Signal.BACK``; the
    wizard never sees how input is read.
    """

    def __init__(self, config=None):
        self._config = config or MenuConfig()

    @property
    def output(self):
        return self._config.output

    def choose(self, question, options, default=None, allow_back=True):
        default_index = options.index(default) + 1 if default in options else 1
        choice = get_user_choice(
            question, default_index, options, config=self._config, allow_back=allow_back
        )
        if choice is Signal.BACK:
            return Signal.BACK
        return options[choice - 1]

    def text(self, question, default=None, allow_empty=True) -> str:
        return get_user_text(question, default=default, allow_empty=allow_empty, config=self._config)

    def confirm(self, question, default=False) -> bool:
        options = ["yes", "no"]
        choice = self.choose(question, options, default="yes" if default else "no", allow_back=False)
        return choice == "yes"

    def say(self, message=""):
        click.echo(message, file=self.output)

    @contextmanager
    def frame(self, title):
        self.say(FRAME_RULE)
        self.say(f"  {title}")
        self.say(FRAME_RULE)
        try:
            yield self
        finally:
            self.say(FRAME_RULE)
