"""Scripted prompter for wizard and command tests."""

from contextlib import contextmanager

from create_gem.wizard.answers import Signal


def strip_label(label):
    """Reduce ``rspec - hint (default)`` to ``rspec``."""
    return label.removesuffix(" (default)").split(" - ", 1)[0]


class FakePrompter:
    """Answers questions from scripted lists, falling back to defaults.

    ``choices`` holds raw choice names (``"yes"``, ``"rspec"``) or
    ``Signal.BACK``. ``None`` or an exhausted list selects the default.
    """

    def __init__(self, choices=(), texts=(), confirms=()):
        self._choices = list(choices)
        self._texts = list(texts)
        self._confirms = list(confirms)
        self.seen_questions = []
        self.seen_options = []
        self.seen_texts = []
        self.messages = []
        self.frames = []

    def choose(self, question, options, default=None, allow_back=True):
        self.seen_questions.append(question)
        self.seen_options.append(list(options))
        value = self._choices.pop(0) if self._choices else None
        if value is Signal.BACK:
            return Signal.BACK
        if value is None:
            return default if default is not None else options[0]
        for option in options:
            if option == value or strip_label(option) == value:
                return option
        raise AssertionError(f"invalid choice {value!r} among {options!r}")

    def text(self, question, default=None, allow_empty=True):
        self.seen_texts.append(question)
        value = self._texts.pop(0) if self._texts else None
        if value is None:
            value = default if default is not None else ""
        return value

    def confirm(self, question, default=False):
        return self._confirms.pop(0) if self._confirms else default

    def say(self, message=""):
        self.messages.append(message)

    @contextmanager
    def frame(self, title):
        self.frames.append(title)
        yield self

    @property
    def flattened_options(self):
        return [option for options in self.seen_options for option in options]
