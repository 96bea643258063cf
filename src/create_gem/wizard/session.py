"""WizardSession: step-by-step prompt loop for choosing ``bundle gem`` options.

Walks the catalog order filtered to the options the compatibility entry
supports, asking one question per option. Answering ``Signal.BACK`` returns
to the previous step.
"""

from create_gem.errors import InconsistentCatalogError
from create_gem.options import catalog
from create_gem.options.catalog import OptionKind
from create_gem.wizard import defaults
from create_gem.wizard.answers import Answer, Signal, Value
from create_gem.wizard.help_text import CHOICE_HELP, HELP_TEXT, LABELS


def sanitize_defaults(options, compatibility_entry) -> dict:
    """Keep only supported options, dropping ``False`` one-way flags."""
    sanitized = {}
    for key, value in options.items():
        key = str(key)
        if not compatibility_entry.supports(key):
            continue
        if catalog.definition_of(key).kind is OptionKind.FLAG and value is False:
            continue
        sanitized[key] = value
    return sanitized


def reorder_default_first(choices, default_choice) -> list[str]:
    if default_choice not in choices:
        return list(choices)
    return [default_choice] + [choice for choice in choices if choice != default_choice]


class WizardSession:
    """One pass of the interactive wizard.

    Args:
        compatibility_entry: Entry for the detected Bundler version.
        defaults: Starting values (last-used options, a preset, or the
            previous pass).
        prompter: Object with ``choose`` and ``text`` methods.
        bundler_defaults: Bundler's own defaults, consulted when no value
            is stored for an option.
        palette: Optional ``Palette`` used to color question headers.
    """

    def __init__(self, compatibility_entry, defaults, prompter, bundler_defaults=None, palette=None):
        self._entry = compatibility_entry
        self._prompter = prompter
        self._bundler_defaults = {str(k): v for k, v in (bundler_defaults or {}).items()}
        self._palette = palette
        self._values = sanitize_defaults(defaults, compatibility_entry)

    @property
    def values(self) -> dict:
        return dict(self._values)

    def run(self) -> dict:
        """Ask every supported option in order and return the selections."""
        keys = self._entry.supported_keys()
        index = 0
        while index < len(keys):
            key = keys[index]
            answer = self.ask(key, index=index, total=len(keys))
            if answer is Signal.BACK:
                index = max(index - 1, 0)
                continue
            self.apply(key, answer)
            index += 1
        return dict(self._values)

    def apply(self, key, answer: Answer):
        match answer:
            case Signal.BUNDLER_DEFAULT:
                self._values.pop(key, None)
            case Value(value=value):
                self._values[key] = value
            case _:
                raise InconsistentCatalogError(f"Cannot store answer {answer!r} for {key}")

    def ask(self, key, index=0, total=1) -> Answer:
        definition = catalog.definition_of(key)
        question = self._render_question(key, index, total)
        match definition.kind:
            case OptionKind.TOGGLE:
                return self._ask_toggle(question, key)
            case OptionKind.FLAG:
                return self._ask_flag(question, key)
            case OptionKind.ENUM:
                return self._ask_enum(question, key)
            case OptionKind.STRING:
                return self._ask_string(question, key)
        raise InconsistentCatalogError(f"Unknown option type for {key}")

    def _ask_toggle(self, question, key) -> Answer:
        default_choice = defaults.toggle_default(self._values.get(key), self._bundler_defaults.get(key))
        answer = self._choose(question, key, [defaults.YES, defaults.NO], default_choice)
        if answer is Signal.BACK:
            return answer
        if answer == defaults.YES:
            return Value(True)
        if answer == defaults.NO:
            return Value(False)
        return Signal.BUNDLER_DEFAULT

    def _ask_flag(self, question, key) -> Answer:
        default_choice = defaults.flag_default(self._values.get(key), self._bundler_defaults.get(key))
        answer = self._choose(question, key, [defaults.YES, defaults.NO], default_choice)
        if answer is Signal.BACK:
            return answer
        if answer == defaults.YES:
            return Value(True)
        return Signal.BUNDLER_DEFAULT

    def _ask_enum(self, question, key) -> Answer:
        choices = list(self._entry.allowed_values(key) or catalog.definition_of(key).values)
        choices.append(defaults.NONE)
        default_choice = defaults.enum_default(
            self._values.get(key), self._bundler_defaults.get(key), choices
        )
        answer = self._choose(question, key, choices, default_choice)
        if answer is Signal.BACK:
            return answer
        if answer == defaults.NONE:
            return Value(False)
        return Value(answer)

    def _ask_string(self, question, key) -> Answer:
        current = self._values.get(key)
        answer = self._choose(
            question, key, defaults.string_choices(current), defaults.string_default(current)
        )
        if answer is Signal.BACK:
            return answer
        if answer == defaults.KEEP:
            return Value(current)
        if answer == defaults.NONE:
            return Signal.BUNDLER_DEFAULT

        text = self._prompter.text(f"{LABELS[key]}:", default=None, allow_empty=True)
        if not text:
            return Signal.BUNDLER_DEFAULT
        return Value(text)

    def _choose(self, question, key, choices, default_choice):
        """Present ``choices`` default-first with hints; return a raw choice or ``Signal.BACK``."""
        selected_default = default_choice if default_choice in choices else choices[0]
        ordered = reorder_default_first(choices, selected_default)
        labels = [self.choice_label(key, choice, selected_default) for choice in ordered]
        answer = self._prompter.choose(question, options=labels, default=labels[0])
        if answer is Signal.BACK:
            return answer
        if answer in labels:
            return ordered[labels.index(answer)]
        return selected_default

    def choice_label(self, key, choice, default_choice) -> str:
        label = choice
        hint = self._choice_hint(key, choice)
        if hint:
            label = f"{label} - {hint}"
        if choice == default_choice:
            label = f"{label} (default)"
        return label

    def _choice_hint(self, key, choice):
        if choice == defaults.KEEP and defaults.has_text(self._values.get(key)):
            return f"use {self._values[key]}"
        return CHOICE_HELP.get(key, {}).get(choice)

    def _render_question(self, key, index, total) -> str:
        step = f"{index + 1:02d}/{total:02d}"
        label = LABELS[key]
        if self._palette is not None:
            step = self._palette.color("step", step)
            label = self._palette.bold(label)
        return f"{step} {label} - {HELP_TEXT[key]}"
