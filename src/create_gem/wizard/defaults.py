"""Default-choice resolution for wizard steps.

Each function layers three sources, highest priority first: the value
already stored for the option, Bundler's own default, and a fallback.
"""

YES = "yes"
NO = "no"
NONE = "none"
KEEP = "keep"
SET = "set"


def toggle_default(current, bundler_default) -> str:
    if current is True:
        return YES
    if current is False:
        return NO
    return YES if bundler_default is True else NO


def flag_default(current, bundler_default) -> str:
    if current is True:
        return YES
    return YES if bundler_default is True else NO


def enum_default(current, bundler_default, choices) -> str:
    """Pick the default among ``choices`` (allowed values plus ``none``)."""
    if isinstance(current, str) and current in choices:
        return current
    if current is False and NONE in choices:
        return NONE
    if isinstance(bundler_default, str) and bundler_default in choices:
        return bundler_default
    if bundler_default is False and NONE in choices:
        return NONE
    return choices[0]


def has_text(value) -> bool:
    return isinstance(value, str) and value != ""


def string_choices(current) -> list[str]:
    return [KEEP, SET] if has_text(current) else [SET, NONE]


def string_default(current) -> str:
    return KEEP if has_text(current) else NONE
