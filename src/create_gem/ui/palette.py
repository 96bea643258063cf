"""Color roles for terminal output."""

import os

import click

# 256-color codes per role
ROLE_COLORS_256 = {
    "step": 45,
    "control_back": 45,
    "control_exit": 203,
    "summary_label": 213,
    "runtime_name": 111,
    "runtime_value": 190,
    "command_base": 39,
    "command_gem": 82,
    "arg_name": 117,
    "arg_eq": 250,
    "arg_value": 214,
}

ROLE_COLORS_BASIC = {
    "step": "cyan",
    "control_back": "cyan",
    "control_exit": "red",
    "summary_label": "magenta",
    "runtime_name": "blue",
    "runtime_value": "green",
    "command_base": "blue",
    "command_gem": "green",
    "arg_name": "blue",
    "arg_eq": "white",
    "arg_value": "yellow",
}


class Palette:
    """Maps semantic roles to ANSI colors.

    Uses 256-color codes when ``TERM``/``COLORTERM`` advertise them, basic
    colors otherwise, and no styling at all when ``NO_COLOR`` is set.
    """

    def __init__(self, env=None, enabled=True):
        self._env = os.environ if env is None else env
        self._enabled = enabled and "NO_COLOR" not in self._env

    def supports_256_colors(self) -> bool:
        term = self._env.get("TERM", "")
        colorterm = self._env.get("COLORTERM", "").lower()
        return "256color" in term or any(token in colorterm for token in ("truecolor", "24bit", "256"))

    def color(self, role, text) -> str:
        if not self._enabled:
            return text
        if self.supports_256_colors():
            return click.style(text, fg=ROLE_COLORS_256[role])
        return click.style(text, fg=ROLE_COLORS_BASIC[role])

    def bold(self, text) -> str:
        if not self._enabled:
            return text
        return click.style(text, bold=True)

    def format_argument(self, argument) -> str:
        if not argument.startswith("--"):
            return self.color("arg_value", argument)
        if "=" not in argument:
            return self.color("arg_name", argument)
        name, value = argument.split("=", 1)
        return self.color("arg_name", name) + self.color("arg_eq", "=") + self.color("arg_value", value)

    def format_command(self, command) -> str:
        """Color a ``bundle gem NAME --args`` command for display."""
        line = self.color("command_base", " ".join(command[:2]))
        if len(command) > 2:
            line += " " + self.color("command_gem", command[2])
        args = [self.format_argument(argument) for argument in command[3:]]
        if args:
            line += " " + " ".join(args)
        return line
