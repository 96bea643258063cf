"""Runner: executes the assembled ``bundle gem`` command or prints it."""

import logging
import shlex
import subprocess

import click

from create_gem.errors import CreateGemError

logger = logging.getLogger(__name__)


class Runner:

    def __init__(self, output=None, run=subprocess.run):
        self._output = output
        self._run = run

    def run(self, command, dry_run=False) -> bool:
        """Run ``command``, or print it when ``dry_run`` is set.

        Raises:
            CreateGemError: If the command exits non-zero.
        """
        if dry_run:
            click.echo(" ".join(command), file=self._output)
            return True

        logger.debug("Running: %s", shlex.join(command))
        try:
            result = self._run(command)
        except FileNotFoundError:
            raise CreateGemError(f"Command not found: {command[0]}") from None
        if result.returncode != 0:
            raise CreateGemError(f"Command failed: {shlex.join(command)}")
        return True
