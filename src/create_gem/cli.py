"""Click entry point for the create-gem CLI."""

import logging

import click

from create_gem.create_command import CreateGemCommand
from create_gem.create_opts import CreateGemOpts


def _configure_logging(verbose):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)-8s %(name)s - %(message)s")


@click.command("create-gem")
@click.argument("gem_name", required=False)
@click.option("--preset", metavar="NAME", help="Create the gem from a saved preset")
@click.option("--save-preset", metavar="NAME", help="Save the chosen options as a preset")
@click.option("--list-presets", is_flag=True, help="List saved presets")
@click.option("--show-preset", metavar="NAME", help="Show the options stored in a preset")
@click.option("--delete-preset", metavar="NAME", help="Delete a saved preset")
@click.option("--doctor", is_flag=True, help="Show detected versions and supported options")
@click.option("--version", is_flag=True, help="Show the create-gem version")
@click.option("--dry-run", is_flag=True, help="Print the bundle gem command instead of running it")
@click.option("--bundler-version", metavar="VERSION", help="Use this Bundler version instead of detecting it")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, **kwargs):
    """Interactive wizard for `bundle gem`.

    \f
    Dependencies may be supplied as a CreateGemDeps through ctx.obj.
    """
    opts = CreateGemOpts(**kwargs)
    opts.validate_actions()
    _configure_logging(opts.verbose)
    CreateGemCommand(opts, deps=ctx.obj).execute()
