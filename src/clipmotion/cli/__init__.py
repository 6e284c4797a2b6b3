import logging
import os

import click

from clipmotion.context import create_context
from clipmotion.error_boundary import cli_error_boundary
from clipmotion.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

DEBUG_ENV_VAR = "CLIPMOTION_DEBUG"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Add animation components from video clips to your project."""
    debug = debug or bool(os.getenv(DEBUG_ENV_VAR))
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


def _register_commands() -> None:
    from clipmotion.commands.add import add_cmd
    from clipmotion.commands.build import build_alias_cmd, build_cmd
    from clipmotion.commands.create import create_cmd
    from clipmotion.commands.credits import credits_cmd
    from clipmotion.commands.find import find_cmd
    from clipmotion.commands.init import init_cmd

    cli.add_command(init_cmd)
    cli.add_command(add_cmd)
    cli.add_command(find_cmd)
    cli.add_command(create_cmd)
    cli.add_command(credits_cmd)
    cli.add_command(build_cmd)
    cli.add_command(build_alias_cmd)


_register_commands()


def main() -> None:
    """Entry point with error boundary."""
    # Commands carry their own boundary; this one covers group-level failures
    cli_error_boundary(cli)()
