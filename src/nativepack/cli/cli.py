import logging

import click

from nativepack.cli.commands.clean import clean_cmd
from nativepack.cli.commands.init import init_cmd
from nativepack.cli.commands.package import package_cmd
from nativepack.cli.commands.probe import probe_cmd
from nativepack.cli.commands.types import types_cmd
from nativepack.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="nativepack")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Package a prebuilt Java desktop application into a native installer."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(clean_cmd)
cli.add_command(init_cmd)
cli.add_command(package_cmd)
cli.add_command(probe_cmd)
cli.add_command(types_cmd)


def main() -> None:
    """CLI entry point used by the `nativepack` console script."""
    cli()
