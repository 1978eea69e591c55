"""Clean command - delete the build root."""

import shutil
from pathlib import Path

import click

from nativepack.cli.commands.package import resolve_config_path
from nativepack.cli.config import CONFIG_FILENAME, load_config
from nativepack.cli.ensure import UserFacingCliError, user_facing_errors
from nativepack.core.context import PackContext
from nativepack.output.output import user_output


@click.command("clean")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Packaging config file (default: ./{CONFIG_FILENAME})",
)
@click.pass_obj
def clean_cmd(ctx: PackContext, config_path: Path | None) -> None:
    """Delete the build root, forcing every stage to run again."""
    with user_facing_errors():
        config = load_config(resolve_config_path(ctx, config_path))

    build_root = config.build.root
    if not build_root.exists():
        user_output(f"Nothing to clean: {build_root} does not exist")
        return

    try:
        shutil.rmtree(build_root)
    except OSError as e:
        raise UserFacingCliError(f"Could not remove {build_root}: {e}") from e
    user_output(click.style("✓", fg="green") + f" Removed {build_root}")
