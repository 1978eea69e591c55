"""Package command - run the full packaging pipeline."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from nativepack.cli.config import CONFIG_FILENAME, load_config
from nativepack.cli.ensure import user_facing_errors
from nativepack.core.context import PackContext
from nativepack.core.pipeline import PackagingPlan, PackagingResult, plan_packaging, run_packaging
from nativepack.output.output import user_output


def resolve_config_path(ctx: PackContext, config_path: Path | None) -> Path:
    if config_path is None:
        return ctx.cwd / CONFIG_FILENAME
    if config_path.is_absolute():
        return config_path
    return ctx.cwd / config_path


def _print_plan(plan: PackagingPlan) -> None:
    facts = plan.facts
    user_output("[DRY RUN] No stage will be executed")
    user_output(f"  Host: {facts.osname} {facts.architecture} ({facts.os_family.value})")
    user_output(f"  Installer type: {plan.installer_type.value}")
    user_output(f"  Build root: {plan.layout.root}")
    user_output(f"  Would run: jpackage {' '.join(plan.packager_args)}")


def _print_outcomes(result: PackagingResult) -> None:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Produced", style="dim", no_wrap=True)
    table.add_column("Artifact", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    for outcome in result.outcomes:
        if outcome.succeeded:
            table.add_row(outcome.source.name, outcome.target.name, "[green]renamed[/green]")
        else:
            table.add_row(outcome.source.name, outcome.target.name, f"[red]{outcome.error}[/red]")
    Console(stderr=True).print(table)

    if not result.outcomes:
        user_output(click.style("Warning: ", fg="yellow") + "no installer was produced")
    for failed in result.failed_renames:
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"{failed.source.name} was left unrenamed: {failed.error}"
        )


@click.command("package")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Packaging config file (default: ./{CONFIG_FILENAME})",
)
@click.option(
    "-t",
    "--installer-type",
    default=None,
    help="DEFAULT, EXE, MSI (Windows), DMG, PKG (macOS), DEB, RPM (Linux)",
)
@click.option("--option", default=None, help='Launcher option; "Console" adds a console launcher')
@click.option("--dry-run", is_flag=True, help="Validate and show the plan without running tools")
@click.pass_obj
def package_cmd(
    ctx: PackContext,
    config_path: Path | None,
    installer_type: str | None,
    option: str | None,
    dry_run: bool,
) -> None:
    """Build the native installer for this host.

    Assembles a trimmed runtime, stages the application jars, prepares the
    icon on macOS, runs jpackage and renames the installer to
    <name>-<version>-<os><option>-<arch>.<ext>.
    """
    with user_facing_errors():
        config = load_config(resolve_config_path(ctx, config_path))
        if dry_run:
            _print_plan(plan_packaging(ctx, config, installer_type=installer_type, option=option))
            return
        result = run_packaging(ctx, config, installer_type=installer_type, option=option)

    _print_outcomes(result)
    if result.artifacts:
        dist_dir = result.plan.layout.dist_dir
        user_output(click.style("✓", fg="green") + f" Installer ready in {dist_dir}")
