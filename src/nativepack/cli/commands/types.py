"""Types command - list installer types accepted per OS family."""

import click
from rich.console import Console
from rich.table import Table

from nativepack.core.host import OSFamily
from nativepack.core.installer_type import InstallerType, allowed_types_for, resolve_packager_type

_OS_CHOICES = {family.value.lower(): family for family in OSFamily}


def _default_resolution(os_family: OSFamily) -> str:
    resolved = resolve_packager_type(InstallerType.DEFAULT, os_family)
    if resolved is None:
        return "jpackage default"
    return resolved.value


@click.command("types")
@click.option(
    "--os",
    "os_name",
    type=click.Choice(sorted(_OS_CHOICES), case_sensitive=False),
    default=None,
    help="Only show one OS family",
)
def types_cmd(os_name: str | None) -> None:
    """List the installer types each OS family accepts."""
    families = list(OSFamily) if os_name is None else [_OS_CHOICES[os_name.lower()]]

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("OS", style="cyan", no_wrap=True)
    table.add_column("Installer types", style="yellow", no_wrap=True)
    table.add_column("DEFAULT builds", no_wrap=True)
    for family in families:
        allowed = ", ".join(t.value for t in allowed_types_for(family))
        table.add_row(family.value, allowed, _default_resolution(family))

    Console().print(table)
