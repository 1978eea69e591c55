"""Probe command - show the host facts used to name artifacts."""

import json

import click

from nativepack.cli.ensure import user_facing_errors
from nativepack.core.context import PackContext
from nativepack.core.host import probe_host
from nativepack.output.output import machine_output


@click.command("probe")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def probe_cmd(ctx: PackContext, as_json: bool) -> None:
    """Show the host OS family, distribution and architecture."""
    with user_facing_errors():
        facts = probe_host(ctx.host)

    data = {
        "os_family": facts.os_family.value,
        "osname": facts.osname,
        "distro_name": facts.distro_name,
        "distro_version": facts.distro_version,
        "architecture": facts.architecture,
    }
    if as_json:
        machine_output(json.dumps(data, indent=2))
        return
    for key, value in data.items():
        machine_output(f"{key}: {value if value is not None else '-'}")
