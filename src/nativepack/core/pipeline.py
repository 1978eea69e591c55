"""The packaging pipeline.

    detect OS family -> validate installer type -> probe host
        -> assemble runtime, collect jars, prepare icon (macOS)
        -> build installer -> rename artifacts

Every stage before the renamer is fail-fast. The installer type is validated
right after the OS family is known, before any external tool runs.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from nativepack.cli.config import PackagingConfig
from nativepack.core.builder import (
    InstallerOptions,
    build_installer,
    build_packager_args,
    resolve_installer_options,
)
from nativepack.core.collector import collect_artifacts
from nativepack.core.context import PackContext
from nativepack.core.host import HostFacts, OSFamily, detect_os_family, probe_host
from nativepack.core.icons import prepare_icon
from nativepack.core.installer_type import InstallerType, validate_installer_type
from nativepack.core.layout import BuildLayout
from nativepack.core.renamer import RenameOutcome, artifact_name_option, rename_artifacts
from nativepack.core.runtime import assemble_runtime
from nativepack.output.output import user_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackagingPlan:
    """Every decision of a run, made before any stage executes."""

    facts: HostFacts
    installer_type: InstallerType
    layout: BuildLayout
    options: InstallerOptions
    name_option: str

    @property
    def packager_args(self) -> list[str]:
        return build_packager_args(self.options)


@dataclass(frozen=True)
class PackagingResult:
    plan: PackagingPlan
    outcomes: list[RenameOutcome]

    @property
    def artifacts(self) -> list[Path]:
        return [o.target for o in self.outcomes if o.succeeded]

    @property
    def failed_renames(self) -> list[RenameOutcome]:
        return [o for o in self.outcomes if not o.succeeded]


def plan_packaging(
    ctx: PackContext,
    config: PackagingConfig,
    *,
    installer_type: str | None,
    option: str | None,
) -> PackagingPlan:
    """Validate the request and probe the host.

    Raises:
        ConfigurationError: If the installer type is invalid for the host OS
        ProbeError: If host facts cannot be discovered
    """
    os_family = detect_os_family(ctx.host)
    accepted = validate_installer_type(installer_type, os_family)
    logger.debug("Installer type %s accepted for %s", accepted.value, os_family.value)

    facts = probe_host(ctx.host)
    layout = BuildLayout(root=config.build.root, program_name=config.program.name)
    options = resolve_installer_options(
        config,
        installer_type=accepted,
        os_family=facts.os_family,
        layout=layout,
        option=option,
    )
    return PackagingPlan(
        facts=facts,
        installer_type=accepted,
        layout=layout,
        options=options,
        name_option=artifact_name_option(facts, option),
    )


def _stage_done(message: str, ran: bool) -> None:
    suffix = "" if ran else click.style(" (already done)", dim=True)
    user_output(click.style("✓", fg="green") + f" {message}{suffix}")


def run_packaging(
    ctx: PackContext,
    config: PackagingConfig,
    *,
    installer_type: str | None,
    option: str | None,
) -> PackagingResult:
    """Run the whole pipeline and produce the renamed installer artifact(s).

    Raises:
        PackagingError: From any stage before renaming; rename failures are
            reported in the result instead
    """
    plan = plan_packaging(ctx, config, installer_type=installer_type, option=option)
    layout = plan.layout
    timeout = config.build.tool_timeout

    ran = assemble_runtime(
        ctx.runtime_trimmer, layout.runtime_dir, modules=config.runtime_modules, timeout=timeout
    )
    _stage_done(f"Custom runtime in {layout.runtime_dir}", ran)

    ran = collect_artifacts(config.app, layout.jars_dir)
    _stage_done(f"Application jars in {layout.jars_dir}", ran)

    if plan.facts.os_family is OSFamily.MACOS and config.macos.icon_source is not None:
        prepare_icon(
            ctx.icon_converter,
            config.macos.icon_source,
            iconset_dir=layout.iconset_dir,
            output_icns=layout.icns_path,
            timeout=timeout,
        )
        _stage_done(f"Icon {layout.icns_path}", True)

    user_output("Building installer...")
    produced = build_installer(ctx.packager, plan.options, timeout=timeout)
    logger.debug("Packager produced: %s", [p.name for p in produced])

    outcomes = rename_artifacts(
        layout.dist_dir,
        program_name=config.program.name,
        version=config.program.version,
        facts=plan.facts,
        option=plan.name_option,
    )
    return PackagingResult(plan=plan, outcomes=outcomes)
