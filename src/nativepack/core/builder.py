"""Native installer construction.

Resolves the OS-specific packaging options from the packaging config and the
validated installer type, renders them as packaging tool arguments and runs
the packager once.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from nativepack.cli.config import PackagingConfig
from nativepack.core.host import OSFamily
from nativepack.core.installer_type import InstallerType, resolve_packager_type
from nativepack.core.layout import BuildLayout, reset_directory
from nativepack.gateway.packager.abc import NativePackager

logger = logging.getLogger(__name__)

CONSOLE_OPTION = "Console"


def is_console_option(option: str | None) -> bool:
    """Whether the caller asked for the console launcher variant (Windows)."""
    return option == CONSOLE_OPTION


@dataclass(frozen=True)
class InstallerOptions:
    """Fully resolved packaging tool options for one run."""

    os_family: OSFamily
    packager_type: InstallerType | None
    input_dir: Path
    dest_dir: Path
    runtime_image: Path
    name: str
    version: str
    main_jar: str
    main_class: str
    vendor: str | None
    description: str | None
    license_file: Path | None
    icon: Path | None
    java_options: list[str]
    file_associations: list[Path]
    # Windows
    win_console: bool
    # macOS
    mac_package_identifier: str | None
    mac_package_name: str | None


def resolve_installer_options(
    config: PackagingConfig,
    *,
    installer_type: InstallerType,
    os_family: OSFamily,
    layout: BuildLayout,
    option: str | None,
) -> InstallerOptions:
    """Select the OS branch and resolve every option the packager receives."""
    icon: Path | None
    mac_identifier: str | None = None
    mac_name: str | None = None
    if os_family is OSFamily.WINDOWS:
        icon = config.windows.icon
    elif os_family is OSFamily.MACOS:
        # Compiled by the icon stage, which must run before the packager
        icon = layout.icns_path if config.macos.icon_source is not None else None
        mac_identifier = config.macos.package_identifier
        mac_name = config.macos.package_name or config.program.name
    else:
        icon = config.linux.icon

    program = config.program
    return InstallerOptions(
        os_family=os_family,
        packager_type=resolve_packager_type(installer_type, os_family),
        input_dir=layout.jars_dir,
        dest_dir=layout.dist_dir,
        runtime_image=layout.runtime_dir,
        name=program.name,
        version=program.version,
        main_jar=program.main_jar,
        main_class=program.main_class,
        vendor=program.vendor,
        description=program.description,
        license_file=program.license_file,
        icon=icon,
        java_options=list(config.java_options),
        file_associations=list(config.file_associations),
        win_console=os_family is OSFamily.WINDOWS and is_console_option(option),
        mac_package_identifier=mac_identifier,
        mac_package_name=mac_name,
    )


def build_packager_args(options: InstallerOptions) -> list[str]:
    """Render options as packaging tool arguments."""
    args: list[str] = []
    if options.packager_type is not None:
        args += ["--type", options.packager_type.packager_name]

    args += [
        "--input", str(options.input_dir),
        "--dest", str(options.dest_dir),
        "--verbose",
        "--runtime-image", str(options.runtime_image),
        "--name", options.name,
        "--app-version", options.version,
        "--main-jar", options.main_jar,
        "--main-class", options.main_class,
    ]  # fmt: skip
    if options.vendor is not None:
        args += ["--vendor", options.vendor]
    if options.description is not None:
        args += ["--description", options.description]
    if options.license_file is not None:
        args += ["--license-file", str(options.license_file)]
    if options.icon is not None:
        args += ["--icon", str(options.icon)]
    for association in options.file_associations:
        args += ["--file-associations", str(association)]
    for java_option in options.java_options:
        args += ["--java-options", java_option]

    if options.os_family is OSFamily.WINDOWS:
        args += ["--win-dir-chooser", "--win-menu", "--win-shortcut-prompt", "--win-shortcut"]
        if options.win_console:
            args.append("--win-console")
    elif options.os_family is OSFamily.MACOS:
        if options.mac_package_identifier is not None:
            args += ["--mac-package-identifier", options.mac_package_identifier]
        if options.mac_package_name is not None:
            args += ["--mac-package-name", options.mac_package_name]
    else:
        args.append("--linux-shortcut")

    return args


def list_artifacts(dest_dir: Path) -> list[Path]:
    """Regular files directly inside dest_dir, sorted by name."""
    if not dest_dir.is_dir():
        return []
    return sorted((p for p in dest_dir.iterdir() if p.is_file()), key=lambda p: p.name)


def build_installer(
    packager: NativePackager, options: InstallerOptions, *, timeout: float | None
) -> list[Path]:
    """Run the packager and return the files it produced.

    The destination directory is emptied first, so installers left by an
    earlier run are never picked up as this run's output.

    Raises:
        PackagingError: If the destination directory cannot be reset
        ToolInvocationError: If the packager fails
    """
    reset_directory(options.dest_dir)
    packager.package(args=build_packager_args(options), timeout=timeout)
    artifacts = list_artifacts(options.dest_dir)
    if not artifacts:
        logger.warning("Packager succeeded but %s is empty", options.dest_dir)
    return artifacts
