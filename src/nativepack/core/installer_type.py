"""Installer type parsing and per-OS validation.

The validator is a pre-flight gate: it runs before any external tool and a
rejected type always aborts the run. Its outcomes are

    absent          -> DEFAULT
    unparsable      -> ConfigurationError listing every literal value
    not allowed     -> ConfigurationError naming the type and the OS
    allowed         -> the parsed type
"""

from enum import Enum

from nativepack.core.errors import ConfigurationError
from nativepack.core.host import OSFamily


class InstallerType(Enum):
    DEFAULT = "DEFAULT"
    EXE = "EXE"
    MSI = "MSI"
    DMG = "DMG"
    PKG = "PKG"
    DEB = "DEB"
    RPM = "RPM"

    @property
    def packager_name(self) -> str:
        """Value passed to the packaging tool's --type option."""
        return self.value.lower()


ALLOWED_INSTALLER_TYPES: dict[OSFamily, frozenset[InstallerType]] = {
    OSFamily.WINDOWS: frozenset({InstallerType.DEFAULT, InstallerType.EXE, InstallerType.MSI}),
    OSFamily.MACOS: frozenset({InstallerType.DEFAULT, InstallerType.DMG, InstallerType.PKG}),
    OSFamily.LINUX: frozenset({InstallerType.DEFAULT, InstallerType.DEB, InstallerType.RPM}),
}

# OS families absent here keep the packaging tool's own default
_DEFAULT_RESOLUTION: dict[OSFamily, InstallerType] = {
    OSFamily.WINDOWS: InstallerType.MSI,
}


def format_types(types: frozenset[InstallerType] | list[InstallerType]) -> str:
    """Render installer types in declaration order."""
    return ", ".join(t.value for t in InstallerType if t in types)


def allowed_types_for(os_family: OSFamily) -> list[InstallerType]:
    return [t for t in InstallerType if t in ALLOWED_INSTALLER_TYPES[os_family]]


def parse_installer_type(raw: str) -> InstallerType | None:
    """Parse a case-insensitive installer type literal, None if unknown."""
    key = raw.strip().upper()
    if key in InstallerType.__members__:
        return InstallerType[key]
    return None


def validate_installer_type(requested: str | None, os_family: OSFamily) -> InstallerType:
    """Decide the installer type for this run.

    Args:
        requested: Raw caller value, None when not requested
        os_family: Detected host OS family

    Returns:
        The accepted installer type (DEFAULT when nothing was requested)

    Raises:
        ConfigurationError: If the value cannot be parsed or is not allowed
            on os_family
    """
    allowed = ALLOWED_INSTALLER_TYPES[os_family]
    if requested is None:
        return InstallerType.DEFAULT

    parsed = parse_installer_type(requested)
    if parsed is None:
        raise ConfigurationError(
            f"Illegal installerType: {requested!r}. "
            f"installerType should be one of {format_types(list(InstallerType))} "
            f"(allowed on {os_family.value}: {format_types(allowed)})"
        )

    if parsed not in allowed:
        raise ConfigurationError(
            f"Illegal installerType for {os_family.value}: {parsed.value} "
            f"(allowed on {os_family.value}: {format_types(allowed)})"
        )

    return parsed


def resolve_packager_type(
    installer_type: InstallerType, os_family: OSFamily
) -> InstallerType | None:
    """Return the concrete type to pass to the packager, None to omit --type."""
    if installer_type is not InstallerType.DEFAULT:
        return installer_type
    return _DEFAULT_RESOLUTION.get(os_family)
