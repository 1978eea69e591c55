"""Host fact discovery.

Host facts are probed once per run and are immutable afterwards. They select
the OS-specific packaging branch and provide the host-dependent components of
the final artifact name.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from nativepack.core.errors import ProbeError, ToolInvocationError
from nativepack.gateway.host_platform.abc import HostPlatform

logger = logging.getLogger(__name__)


class OSFamily(Enum):
    WINDOWS = "WINDOWS"
    MACOS = "MACOS"
    LINUX = "LINUX"

    @property
    def short_name(self) -> str:
        """Token used for this OS in artifact names when no distro name applies."""
        return _SHORT_NAMES[self]


_SHORT_NAMES = {
    OSFamily.WINDOWS: "windows",
    OSFamily.MACOS: "macosx",
    OSFamily.LINUX: "linux",
}

_SYSTEM_TO_FAMILY = {
    "windows": OSFamily.WINDOWS,
    "darwin": OSFamily.MACOS,
    "linux": OSFamily.LINUX,
}

_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "x86-64": "x86_64",
    "aarch64": "arm64",
}


@dataclass(frozen=True)
class HostFacts:
    """Identity of the machine running the pipeline.

    distro_name and distro_version are only set on Linux.
    """

    os_family: OSFamily
    distro_name: str | None
    distro_version: str | None
    architecture: str

    @property
    def osname(self) -> str:
        """OS component of artifact names: the distro on Linux, the OS token elsewhere."""
        if self.os_family is OSFamily.LINUX and self.distro_name:
            return self.distro_name
        return self.os_family.short_name


def detect_os_family(platform: HostPlatform) -> OSFamily:
    """Map the runtime OS name to an OSFamily without running any process.

    Raises:
        ProbeError: If the host OS is not one of the supported families
    """
    system = platform.system()
    family = _SYSTEM_TO_FAMILY.get(system.strip().lower())
    if family is None:
        raise ProbeError(f"Unsupported host OS: {system!r} (expected Windows, macOS or Linux)")
    return family


def normalize_architecture(machine: str) -> str:
    arch = machine.strip().lower()
    return _ARCH_ALIASES.get(arch, arch)


def _normalize_query_output(raw: str) -> str:
    return raw.lower().replace("\n", "").strip()


def probe_host(platform: HostPlatform) -> HostFacts:
    """Discover the host facts for this run.

    On Linux the distribution name and version are queried through the
    platform gateway; both are required to name the artifact.

    Raises:
        ProbeError: If the OS is unsupported or a distribution query fails
    """
    os_family = detect_os_family(platform)
    architecture = normalize_architecture(platform.machine())
    if not architecture:
        raise ProbeError("Could not determine host CPU architecture")

    if os_family is not OSFamily.LINUX:
        facts = HostFacts(
            os_family=os_family, distro_name=None, distro_version=None, architecture=architecture
        )
        logger.debug("Probed host facts: %s", facts)
        return facts

    try:
        distro_name = _normalize_query_output(platform.distro_id())
        distro_version = _normalize_query_output(platform.distro_release())
    except ToolInvocationError as e:
        raise ProbeError(f"Could not determine Linux distribution: {e}") from e

    if not distro_name:
        raise ProbeError("Could not determine Linux distribution: empty distribution name")
    if not distro_version:
        raise ProbeError("Could not determine Linux distribution: empty distribution version")

    facts = HostFacts(
        os_family=os_family,
        distro_name=distro_name,
        distro_version=distro_version,
        architecture=architecture,
    )
    logger.debug("Probed host facts: %s", facts)
    return facts
