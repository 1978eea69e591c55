import platform

from nativepack.gateway.host_platform.abc import HostPlatform
from nativepack.subprocess_utils import run_subprocess_with_context

# lsb_release answers instantly; anything longer means a broken install
_QUERY_TIMEOUT = 30.0


class RealHostPlatform(HostPlatform):
    """Production implementation backed by the platform module and lsb_release."""

    def system(self) -> str:
        return platform.system()

    def machine(self) -> str:
        return platform.machine()

    def distro_id(self) -> str:
        result = run_subprocess_with_context(
            cmd=["lsb_release", "-s", "-i"],
            operation_context="query Linux distribution name",
            timeout=_QUERY_TIMEOUT,
        )
        return result.stdout

    def distro_release(self) -> str:
        result = run_subprocess_with_context(
            cmd=["lsb_release", "-s", "-r"],
            operation_context="query Linux distribution version",
            timeout=_QUERY_TIMEOUT,
        )
        return result.stdout
