from nativepack.core.errors import ToolInvocationError
from nativepack.gateway.host_platform.abc import HostPlatform


class FakeHostPlatform(HostPlatform):
    """In-memory host platform for tests.

    distro_id/distro_release return the configured raw output; passing None
    makes the corresponding query fail like a missing lsb_release would.
    """

    def __init__(
        self,
        *,
        system: str,
        machine: str,
        distro_id: str | None,
        distro_release: str | None,
    ) -> None:
        self._system = system
        self._machine = machine
        self._distro_id = distro_id
        self._distro_release = distro_release
        self._queries: list[str] = []

    @classmethod
    def linux(
        cls, *, distro_id: str = "Ubuntu\n", distro_release: str = "22.04\n"
    ) -> "FakeHostPlatform":
        """Create a Linux host with lsb_release-style output."""
        return cls(
            system="Linux", machine="x86_64", distro_id=distro_id, distro_release=distro_release
        )

    @classmethod
    def windows(cls) -> "FakeHostPlatform":
        return cls(system="Windows", machine="AMD64", distro_id=None, distro_release=None)

    @classmethod
    def macos(cls) -> "FakeHostPlatform":
        return cls(system="Darwin", machine="arm64", distro_id=None, distro_release=None)

    def system(self) -> str:
        return self._system

    def machine(self) -> str:
        return self._machine

    def distro_id(self) -> str:
        self._queries.append("distro_id")
        if self._distro_id is None:
            raise ToolInvocationError("Failed to query Linux distribution name")
        return self._distro_id

    def distro_release(self) -> str:
        self._queries.append("distro_release")
        if self._distro_release is None:
            raise ToolInvocationError("Failed to query Linux distribution version")
        return self._distro_release

    @property
    def queries(self) -> list[str]:
        """Distribution queries issued so far, in order."""
        return list(self._queries)
