"""Abstract interface for reading facts about the host machine."""

from abc import ABC, abstractmethod


class HostPlatform(ABC):
    """Access to the execution environment and host package metadata.

    All implementations (real, fake) must implement this interface.
    This gateway enables testing the probe logic without depending on the
    machine the tests run on.
    """

    @abstractmethod
    def system(self) -> str:
        """Return the OS name as reported by the runtime (e.g. "Linux", "Darwin")."""
        ...

    @abstractmethod
    def machine(self) -> str:
        """Return the raw CPU architecture name (e.g. "x86_64", "AMD64")."""
        ...

    @abstractmethod
    def distro_id(self) -> str:
        """Return the raw distribution short name output (Linux only).

        Raises:
            ToolInvocationError: If the query command fails
        """
        ...

    @abstractmethod
    def distro_release(self) -> str:
        """Return the raw distribution release output (Linux only).

        Raises:
            ToolInvocationError: If the query command fails
        """
        ...
