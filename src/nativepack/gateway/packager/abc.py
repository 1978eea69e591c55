from abc import ABC, abstractmethod


class NativePackager(ABC):
    """Turns a runtime image, application jars and metadata into an installer."""

    @abstractmethod
    def package(self, *, args: list[str], timeout: float | None) -> None:
        """Run the native packaging tool with the given arguments.

        The arguments are the tool's own options (without the executable),
        as produced by build_packager_args.

        Raises:
            ToolInvocationError: If the packaging tool fails
        """
        ...
