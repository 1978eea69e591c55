from abc import ABC, abstractmethod
from pathlib import Path


class RuntimeTrimmer(ABC):
    """Produces a minimized Java runtime containing only the given modules."""

    @abstractmethod
    def trim(self, *, output_dir: Path, modules: list[str], timeout: float | None) -> None:
        """Write a trimmed runtime image to output_dir.

        output_dir must not exist yet. Debug symbols, header files and man
        pages are stripped from the image.

        Raises:
            ToolInvocationError: If the trimming tool fails
        """
        ...
