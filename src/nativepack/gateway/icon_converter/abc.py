"""Abstract interface for the macOS icon tooling.

Two black-box tools sit behind this gateway: a raster resizer producing the
PNG variants of an iconset, and a compiler turning the iconset directory into
a single .icns container.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IconConverter(ABC):
    @abstractmethod
    def resize(self, *, source: Path, size: int, output: Path, timeout: float | None) -> None:
        """Write a size x size copy of source to output.

        Raises:
            ToolInvocationError: If the resize tool fails
        """
        ...

    @abstractmethod
    def compile_icns(self, *, iconset_dir: Path, output: Path, timeout: float | None) -> None:
        """Compile an .iconset directory into an .icns file.

        Raises:
            ToolInvocationError: If the icon compiler fails
        """
        ...
