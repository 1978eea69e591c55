from dataclasses import dataclass
from pathlib import Path

from nativepack.core.errors import ToolInvocationError
from nativepack.gateway.icon_converter.abc import IconConverter


@dataclass(frozen=True)
class ResizeCall:
    source: Path
    size: int
    output: Path


@dataclass(frozen=True)
class CompileCall:
    iconset_dir: Path
    output: Path


class FakeIconConverter(IconConverter):
    """Records conversions and writes placeholder files.

    Args:
        failing_sizes: Pixel sizes whose resize raises ToolInvocationError
        fail_compile: Make compile_icns raise ToolInvocationError
        skip_compile_output: Succeed without writing the .icns file
    """

    def __init__(
        self,
        *,
        failing_sizes: set[int] | None = None,
        fail_compile: bool = False,
        skip_compile_output: bool = False,
    ) -> None:
        self._failing_sizes = failing_sizes if failing_sizes is not None else set()
        self._fail_compile = fail_compile
        self._skip_compile_output = skip_compile_output
        self._resize_calls: list[ResizeCall] = []
        self._compile_calls: list[CompileCall] = []

    def resize(self, *, source: Path, size: int, output: Path, timeout: float | None) -> None:
        self._resize_calls.append(ResizeCall(source=source, size=size, output=output))
        if size in self._failing_sizes:
            raise ToolInvocationError(f"Failed to resize {source.name} to {size}x{size}")
        output.write_bytes(b"png")

    def compile_icns(self, *, iconset_dir: Path, output: Path, timeout: float | None) -> None:
        self._compile_calls.append(CompileCall(iconset_dir=iconset_dir, output=output))
        if self._fail_compile:
            raise ToolInvocationError(f"Failed to compile {iconset_dir.name} into {output.name}")
        if not self._skip_compile_output:
            output.write_bytes(b"icns")

    @property
    def resize_calls(self) -> list[ResizeCall]:
        return list(self._resize_calls)

    @property
    def compile_calls(self) -> list[CompileCall]:
        return list(self._compile_calls)
