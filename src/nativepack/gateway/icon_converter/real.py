from pathlib import Path

from nativepack.gateway.icon_converter.abc import IconConverter
from nativepack.subprocess_utils import run_subprocess_with_context


class RealIconConverter(IconConverter):
    """Icon converter backed by ImageMagick and iconutil."""

    def resize(self, *, source: Path, size: int, output: Path, timeout: float | None) -> None:
        run_subprocess_with_context(
            cmd=["magick", str(source), "-resize", f"{size}x{size}", str(output)],
            operation_context=f"resize {source.name} to {size}x{size}",
            timeout=timeout,
        )

    def compile_icns(self, *, iconset_dir: Path, output: Path, timeout: float | None) -> None:
        run_subprocess_with_context(
            cmd=["iconutil", "--convert", "icns", "--output", str(output), str(iconset_dir)],
            operation_context=f"compile {iconset_dir.name} into {output.name}",
            timeout=timeout,
        )
