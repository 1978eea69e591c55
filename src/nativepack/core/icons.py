"""macOS icon preparation: PNG source -> .iconset -> .icns."""

import logging
from pathlib import Path

from nativepack.core.errors import ConfigurationError, ToolInvocationError
from nativepack.gateway.icon_converter.abc import IconConverter

logger = logging.getLogger(__name__)

ICON_SIZES = (16, 32, 64, 128, 256, 512)


def iconset_entries(iconset_dir: Path) -> list[tuple[int, Path]]:
    """Pixel size and file path of every iconset variant, standard then @2x per size."""
    entries: list[tuple[int, Path]] = []
    for size in ICON_SIZES:
        entries.append((size, iconset_dir / f"icon_{size}x{size}.png"))
        entries.append((size * 2, iconset_dir / f"icon_{size}x{size}@2x.png"))
    return entries


def prepare_icon(
    converter: IconConverter,
    source_png: Path,
    *,
    iconset_dir: Path,
    output_icns: Path,
    timeout: float | None,
) -> None:
    """Convert source_png into a compound .icns file at output_icns.

    There is no partial success: either output_icns exists afterwards or an
    error is raised.

    Raises:
        ConfigurationError: If the source icon does not exist
        ToolInvocationError: If a conversion fails or no .icns was produced
    """
    if not source_png.is_file():
        raise ConfigurationError(f"macOS source icon not found at {source_png}")

    iconset_dir.mkdir(parents=True, exist_ok=True)
    for pixels, path in iconset_entries(iconset_dir):
        converter.resize(source=source_png, size=pixels, output=path, timeout=timeout)

    output_icns.unlink(missing_ok=True)
    converter.compile_icns(iconset_dir=iconset_dir, output=output_icns, timeout=timeout)
    if not output_icns.is_file():
        raise ToolInvocationError(f"Icon compiler reported success but {output_icns} is missing")
    logger.info("Icon created at %s", output_icns)
