"""Build-root layout and stage completion markers.

A stage output directory counts as complete only when its completion marker
exists. The marker sits next to the directory (".<name>.complete") so it
never ends up inside the staged jars or runtime image, and it is written
atomically after the stage succeeded. A directory without a marker is the
leftover of an interrupted run.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from nativepack.core.errors import PackagingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildLayout:
    """Paths of every stage output below the build root."""

    root: Path
    program_name: str

    @property
    def jars_dir(self) -> Path:
        return self.root / "jars"

    @property
    def runtime_dir(self) -> Path:
        return self.root / "custom-jre"

    @property
    def iconset_dir(self) -> Path:
        return self.root / "macos.iconset"

    @property
    def icns_path(self) -> Path:
        return self.root / f"{self.program_name}.icns"

    @property
    def dist_dir(self) -> Path:
        return self.root / "dist"


def completion_marker(output_dir: Path) -> Path:
    return output_dir.parent / f".{output_dir.name}.complete"


def is_stage_complete(output_dir: Path) -> bool:
    return output_dir.is_dir() and completion_marker(output_dir).is_file()


def _remove_path(path: Path) -> None:
    try:
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        raise PackagingError(f"Could not remove {path}: {e}") from e


def mark_stage_complete(output_dir: Path) -> None:
    """Atomically write the completion marker for output_dir.

    Raises:
        PackagingError: If the marker cannot be written
    """
    marker = completion_marker(output_dir)
    tmp = marker.with_name(f"{marker.name}.tmp")
    try:
        tmp.write_text("complete\n", encoding="utf-8")
        os.replace(tmp, marker)
    except OSError as e:
        raise PackagingError(f"Could not write completion marker {marker}: {e}") from e


def discard_incomplete_output(output_dir: Path) -> None:
    """Remove a stage output left behind by an interrupted run, marker included.

    Raises:
        PackagingError: If the leftover cannot be removed
    """
    marker = completion_marker(output_dir)
    if marker.exists():
        _remove_path(marker)
    if not output_dir.exists():
        return
    logger.warning("Discarding incomplete stage output at %s", output_dir)
    _remove_path(output_dir)


def reset_directory(path: Path) -> None:
    """Make path an empty directory, deleting whatever a previous run left there.

    Raises:
        PackagingError: If old content cannot be removed or the directory
            cannot be created
    """
    if path.exists():
        logger.info("Clearing previous output in %s", path)
        _remove_path(path)
    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise PackagingError(f"Could not create {path}: {e}") from e
