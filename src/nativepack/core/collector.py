"""Stage the application jar and its runtime dependencies."""

import logging
import shutil
from pathlib import Path

from nativepack.cli.config import AppArtifacts
from nativepack.core.errors import CollectionError
from nativepack.core.layout import discard_incomplete_output, is_stage_complete, mark_stage_complete

logger = logging.getLogger(__name__)


def resolve_dependency_jars(app: AppArtifacts) -> list[Path]:
    """Expand the classpath globs into a sorted, de-duplicated file list.

    The primary jar is excluded even if a pattern matches it.
    """
    primary = app.jar.resolve()
    found: dict[Path, Path] = {}
    for pattern in app.classpath:
        for match in app.base_dir.glob(pattern):
            resolved = match.resolve()
            if match.is_file() and resolved != primary:
                found[resolved] = match
    return [found[key] for key in sorted(found)]


def collect_artifacts(app: AppArtifacts, output_dir: Path) -> bool:
    """Copy the primary jar and all dependency jars into output_dir.

    Returns:
        True if files were copied, False if the stage was skipped

    Raises:
        CollectionError: If the primary jar does not exist, two dependencies
            share a file name, or a jar cannot be copied
    """
    if is_stage_complete(output_dir):
        logger.info("Jars already collected in %s, skipping", output_dir)
        return False

    if not app.jar.is_file():
        raise CollectionError(
            f"Application jar not found at {app.jar}. Build the application before packaging."
        )

    dependencies = resolve_dependency_jars(app)
    names = [app.jar.name] + [dep.name for dep in dependencies]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise CollectionError(f"Conflicting jar names on the classpath: {', '.join(duplicates)}")

    discard_incomplete_output(output_dir)
    try:
        output_dir.mkdir(parents=True)
        shutil.copy2(app.jar, output_dir / app.jar.name)
        for dep in dependencies:
            shutil.copy2(dep, output_dir / dep.name)
    except OSError as e:
        raise CollectionError(f"Could not copy jars into {output_dir}: {e}") from e
    logger.info("Collected %d jar(s) into %s", len(names), output_dir)

    mark_stage_complete(output_dir)
    return True
