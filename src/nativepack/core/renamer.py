"""Canonical renaming of produced installer artifacts.

Renaming is best-effort: a file that cannot be renamed is recorded as a
failed outcome and logged, and the remaining files are still processed.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from nativepack.core.builder import CONSOLE_OPTION, is_console_option, list_artifacts
from nativepack.core.errors import RenameError
from nativepack.core.host import HostFacts, OSFamily

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenameOutcome:
    source: Path
    target: Path
    error: str | None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def file_extension(filename: str) -> str:
    """Substring from the last '.' inclusive, empty when there is none."""
    dot = filename.rfind(".")
    if dot == -1:
        return ""
    return filename[dot:]


def compute_artifact_name(
    filename: str,
    *,
    program_name: str,
    version: str,
    osname: str,
    option: str,
    architecture: str,
) -> str:
    """Return the canonical name for a produced artifact.

    Example:
        >>> compute_artifact_name("installer.deb", program_name="Audiveris",
        ...     version="5.4", osname="ubuntu", option="", architecture="x86_64")
        'Audiveris-5.4-ubuntu-x86_64.deb'
    """
    extension = file_extension(filename)
    return f"{program_name}-{version}-{osname}{option}-{architecture}{extension}"


def artifact_name_option(facts: HostFacts, option: str | None) -> str:
    """Suffix appended to the OS component of artifact names.

    Windows console builds are tagged "Console", Linux builds carry the
    distribution version, everything else has no suffix.
    """
    if facts.os_family is OSFamily.WINDOWS:
        return CONSOLE_OPTION if is_console_option(option) else ""
    if facts.os_family is OSFamily.LINUX:
        return facts.distro_version or ""
    return ""


def rename_artifact(source: Path, target: Path) -> None:
    """Rename source to target, refusing to overwrite another file.

    Raises:
        RenameError: If target already exists or the rename fails
    """
    if source == target:
        return
    if target.exists():
        raise RenameError(f"{target.name} already exists")
    try:
        source.rename(target)
    except OSError as e:
        raise RenameError(str(e)) from e


def rename_artifacts(
    dest_dir: Path,
    *,
    program_name: str,
    version: str,
    facts: HostFacts,
    option: str,
) -> list[RenameOutcome]:
    """Rename every file directly inside dest_dir to its canonical name.

    Args:
        dest_dir: Destination directory of the packager
        program_name: Program name, first name component
        version: Program version
        facts: Probed host facts providing OS name and architecture
        option: Suffix for the OS component, see artifact_name_option

    Returns:
        One outcome per file, in file name order
    """
    outcomes: list[RenameOutcome] = []
    for source in list_artifacts(dest_dir):
        new_name = compute_artifact_name(
            source.name,
            program_name=program_name,
            version=version,
            osname=facts.osname,
            option=option,
            architecture=facts.architecture,
        )
        target = source.with_name(new_name)
        logger.debug("Renaming %s -> %s", source, target)
        try:
            rename_artifact(source, target)
        except RenameError as e:
            logger.warning("Could not rename %s to %s: %s", source.name, new_name, e)
            outcomes.append(RenameOutcome(source=source, target=target, error=str(e)))
            continue
        outcomes.append(RenameOutcome(source=source, target=target, error=None))
    return outcomes
