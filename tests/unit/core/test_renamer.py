"""Tests for canonical artifact renaming."""

from pathlib import Path
from unittest.mock import patch

from nativepack.core.host import HostFacts, OSFamily
from nativepack.core.renamer import (
    artifact_name_option,
    compute_artifact_name,
    file_extension,
    rename_artifacts,
)

UBUNTU = HostFacts(
    os_family=OSFamily.LINUX, distro_name="ubuntu", distro_version="22.04", architecture="x86_64"
)
WINDOWS = HostFacts(
    os_family=OSFamily.WINDOWS, distro_name=None, distro_version=None, architecture="x86_64"
)
MACOS = HostFacts(
    os_family=OSFamily.MACOS, distro_name=None, distro_version=None, architecture="arm64"
)


def test_compute_artifact_name_is_deterministic() -> None:
    name = compute_artifact_name(
        "installer.deb",
        program_name="Audiveris",
        version="5.4",
        osname="ubuntu",
        option="",
        architecture="x86_64",
    )

    assert name == "Audiveris-5.4-ubuntu-x86_64.deb"


def test_extension_starts_at_last_dot() -> None:
    assert file_extension("audiveris-5.4.x86_64.rpm") == ".rpm"
    assert file_extension("Audiveris.tar.gz") == ".gz"
    assert file_extension("README") == ""


class TestArtifactNameOption:
    def test_windows_console(self) -> None:
        assert artifact_name_option(WINDOWS, "Console") == "Console"

    def test_windows_other_values_are_dropped(self) -> None:
        assert artifact_name_option(WINDOWS, "console") == ""
        assert artifact_name_option(WINDOWS, "Debug") == ""
        assert artifact_name_option(WINDOWS, None) == ""

    def test_linux_uses_distro_version(self) -> None:
        assert artifact_name_option(UBUNTU, None) == "22.04"

    def test_macos_has_no_suffix(self) -> None:
        assert artifact_name_option(MACOS, "Console") == ""


def test_renames_every_file_in_destination(tmp_path: Path) -> None:
    (tmp_path / "audiveris_5.4_amd64.deb").write_bytes(b"deb")
    (tmp_path / "audiveris-5.4.x86_64.rpm").write_bytes(b"rpm")
    (tmp_path / "nested").mkdir()

    outcomes = rename_artifacts(
        tmp_path, program_name="Audiveris", version="5.4", facts=UBUNTU, option=""
    )

    assert [o.succeeded for o in outcomes] == [True, True]
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "Audiveris-5.4-ubuntu-x86_64.deb",
        "Audiveris-5.4-ubuntu-x86_64.rpm",
        "nested",
    ]


def test_rename_failure_does_not_stop_other_files(tmp_path: Path) -> None:
    (tmp_path / "Audiveris-5.4-ubuntu-x86_64.deb").write_bytes(b"previous run")
    (tmp_path / "installer.deb").write_bytes(b"new deb")
    (tmp_path / "installer.rpm").write_bytes(b"new rpm")

    outcomes = rename_artifacts(
        tmp_path, program_name="Audiveris", version="5.4", facts=UBUNTU, option=""
    )

    by_source = {o.source.name: o for o in outcomes}
    assert by_source["Audiveris-5.4-ubuntu-x86_64.deb"].succeeded
    assert not by_source["installer.deb"].succeeded
    assert by_source["installer.deb"].error == "Audiveris-5.4-ubuntu-x86_64.deb already exists"
    assert by_source["installer.rpm"].succeeded
    assert (tmp_path / "Audiveris-5.4-ubuntu-x86_64.rpm").read_bytes() == b"new rpm"
    assert (tmp_path / "installer.deb").exists()
    assert (tmp_path / "Audiveris-5.4-ubuntu-x86_64.deb").read_bytes() == b"previous run"


def test_windows_console_name(tmp_path: Path) -> None:
    (tmp_path / "Audiveris-5.4.msi").write_bytes(b"msi")

    outcomes = rename_artifacts(
        tmp_path,
        program_name="Audiveris",
        version="5.4",
        facts=WINDOWS,
        option=artifact_name_option(WINDOWS, "Console"),
    )

    assert outcomes[0].target.name == "Audiveris-5.4-windowsConsole-x86_64.msi"
    assert outcomes[0].target.exists()


def test_empty_destination_yields_no_outcomes(tmp_path: Path) -> None:
    assert rename_artifacts(
        tmp_path / "missing", program_name="A", version="1", facts=MACOS, option=""
    ) == []


def test_filesystem_error_is_recorded_per_file(tmp_path: Path) -> None:
    (tmp_path / "installer.deb").write_bytes(b"deb")

    with patch.object(Path, "rename", side_effect=OSError(30, "Read-only file system")):
        outcomes = rename_artifacts(
            tmp_path, program_name="Audiveris", version="5.4", facts=UBUNTU, option=""
        )

    assert len(outcomes) == 1
    assert not outcomes[0].succeeded
    assert "Read-only file system" in (outcomes[0].error or "")
    assert (tmp_path / "installer.deb").exists()
