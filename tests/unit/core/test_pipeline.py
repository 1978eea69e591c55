"""End-to-end pipeline tests against fake gateways."""

from pathlib import Path

import pytest

from nativepack.cli.config import load_config
from nativepack.core.context import PackContext
from nativepack.core.errors import ConfigurationError, ProbeError, ToolInvocationError
from nativepack.core.installer_type import InstallerType
from nativepack.core.layout import is_stage_complete
from nativepack.core.pipeline import plan_packaging, run_packaging
from nativepack.gateway.host_platform.fake import FakeHostPlatform
from nativepack.gateway.icon_converter.fake import FakeIconConverter
from nativepack.gateway.packager.fake import FakeNativePackager
from nativepack.gateway.runtime_trimmer.fake import FakeRuntimeTrimmer


def test_linux_default_produces_renamed_deb(project_config_path: Path) -> None:
    config = load_config(project_config_path)
    trimmer = FakeRuntimeTrimmer()
    packager = FakeNativePackager(produced_files=["audiveris_5.4_amd64.deb"])
    ctx = PackContext.for_test(runtime_trimmer=trimmer, packager=packager)

    result = run_packaging(ctx, config, installer_type=None, option=None)

    dist = project_config_path.parent / "packaging" / "build" / "dist"
    assert [p.name for p in result.artifacts] == ["Audiveris-5.4-ubuntu22.04-x86_64.deb"]
    assert (dist / "Audiveris-5.4-ubuntu22.04-x86_64.deb").is_file()
    assert result.failed_renames == []
    assert result.plan.installer_type is InstallerType.DEFAULT

    call = packager.package_calls[0]
    assert call.value_of("--type") is None
    assert call.timeout == 600.0
    assert trimmer.trim_calls[0].timeout == 600.0

    jars = project_config_path.parent / "packaging" / "build" / "jars"
    assert sorted(p.name for p in jars.iterdir()) == [
        "audiveris.jar",
        "jai-imageio.jar",
        "proxymusic.jar",
    ]
    assert is_stage_complete(jars)


def test_second_run_reuses_runtime_and_jars(project_config_path: Path) -> None:
    config = load_config(project_config_path)
    trimmer = FakeRuntimeTrimmer()
    ctx = PackContext.for_test(
        runtime_trimmer=trimmer,
        packager=FakeNativePackager(produced_files=["audiveris_5.4_amd64.deb"]),
    )

    run_packaging(ctx, config, installer_type="DEB", option=None)
    run_packaging(ctx, config, installer_type="DEB", option=None)

    assert len(trimmer.trim_calls) == 1


def test_windows_console_build(project_config_path: Path) -> None:
    config = load_config(project_config_path)
    packager = FakeNativePackager(produced_files=["Audiveris-5.4.msi"])
    ctx = PackContext.for_test(host=FakeHostPlatform.windows(), packager=packager)

    result = run_packaging(ctx, config, installer_type=None, option="Console")

    assert [p.name for p in result.artifacts] == ["Audiveris-5.4-windowsConsole-x86_64.msi"]
    call = packager.package_calls[0]
    assert call.value_of("--type") == "msi"
    assert call.has_flag("--win-console")


def test_macos_build_prepares_icon(project_config_path: Path) -> None:
    config = load_config(project_config_path)
    converter = FakeIconConverter()
    packager = FakeNativePackager(produced_files=["Audiveris-5.4.dmg"])
    ctx = PackContext.for_test(
        host=FakeHostPlatform.macos(), packager=packager, icon_converter=converter
    )

    result = run_packaging(ctx, config, installer_type="dmg", option=None)

    assert len(converter.resize_calls) == 12
    assert len(converter.compile_calls) == 1
    assert [p.name for p in result.artifacts] == ["Audiveris-5.4-macosx-arm64.dmg"]
    icns = project_config_path.parent / "packaging" / "build" / "Audiveris.icns"
    assert packager.package_calls[0].value_of("--icon") == str(icns)
    assert packager.package_calls[0].value_of("--mac-package-identifier") == "org.audiveris.app"


def test_icon_stage_is_skipped_off_macos(project_config_path: Path) -> None:
    converter = FakeIconConverter()
    ctx = PackContext.for_test(icon_converter=converter)

    run_packaging(ctx, load_config(project_config_path), installer_type=None, option=None)

    assert converter.resize_calls == []


def test_disallowed_type_is_rejected_before_any_tool_runs(project_config_path: Path) -> None:
    host = FakeHostPlatform.windows()
    trimmer = FakeRuntimeTrimmer()
    packager = FakeNativePackager()
    ctx = PackContext.for_test(host=host, runtime_trimmer=trimmer, packager=packager)

    with pytest.raises(ConfigurationError) as exc_info:
        run_packaging(ctx, load_config(project_config_path), installer_type="RPM", option=None)

    assert "RPM" in str(exc_info.value)
    assert "WINDOWS" in str(exc_info.value)
    assert trimmer.trim_calls == []
    assert packager.package_calls == []
    assert not (project_config_path.parent / "packaging").exists()


def test_type_validation_precedes_distro_probe(project_config_path: Path) -> None:
    host = FakeHostPlatform.linux()

    with pytest.raises(ConfigurationError, match="Illegal installerType for LINUX: MSI"):
        plan_packaging(
            PackContext.for_test(host=host),
            load_config(project_config_path),
            installer_type="MSI",
            option=None,
        )

    assert host.queries == []


def test_probe_failure_is_fatal(project_config_path: Path) -> None:
    host = FakeHostPlatform(system="Linux", machine="x86_64", distro_id=None, distro_release=None)
    trimmer = FakeRuntimeTrimmer()
    ctx = PackContext.for_test(host=host, runtime_trimmer=trimmer)

    with pytest.raises(ProbeError):
        run_packaging(ctx, load_config(project_config_path), installer_type=None, option=None)

    assert trimmer.trim_calls == []


def test_packager_failure_propagates(project_config_path: Path) -> None:
    ctx = PackContext.for_test(packager=FakeNativePackager(fail=True))

    with pytest.raises(ToolInvocationError):
        run_packaging(ctx, load_config(project_config_path), installer_type=None, option=None)


def test_runtime_failure_stops_before_collecting(project_config_path: Path) -> None:
    ctx = PackContext.for_test(runtime_trimmer=FakeRuntimeTrimmer(fail=True))

    with pytest.raises(ToolInvocationError):
        run_packaging(ctx, load_config(project_config_path), installer_type=None, option=None)

    assert not (project_config_path.parent / "packaging" / "build" / "jars").exists()


def test_installer_left_by_earlier_version_is_not_renamed(project_config_path: Path) -> None:
    dist = project_config_path.parent / "packaging" / "build" / "dist"
    dist.mkdir(parents=True)
    (dist / "Audiveris-5.3-ubuntu22.04-x86_64.deb").write_bytes(b"5.3 build")
    ctx = PackContext.for_test(
        packager=FakeNativePackager(produced_files=["audiveris_5.4_amd64.deb"])
    )

    result = run_packaging(ctx, load_config(project_config_path), installer_type=None, option=None)

    assert result.failed_renames == []
    assert [p.name for p in dist.iterdir()] == ["Audiveris-5.4-ubuntu22.04-x86_64.deb"]
    assert (dist / "Audiveris-5.4-ubuntu22.04-x86_64.deb").read_bytes() == b"installer"


def test_rebuilding_same_version_replaces_previous_installer(project_config_path: Path) -> None:
    config = load_config(project_config_path)
    ctx = PackContext.for_test(
        packager=FakeNativePackager(produced_files=["audiveris_5.4_amd64.deb"])
    )

    run_packaging(ctx, config, installer_type=None, option=None)
    result = run_packaging(ctx, config, installer_type=None, option=None)

    assert result.failed_renames == []
    assert [p.name for p in result.artifacts] == ["Audiveris-5.4-ubuntu22.04-x86_64.deb"]
