import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from nativepack.core.errors import ConfigurationError
from nativepack.subprocess_utils import DEFAULT_TOOL_TIMEOUT

CONFIG_FILENAME = "nativepack.toml"

DEFAULT_RUNTIME_MODULES = [
    "java.base",
    "java.datatransfer",
    "java.desktop",
    "java.xml",
    "java.naming",
    "jdk.zipfs",
    "jdk.crypto.ec",
]


@dataclass(frozen=True)
class ProgramIdentity:
    name: str
    id: str
    version: str
    main_class: str
    main_jar: str
    vendor: str | None
    description: str | None
    license_file: Path | None


@dataclass(frozen=True)
class AppArtifacts:
    """Build outputs of the application being packaged."""

    jar: Path
    classpath: list[str]  # glob patterns relative to base_dir
    base_dir: Path


@dataclass(frozen=True)
class BuildSettings:
    root: Path
    tool_timeout: float | None


@dataclass(frozen=True)
class WindowsSettings:
    icon: Path | None


@dataclass(frozen=True)
class MacSettings:
    icon_source: Path | None
    package_identifier: str | None
    package_name: str | None


@dataclass(frozen=True)
class LinuxSettings:
    icon: Path | None


@dataclass(frozen=True)
class PackagingConfig:
    """In-memory representation of `nativepack.toml`.

    Example nativepack.toml:
      [program]
      name = "Audiveris"
      id = "audiveris"
      version = "5.4"
      main_class = "Audiveris"
      vendor = "audiveris.org"
      description = "Optical Music Recognition"
      license = "LICENSE"

      [app]
      jar = "app/build/libs/audiveris.jar"
      classpath = ["app/build/libs/lib/*.jar"]

      [launcher]
      java_options = ["-Dfile.encoding=UTF-8", "-Xmx2G"]
      file_associations = ["dev/omr.properties"]

      [macos]
      icon_source = "app/res/icon-256.png"
      package_identifier = "org.audiveris.app"
    """

    program: ProgramIdentity
    app: AppArtifacts
    runtime_modules: list[str]
    java_options: list[str]
    file_associations: list[Path]
    build: BuildSettings
    windows: WindowsSettings
    macos: MacSettings
    linux: LinuxSettings


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"[{name}] must be a table")
    return section


def _required_str(section: dict[str, Any], section_name: str, key: str) -> str:
    value = section.get(key)
    if value is None or not str(value).strip():
        raise ConfigurationError(f"Missing '{section_name}.{key}' in {CONFIG_FILENAME}")
    return str(value).strip()


def _optional_str(section: dict[str, Any], key: str) -> str | None:
    """Return the value as a string, None when absent or blank."""
    value = section.get(key)
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def _optional_path(section: dict[str, Any], key: str, base_dir: Path) -> Path | None:
    value = _optional_str(section, key)
    if value is None:
        return None
    return base_dir / value


def _str_list(
    section: dict[str, Any], section_name: str, key: str, default: list[str]
) -> list[str]:
    value = section.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list):
        raise ConfigurationError(f"'{section_name}.{key}' must be a list")
    return [str(x) for x in value]


def parse_config(data: dict[str, Any], base_dir: Path) -> PackagingConfig:
    """Build a PackagingConfig from parsed TOML data.

    Relative paths are resolved against base_dir.

    Raises:
        ConfigurationError: If required keys are missing or malformed
    """
    program = _section(data, "program")
    name = _required_str(program, "program", "name")
    program_id = _optional_str(program, "id") or name.lower()
    identity = ProgramIdentity(
        name=name,
        id=program_id,
        version=_required_str(program, "program", "version"),
        main_class=_required_str(program, "program", "main_class"),
        main_jar=_optional_str(program, "main_jar") or f"{program_id}.jar",
        vendor=_optional_str(program, "vendor"),
        description=_optional_str(program, "description"),
        license_file=_optional_path(program, "license", base_dir),
    )

    app = _section(data, "app")
    artifacts = AppArtifacts(
        jar=base_dir / _required_str(app, "app", "jar"),
        classpath=_str_list(app, "app", "classpath", []),
        base_dir=base_dir,
    )

    runtime = _section(data, "runtime")
    modules = _str_list(runtime, "runtime", "modules", DEFAULT_RUNTIME_MODULES)
    if not modules:
        raise ConfigurationError("'runtime.modules' must not be empty")

    launcher = _section(data, "launcher")

    build = _section(data, "build")
    timeout = build.get("tool_timeout", DEFAULT_TOOL_TIMEOUT)
    if timeout is not None and (not isinstance(timeout, int | float) or timeout <= 0):
        raise ConfigurationError("'build.tool_timeout' must be a positive number of seconds")

    windows = _section(data, "windows")
    macos = _section(data, "macos")
    linux = _section(data, "linux")

    return PackagingConfig(
        program=identity,
        app=artifacts,
        runtime_modules=modules,
        java_options=_str_list(launcher, "launcher", "java_options", []),
        file_associations=[
            base_dir / p for p in _str_list(launcher, "launcher", "file_associations", [])
        ],
        build=BuildSettings(
            root=base_dir / str(build.get("root", "build")),
            tool_timeout=float(timeout) if timeout is not None else None,
        ),
        windows=WindowsSettings(icon=_optional_path(windows, "icon", base_dir)),
        macos=MacSettings(
            icon_source=_optional_path(macos, "icon_source", base_dir),
            package_identifier=_optional_str(macos, "package_identifier"),
            package_name=_optional_str(macos, "package_name"),
        ),
        linux=LinuxSettings(icon=_optional_path(linux, "icon", base_dir)),
    )


def load_config(config_path: Path) -> PackagingConfig:
    """Load a packaging config file.

    Raises:
        ConfigurationError: If the file is missing, is not valid TOML, or
            lacks required keys
    """
    if not config_path.exists():
        raise ConfigurationError(
            f"Config not found at {config_path}. Run 'nativepack init' to create one."
        )
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e
    return parse_config(data, config_path.resolve().parent)
