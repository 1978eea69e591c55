"""Shared fixtures: an on-disk application project ready to be packaged."""

from pathlib import Path

import pytest

AUDIVERIS_CONFIG = """\
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
java_options = [
    "--add-exports=java.desktop/sun.awt.image=ALL-UNNAMED",
    "-Dfile.encoding=UTF-8",
    "-Xms512m",
    "-Xmx2G",
]
file_associations = ["dev/omr.properties"]

[build]
root = "packaging/build"
tool_timeout = 600

[windows]
icon = "app/res/icon-256.ico"

[macos]
icon_source = "app/res/icon-256.png"
package_identifier = "org.audiveris.app"

[linux]
icon = "app/res/icon-256.png"
"""


def write_application_project(root: Path) -> Path:
    """Lay out a built application plus its nativepack.toml under root.

    Returns:
        Path to the written nativepack.toml
    """
    libs = root / "app" / "build" / "libs"
    (libs / "lib").mkdir(parents=True)
    (libs / "audiveris.jar").write_bytes(b"main jar")
    (libs / "lib" / "jai-imageio.jar").write_bytes(b"dep one")
    (libs / "lib" / "proxymusic.jar").write_bytes(b"dep two")

    res = root / "app" / "res"
    res.mkdir(parents=True)
    (res / "icon-256.png").write_bytes(b"png")
    (res / "icon-256.ico").write_bytes(b"ico")

    (root / "dev").mkdir()
    (root / "dev" / "omr.properties").write_text("extension=omr\n", encoding="utf-8")
    (root / "LICENSE").write_text("AGPL-3.0\n", encoding="utf-8")

    config_path = root / "nativepack.toml"
    config_path.write_text(AUDIVERIS_CONFIG, encoding="utf-8")
    return config_path


@pytest.fixture
def project_config_path(tmp_path: Path) -> Path:
    return write_application_project(tmp_path)
