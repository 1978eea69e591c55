"""Init command - write a starter packaging config."""

import click
import tomlkit
from tomlkit.items import Array

from nativepack.cli.config import CONFIG_FILENAME, DEFAULT_RUNTIME_MODULES, DEFAULT_TOOL_TIMEOUT
from nativepack.cli.ensure import Ensure
from nativepack.core.context import PackContext
from nativepack.output.output import user_output


def _string_array(values: list[str]) -> Array:
    array = tomlkit.array()
    array.extend(values)
    array.multiline(True)
    return array


def render_starter_config(name: str, version: str, main_class: str) -> str:
    """Render a commented nativepack.toml for the given program."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("Packaging configuration for nativepack."))
    doc.add(tomlkit.comment("Relative paths are resolved against this file's directory."))
    doc.add(tomlkit.nl())

    program = tomlkit.table()
    program.add("name", name)
    program.add("id", name.lower())
    program.add("version", version)
    program.add("main_class", main_class)
    program.add("vendor", "")
    program.add("description", "")
    program.add("license", "LICENSE")
    doc.add("program", program)

    app = tomlkit.table()
    app.add("jar", f"app/build/libs/{name.lower()}.jar")
    app.add("classpath", _string_array(["app/build/libs/lib/*.jar"]))
    doc.add("app", app)

    runtime = tomlkit.table()
    runtime.add("modules", _string_array(DEFAULT_RUNTIME_MODULES))
    doc.add("runtime", runtime)

    launcher = tomlkit.table()
    launcher.add("java_options", _string_array(["-Dfile.encoding=UTF-8"]))
    launcher.add("file_associations", tomlkit.array())
    doc.add("launcher", launcher)

    build = tomlkit.table()
    build.add("root", "build")
    build.add("tool_timeout", int(DEFAULT_TOOL_TIMEOUT))
    doc.add("build", build)

    windows = tomlkit.table()
    windows.add("icon", "app/res/icon-256.ico")
    doc.add("windows", windows)

    macos = tomlkit.table()
    macos.add("icon_source", "app/res/icon-256.png")
    macos.add("package_identifier", f"org.{name.lower()}.app")
    doc.add("macos", macos)

    linux = tomlkit.table()
    linux.add("icon", "app/res/icon-256.png")
    doc.add("linux", linux)

    return tomlkit.dumps(doc)


@click.command("init")
@click.option("--name", required=True, help="Program name used for the installer")
@click.option("--version", "version", default="1.0", show_default=True, help="Program version")
@click.option("--main-class", required=True, help="Fully qualified launcher class")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing config")
@click.pass_obj
def init_cmd(ctx: PackContext, name: str, version: str, main_class: str, force: bool) -> None:
    """Create a starter nativepack.toml in the current directory."""
    config_path = ctx.cwd / CONFIG_FILENAME
    Ensure.invariant(
        force or not config_path.exists(),
        f"{config_path} already exists (use --force to overwrite)",
    )

    config_path.write_text(render_starter_config(name, version, main_class), encoding="utf-8")
    user_output(click.style("✓", fg="green") + f" Wrote {config_path}")
