from pathlib import Path

from nativepack.gateway.runtime_trimmer.abc import RuntimeTrimmer
from nativepack.subprocess_utils import run_subprocess_with_context


class RealRuntimeTrimmer(RuntimeTrimmer):
    """Runtime trimmer backed by jlink."""

    def trim(self, *, output_dir: Path, modules: list[str], timeout: float | None) -> None:
        run_subprocess_with_context(
            cmd=build_jlink_command(output_dir=output_dir, modules=modules),
            operation_context=f"assemble custom runtime in {output_dir}",
            timeout=timeout,
        )


def build_jlink_command(*, output_dir: Path, modules: list[str]) -> list[str]:
    return [
        "jlink",
        "--output",
        str(output_dir),
        "--no-header-files",
        "--no-man-pages",
        "--strip-debug",
        "--add-modules",
        ",".join(modules),
    ]
