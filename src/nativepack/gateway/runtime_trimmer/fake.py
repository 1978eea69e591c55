from dataclasses import dataclass
from pathlib import Path

from nativepack.core.errors import ToolInvocationError
from nativepack.gateway.runtime_trimmer.abc import RuntimeTrimmer


@dataclass(frozen=True)
class TrimCall:
    output_dir: Path
    modules: list[str]
    timeout: float | None


class FakeRuntimeTrimmer(RuntimeTrimmer):
    """Records trim calls and creates the output directory like jlink would."""

    def __init__(self, *, fail: bool = False) -> None:
        self._fail = fail
        self._trim_calls: list[TrimCall] = []

    def trim(self, *, output_dir: Path, modules: list[str], timeout: float | None) -> None:
        call = TrimCall(output_dir=output_dir, modules=list(modules), timeout=timeout)
        self._trim_calls.append(call)
        if self._fail:
            raise ToolInvocationError(f"Failed to assemble custom runtime in {output_dir}")
        (output_dir / "bin").mkdir(parents=True)
        (output_dir / "release").write_text('JAVA_VERSION="21"\n', encoding="utf-8")

    @property
    def trim_calls(self) -> list[TrimCall]:
        return list(self._trim_calls)
