from dataclasses import dataclass
from pathlib import Path

from nativepack.core.errors import ToolInvocationError
from nativepack.gateway.packager.abc import NativePackager


@dataclass(frozen=True)
class PackageCall:
    args: list[str]
    timeout: float | None

    def value_of(self, option: str) -> str | None:
        """Return the value following option, or None when absent."""
        if option not in self.args:
            return None
        index = self.args.index(option)
        return self.args[index + 1]

    def values_of(self, option: str) -> list[str]:
        """Return every value passed for a repeatable option."""
        return [self.args[i + 1] for i, arg in enumerate(self.args[:-1]) if arg == option]

    def has_flag(self, flag: str) -> bool:
        return flag in self.args


class FakeNativePackager(NativePackager):
    """Records package calls and drops the configured files into --dest."""

    def __init__(self, *, produced_files: list[str] | None = None, fail: bool = False) -> None:
        self._produced_files = produced_files if produced_files is not None else []
        self._fail = fail
        self._package_calls: list[PackageCall] = []

    def package(self, *, args: list[str], timeout: float | None) -> None:
        call = PackageCall(args=list(args), timeout=timeout)
        self._package_calls.append(call)
        if self._fail:
            raise ToolInvocationError("Failed to build native installer")

        dest = call.value_of("--dest")
        if dest is None:
            return
        dest_dir = Path(dest)
        dest_dir.mkdir(parents=True, exist_ok=True)
        for name in self._produced_files:
            (dest_dir / name).write_bytes(b"installer")

    @property
    def package_calls(self) -> list[PackageCall]:
        return list(self._package_calls)
