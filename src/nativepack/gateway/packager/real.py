from nativepack.gateway.packager.abc import NativePackager
from nativepack.subprocess_utils import run_subprocess_with_context


class RealNativePackager(NativePackager):
    """Native packager backed by jpackage.

    Output is streamed to the terminal since jpackage runs with --verbose and
    can take minutes.
    """

    def package(self, *, args: list[str], timeout: float | None) -> None:
        run_subprocess_with_context(
            cmd=["jpackage", *args],
            operation_context="build native installer",
            capture_output=False,
            timeout=timeout,
        )
