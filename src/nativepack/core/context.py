"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from nativepack.gateway.host_platform.abc import HostPlatform
from nativepack.gateway.host_platform.real import RealHostPlatform
from nativepack.gateway.icon_converter.abc import IconConverter
from nativepack.gateway.icon_converter.real import RealIconConverter
from nativepack.gateway.packager.abc import NativePackager
from nativepack.gateway.packager.real import RealNativePackager
from nativepack.gateway.runtime_trimmer.abc import RuntimeTrimmer
from nativepack.gateway.runtime_trimmer.real import RealRuntimeTrimmer


@dataclass(frozen=True)
class PackContext:
    """Immutable context holding all external tool gateways.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    host: HostPlatform
    runtime_trimmer: RuntimeTrimmer
    packager: NativePackager
    icon_converter: IconConverter
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        *,
        host: HostPlatform | None = None,
        runtime_trimmer: RuntimeTrimmer | None = None,
        packager: NativePackager | None = None,
        icon_converter: IconConverter | None = None,
        cwd: Path | None = None,
    ) -> "PackContext":
        """Create a context with fake gateways for anything not supplied.

        The default host is a Linux machine reporting Ubuntu 22.04 on x86_64.
        """
        from nativepack.gateway.host_platform.fake import FakeHostPlatform
        from nativepack.gateway.icon_converter.fake import FakeIconConverter
        from nativepack.gateway.packager.fake import FakeNativePackager
        from nativepack.gateway.runtime_trimmer.fake import FakeRuntimeTrimmer

        return PackContext(
            host=host if host is not None else FakeHostPlatform.linux(),
            runtime_trimmer=(
                runtime_trimmer if runtime_trimmer is not None else FakeRuntimeTrimmer()
            ),
            packager=packager if packager is not None else FakeNativePackager(),
            icon_converter=icon_converter if icon_converter is not None else FakeIconConverter(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context() -> PackContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    return PackContext(
        host=RealHostPlatform(),
        runtime_trimmer=RealRuntimeTrimmer(),
        packager=RealNativePackager(),
        icon_converter=RealIconConverter(),
        cwd=Path.cwd(),
    )
