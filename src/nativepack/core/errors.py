"""Error taxonomy for the packaging pipeline.

Every fatal condition raised by the pipeline derives from PackagingError so
the CLI can convert it into a single user-facing error at the command
boundary. RenameError is the only member that is never raised out of the
pipeline: the renamer records it per file instead.
"""


class PackagingError(RuntimeError):
    """Base class for all packaging failures."""


class ConfigurationError(PackagingError):
    """Invalid packaging configuration or installer type.

    Always detected before any external tool runs.
    """


class ToolInvocationError(PackagingError):
    """An external tool failed to launch, exited non-zero, or timed out."""


class ProbeError(PackagingError):
    """Host facts could not be discovered."""


class CollectionError(PackagingError):
    """Application artifacts could not be staged (upstream build missing)."""


class RenameError(PackagingError):
    """A single artifact could not be renamed."""
