"""nativepack CLI entry point.

This package provides a Click-based CLI that packages a prebuilt Java
desktop application into a native installer for the host OS.
See `nativepack --help` for details.
"""

from nativepack.cli.cli import cli, main

__all__ = ["cli", "main"]
