"""CLI error handling.

Commands never let PackagingError escape as a traceback: it is converted at
the command boundary into UserFacingCliError, which click prints as a red
"Error: ..." line and turns into exit code 1.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any, TypeVar

import click

from nativepack.core.errors import PackagingError
from nativepack.output.output import user_output

T = TypeVar("T")


class UserFacingCliError(click.ClickException):
    """Error shown to the user without a stack trace."""

    exit_code = 1

    def show(self, file: IO[Any] | None = None) -> None:
        user_output(click.style("Error: ", fg="red") + self.message)


class Ensure:
    """Precondition checks that exit with a user-facing error."""

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        if value is None:
            raise UserFacingCliError(error_message)
        return value

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        if not condition:
            raise UserFacingCliError(error_message)


@contextmanager
def user_facing_errors() -> Iterator[None]:
    """Convert PackagingError raised inside the block into UserFacingCliError."""
    try:
        yield
    except PackagingError as e:
        raise UserFacingCliError(str(e)) from e
