"""
Error types raised by app script services.

All errors derive from click.ClickException, so Click's top-level handler
reports them on stderr and terminates with their exit code.
"""
from typing import Optional

import click


class ScriptsError(click.ClickException):
    """Base error for all app script failures."""
    exit_code = 1

    def show(self, file=None):
        click.secho(self.format_message(), fg='red', err=True)


class MissingArgumentsError(ScriptsError):
    """Required positional arguments were not given."""

    def __init__(self, message: str = "Missing arguments"):
        super().__init__(message)


class FileOperationError(ScriptsError):
    """A file could not be read, written or removed."""

    def __init__(self, action: str, cause: Optional[BaseException] = None):
        self.action = action
        self.cause = cause
        message = f"{action}: {cause}" if cause is not None else action
        super().__init__(message)


class ExternalToolError(ScriptsError):
    """An external tool could not run or produced no usable output."""

    def __init__(self, action: str, cause: Optional[BaseException] = None):
        self.action = action
        self.cause = cause
        message = f"{action}: {cause}" if cause is not None else action
        super().__init__(message)
