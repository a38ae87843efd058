"""Exception types raised across the packaging pipeline."""

from __future__ import annotations


class FpmPackError(Exception):
    """Base error carrying the process exit code the CLI should use."""

    exit_code: int = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(FpmPackError):
    """Command line input that cannot be turned into package options."""


class HelpRequested(UsageError):
    """The user asked for usage text; this is a success exit."""

    exit_code = 0


class ParseError(UsageError):
    """One or more flags failed to parse or validate."""

    def __init__(self, message: str, errors: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.errors = errors


class InvalidMaintainer(ParseError):
    """The maintainer flag is not an email address."""


class WrongArity(UsageError):
    """Zero or more than one positional package type was given."""


class InvalidFormat(UsageError):
    """The positional package type is not a supported format."""


class ConfigError(FpmPackError):
    """Settings could not be loaded or validated."""


class ArtifactBuildError(FpmPackError):
    """The standalone artifact could not be produced."""


class PackagingFailed(FpmPackError):
    """The packaging tool exited with a nonzero status."""

    def __init__(self, exit_code: int, stderr: str = "") -> None:
        super().__init__("Failed to build package!")
        self.exit_code = exit_code
        self.stderr = stderr
