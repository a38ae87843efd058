"""Validate raw command line input into an immutable package options record."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Annotated, Final, Sequence

from pydantic import AfterValidator, BaseModel, ConfigDict, TypeAdapter, ValidationError

from fpm_pack.errors import (
    HelpRequested,
    InvalidFormat,
    InvalidMaintainer,
    ParseError,
    UsageError,
    WrongArity,
)
from fpm_pack.formats import (
    DEFAULT_DEPENDENCIES,
    FORMAT_DESCRIPTIONS,
    PACKAGE_FORMATS,
    PackageFormat,
    is_package_format,
)

EMAIL_PATTERN: Final = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
HELP_ARGUMENT: Final = "help"
END_OF_OPTIONS: Final = "--"


@dataclass(frozen=True, slots=True)
class FlagSpec:
    """One recognized package flag. A flag without a metavar is boolean."""

    short: str | None
    long: str
    metavar: str | None
    field_name: str
    description: str
    default_description: str = ""

    @property
    def label(self) -> str:
        name = self.short or self.long
        return f"{name} {self.metavar}" if self.metavar else name


PACKAGE_FLAGS: Final[tuple[FlagSpec, ...]] = (
    FlagSpec(
        "-d",
        "--pkg-dependency",
        "PKG",
        "package_dependencies",
        "comma-separated list of packages it depends on",
        "depends on type, see below",
    ),
    FlagSpec("-m", "--maintainer", "EMAIL", "maintainer", "email of maintainer to mark package with"),
    FlagSpec(None, "--dry-run", None, "dry_run", "print the fpm command to stdout instead of running it", "false"),
)

_FLAGS_BY_NAME: Final[dict[str, FlagSpec]] = {
    name: option for option in PACKAGE_FLAGS for name in (option.short, option.long) if name is not None
}


def _check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError("must be a valid email address")
    return value


Maintainer = Annotated[str, AfterValidator(_check_email)]

_MAINTAINER_ADAPTER: Final = TypeAdapter(Maintainer)


class PackageOptions(BaseModel):
    """Normalized options for one packaging run."""

    model_config = ConfigDict(frozen=True)

    package_format: PackageFormat
    maintainer: Maintainer | None = None
    package_dependencies: str | None = None
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class ParsedTokens:
    """Raw tokens split into flag values, positionals and flag errors."""

    values: dict[str, str | bool] = field(default_factory=dict)
    positionals: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ValidatedArgs:
    """Either usable options or a message to print before exiting."""

    options: PackageOptions | None = None
    exit_message: str | None = None
    ok: bool = False

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def _options_summary() -> str:
    lines = []
    for option in PACKAGE_FLAGS:
        long = f"{option.long} {option.metavar}" if option.metavar else option.long
        flag = f"{option.short}, {long}" if option.short else f"    {long}"
        default_text = f" (default: {option.default_description})" if option.default_description else ""
        lines.append(f"  {flag:<26} {option.description}{default_text}")
    return "\n".join(lines)


def usage_text(default_dependencies: dict[PackageFormat, str] | None = None) -> str:
    """Combine the usage line, option summary and package types into one string."""

    defaults = default_dependencies or DEFAULT_DEPENDENCIES
    lines = [
        "Usage: fpm-pack package [options] type",
        "",
        "Options:",
        _options_summary(),
        "",
        "Types:",
    ]
    lines.extend(f"  {name:<9} {FORMAT_DESCRIPTIONS[name]}" for name in PACKAGE_FORMATS)
    lines.extend(["", "Default package dependencies:"])
    lines.extend(f"  {name:<9} {defaults[name]}" for name in PACKAGE_FORMATS)
    return "\n".join(lines)


def error_message(errors: Sequence[str]) -> str:
    """Turn individual flag errors into a single error message."""

    return "The following errors occurred while parsing your command:\n\n" + "\n".join(errors)


def _split_flag(token: str) -> tuple[str, str | None]:
    """Split ``--long=value`` and ``-svalue`` into name and attached value."""

    if token.startswith("--"):
        name, separator, value = token.partition("=")
        return name, value if separator else None
    return token[:2], token[2:] or None


def parse_tokens(tokens: Sequence[str]) -> ParsedTokens:
    """Walk raw tokens, collecting every flag error instead of stopping at the first."""

    parsed = ParsedTokens()
    index = 0
    options_ended = False
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if options_ended or token == "-" or not token.startswith("-"):
            parsed.positionals.append(token)
            continue
        if token == END_OF_OPTIONS:
            options_ended = True
            continue

        name, attached = _split_flag(token)
        option = _FLAGS_BY_NAME.get(name)
        if option is None:
            parsed.errors.append(f'Unknown option: "{token}"')
            continue
        if option.metavar is None:
            if attached is not None:
                parsed.errors.append(f'Option "{option.long}" does not take a value: "{token}"')
            else:
                parsed.values[option.field_name] = True
            continue

        if attached is not None:
            parsed.values[option.field_name] = attached
        elif index < len(tokens):
            parsed.values[option.field_name] = tokens[index]
            index += 1
        else:
            parsed.errors.append(f'Missing required argument for "{option.label}"')
    return parsed


def _maintainer_errors(maintainer: str) -> list[str]:
    try:
        _MAINTAINER_ADAPTER.validate_python(maintainer)
    except ValidationError as exc:
        messages = []
        for error in exc.errors():
            ctx = error.get("ctx") or {}
            reason = str(ctx["error"]) if "error" in ctx else error["msg"]
            messages.append(f'Failed to validate "-m {maintainer}": {reason}')
        return messages
    return []


def normalize_options(
    tokens: Sequence[str],
    *,
    default_dependencies: dict[PackageFormat, str] | None = None,
) -> PackageOptions:
    """Validate raw ``package`` command tokens into PackageOptions.

    Raises:
        HelpRequested: the first positional argument is ``help``, whatever
            else was passed.
        InvalidMaintainer: the maintainer is not an email address.
        ParseError: unknown options, missing flag values or values given to
            boolean flags. All of them are reported in one message.
        WrongArity: not exactly one positional argument.
        InvalidFormat: the positional argument is not a supported type.
    """

    usage = usage_text(default_dependencies)
    parsed = parse_tokens(tokens)

    if parsed.positionals and parsed.positionals[0] == HELP_ARGUMENT:
        raise HelpRequested(usage)

    maintainer = parsed.values.get("maintainer")
    maintainer_errors = _maintainer_errors(maintainer) if isinstance(maintainer, str) else []
    errors = [*parsed.errors, *maintainer_errors]
    if errors:
        error_type = InvalidMaintainer if maintainer_errors else ParseError
        raise error_type(error_message(errors), tuple(errors))

    if len(parsed.positionals) != 1:
        raise WrongArity(usage)
    package_format = parsed.positionals[0]
    if not is_package_format(package_format):
        raise InvalidFormat(usage)

    return PackageOptions(package_format=package_format, **parsed.values)


def validate_args(
    tokens: Sequence[str],
    *,
    default_dependencies: dict[PackageFormat, str] | None = None,
) -> ValidatedArgs:
    """Result-shaped wrapper around normalize_options for callers that avoid exceptions."""

    try:
        options = normalize_options(tokens, default_dependencies=default_dependencies)
    except UsageError as exc:
        return ValidatedArgs(exit_message=exc.message, ok=exc.exit_code == 0)
    return ValidatedArgs(options=options, ok=True)
