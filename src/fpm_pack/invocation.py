"""Build the ordered fpm argument vector for a project and its package options."""

from __future__ import annotations

from typing import Final, Mapping, Sequence

from fpm_pack.config import ProjectMetadata
from fpm_pack.formats import DEFAULT_DEPENDENCIES, PackageFormat
from fpm_pack.options import PackageOptions
from fpm_pack.paths import package_path, path_pairs

DEFAULT_TOOL: Final = "fpm"


def default_dependencies(
    package_format: PackageFormat,
    defaults: Mapping[PackageFormat, str] | None = None,
) -> str:
    """Default package dependencies for the provided package type."""

    return (defaults or DEFAULT_DEPENDENCIES)[package_format]


def resolve_dependencies(
    metadata: ProjectMetadata,
    options: PackageOptions,
    defaults: Mapping[PackageFormat, str] | None = None,
) -> str:
    """Pick the command line override, then the project override, then the type default."""

    if options.package_dependencies is not None:
        return options.package_dependencies
    if metadata.package_dependencies is not None:
        return metadata.package_dependencies
    return default_dependencies(options.package_format, defaults)


def split_dependencies(raw: str) -> list[str]:
    """Split a comma-separated dependency list, trimming blanks and keeping order."""

    return [part.strip() for part in raw.split(",") if part.strip()]


def fpm_option_pairs(
    metadata: ProjectMetadata,
    options: PackageOptions,
    defaults: Mapping[PackageFormat, str] | None = None,
) -> list[tuple[str, ...]]:
    """Flag groups passed to fpm, in order.

    A list of tuples rather than a mapping since ``-d`` repeats once per
    dependency.
    """

    pairs: list[tuple[str, ...]] = [
        ("-s", "dir"),
        ("-t", options.package_format),
    ]
    if options.maintainer:
        pairs.append(("-m", options.maintainer))
    pairs.extend(
        [
            ("--force",),
            ("-a", "all"),
            ("-p", str(package_path(metadata, options.package_format))),
            ("-n", metadata.name),
            ("-v", metadata.version),
            ("--url", metadata.url),
            ("--description", metadata.description),
        ]
    )
    dependencies = split_dependencies(resolve_dependencies(metadata, options, defaults))
    pairs.extend(("-d", dependency) for dependency in dependencies)
    # Emitted for every target type, not only rpm.
    pairs.append(("--rpm-os", "linux"))
    return pairs


def mapping_parameters(metadata: ProjectMetadata) -> list[str]:
    """The ``source=destination`` parameters for jar, launcher and upstart job."""

    return [pair.mapping() for pair in path_pairs(metadata)]


def fpm_command(
    metadata: ProjectMetadata,
    options: PackageOptions,
    *,
    tool: str = DEFAULT_TOOL,
    defaults: Mapping[PackageFormat, str] | None = None,
) -> tuple[str, ...]:
    """Return the fpm command as a sequence of tokens."""

    tokens = [tool]
    for group in fpm_option_pairs(metadata, options, defaults):
        tokens.extend(group)
    tokens.extend(mapping_parameters(metadata))
    return tuple(tokens)


def render_command(tokens: Sequence[str]) -> str:
    """Join tokens with single spaces, as printed for a dry run."""

    return " ".join(tokens)
