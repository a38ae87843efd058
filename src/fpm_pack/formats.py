"""Supported package formats and their default runtime dependencies."""

from __future__ import annotations

from typing import Final, Literal

PackageFormat = Literal["deb", "rpm", "solaris"]

PACKAGE_FORMATS: Final[tuple[PackageFormat, ...]] = ("deb", "rpm", "solaris")

FORMAT_DESCRIPTIONS: Final[dict[PackageFormat, str]] = {
    "deb": "Create a Debian package",
    "rpm": "Create an RPM package",
    "solaris": "Create a Solaris package",
}

DEFAULT_DEPENDENCIES: Final[dict[PackageFormat, str]] = {
    "deb": "default-jre",
    "rpm": "java-1.7.0-openjdk",
    "solaris": "jdk-7",
}


def is_package_format(value: str) -> bool:
    """Return whether value names one of the supported package formats."""

    return value in PACKAGE_FORMATS
