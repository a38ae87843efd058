"""Source and install-host paths for every file placed in the package."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Final

from fpm_pack.config import ProjectMetadata
from fpm_pack.formats import PackageFormat

LIB_ROOT: Final = PurePosixPath("/usr/lib")
BIN_ROOT: Final = PurePosixPath("/usr/bin")
UPSTART_ROOT: Final = PurePosixPath("/etc/init")


@dataclass(frozen=True, slots=True)
class PathPair:
    """A file on the build host and where it lands on the install host."""

    source: Path
    destination: PurePosixPath

    def mapping(self) -> str:
        """Render the pair as an fpm ``dir`` source mapping."""

        return f"{self.source}={self.destination}"


def jar_file_name(metadata: ProjectMetadata) -> str:
    """The filename of the standalone jar for the project."""

    return f"{metadata.name}-{metadata.version}-standalone.jar"


def jar_path(metadata: ProjectMetadata) -> Path:
    """The full path to the jar on this system."""

    return metadata.target_path / jar_file_name(metadata)


def jar_destination_path(metadata: ProjectMetadata) -> PurePosixPath:
    """The full path to the jar once installed."""

    return LIB_ROOT / metadata.name / jar_file_name(metadata)


def bin_path(metadata: ProjectMetadata) -> Path:
    """The full path to the launcher script on this system."""

    return metadata.target_path / metadata.name


def bin_destination_path(metadata: ProjectMetadata) -> PurePosixPath:
    """The full path to the launcher script once installed."""

    return BIN_ROOT / metadata.name


def upstart_path(metadata: ProjectMetadata) -> Path:
    """The full path to the upstart job on this system."""

    return metadata.target_path / f"{metadata.name}.conf"


def upstart_destination_path(metadata: ProjectMetadata) -> PurePosixPath:
    """The full path to the upstart job once installed."""

    return UPSTART_ROOT / f"{metadata.name}.conf"


def package_path(metadata: ProjectMetadata, package_format: PackageFormat) -> Path:
    """The full path to the output package."""

    return metadata.target_path / f"{metadata.name}_{metadata.version}.{package_format}"


def path_pairs(metadata: ProjectMetadata) -> tuple[PathPair, PathPair, PathPair]:
    """Return jar, launcher and upstart pairs in fpm argument order."""

    return (
        PathPair(jar_path(metadata), jar_destination_path(metadata)),
        PathPair(bin_path(metadata), bin_destination_path(metadata)),
        PathPair(upstart_path(metadata), upstart_destination_path(metadata)),
    )
