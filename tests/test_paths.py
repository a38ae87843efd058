from __future__ import annotations

from pathlib import Path, PurePosixPath

from fpm_pack.config import ProjectMetadata
from fpm_pack.paths import (
    bin_destination_path,
    bin_path,
    jar_destination_path,
    jar_file_name,
    jar_path,
    package_path,
    path_pairs,
    upstart_destination_path,
    upstart_path,
)


def test_source_paths_live_in_target_dir(metadata: ProjectMetadata, target_dir: Path) -> None:
    assert jar_file_name(metadata) == "svc-1.0-standalone.jar"
    assert jar_path(metadata) == target_dir / "svc-1.0-standalone.jar"
    assert bin_path(metadata) == target_dir / "svc"
    assert upstart_path(metadata) == target_dir / "svc.conf"


def test_destination_paths_use_fixed_install_layout(metadata: ProjectMetadata) -> None:
    assert jar_destination_path(metadata) == PurePosixPath("/usr/lib/svc/svc-1.0-standalone.jar")
    assert bin_destination_path(metadata) == PurePosixPath("/usr/bin/svc")
    assert upstart_destination_path(metadata) == PurePosixPath("/etc/init/svc.conf")


def test_package_path_uses_underscore_and_type_extension(metadata: ProjectMetadata, target_dir: Path) -> None:
    assert package_path(metadata, "deb") == target_dir / "svc_1.0.deb"
    assert package_path(metadata, "solaris") == target_dir / "svc_1.0.solaris"


def test_path_functions_are_deterministic(metadata: ProjectMetadata) -> None:
    assert path_pairs(metadata) == path_pairs(metadata)
    assert str(package_path(metadata, "rpm")) == str(package_path(metadata, "rpm"))


def test_path_pairs_order_and_mapping(metadata: ProjectMetadata, target_dir: Path) -> None:
    jar, launcher, upstart = path_pairs(metadata)

    assert jar.mapping() == f"{target_dir}/svc-1.0-standalone.jar=/usr/lib/svc/svc-1.0-standalone.jar"
    assert launcher.mapping() == f"{target_dir}/svc=/usr/bin/svc"
    assert upstart.mapping() == f"{target_dir}/svc.conf=/etc/init/svc.conf"
