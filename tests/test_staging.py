from __future__ import annotations

import os
from pathlib import Path

import pytest

from fpm_pack.config import ProjectMetadata
from fpm_pack.staging import launcher_script, upstart_script, write_launcher, write_upstart_script


def test_launcher_without_jvm_opts(metadata: ProjectMetadata) -> None:
    assert launcher_script(metadata) == (
        "#!/bin/bash\n"
        'java -jar /usr/lib/svc/svc-1.0-standalone.jar "$@"\n'
    )


def test_launcher_inserts_jvm_opts_before_jar_flag(metadata: ProjectMetadata) -> None:
    with_opts = metadata.model_copy(update={"jvm_opts": ["-Xmx1g", "-Dfoo=bar"]})

    assert launcher_script(with_opts, runtime="/opt/jdk/bin/java") == (
        "#!/bin/bash\n"
        '/opt/jdk/bin/java -Xmx1g -Dfoo=bar -jar /usr/lib/svc/svc-1.0-standalone.jar "$@"\n'
    )


def test_upstart_script_content(metadata: ProjectMetadata) -> None:
    assert upstart_script(metadata) == (
        "#!upstart\n"
        "\n"
        'description "svc"\n'
        "start on startup\n"
        "stop on shutdown\n"
        "respawn\n"
        "exec /usr/bin/svc\n"
    )


def test_write_launcher_creates_parents_and_marks_executable(metadata: ProjectMetadata, target_dir: Path) -> None:
    assert not target_dir.exists()

    path = write_launcher(metadata)

    assert path == target_dir / "svc"
    assert path.read_text(encoding="utf-8") == launcher_script(metadata)
    assert os.access(path, os.X_OK)


def test_write_upstart_script_overwrites_existing_file(metadata: ProjectMetadata, target_dir: Path) -> None:
    target_dir.mkdir(parents=True)
    (target_dir / "svc.conf").write_text("stale", encoding="utf-8")

    path = write_upstart_script(metadata)

    assert path.read_text(encoding="utf-8") == upstart_script(metadata)


def test_write_is_idempotent(metadata: ProjectMetadata) -> None:
    first = write_launcher(metadata).read_text(encoding="utf-8")
    second = write_launcher(metadata).read_text(encoding="utf-8")

    assert first == second


def test_write_failure_propagates(tmp_path: Path, metadata: ProjectMetadata) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    blocked = metadata.model_copy(update={"target_path": blocker / "target"})

    with pytest.raises(OSError):
        write_upstart_script(blocked)
