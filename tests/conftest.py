from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from fpm_pack.config import ProjectMetadata
from fpm_pack.executor import CommandResult
from fpm_pack.paths import jar_path


class FakeExecutor:
    """Records every command and replays a canned result."""

    def __init__(self, result: CommandResult | None = None) -> None:
        self.result = result or CommandResult(exit_code=0)
        self.calls: list[tuple[str, ...]] = []

    def run(self, tokens: Sequence[str]) -> CommandResult:
        self.calls.append(tuple(tokens))
        return self.result


class FakeBuilder:
    """Writes an empty jar where the real build would."""

    def __init__(self) -> None:
        self.calls = 0

    def build(self, metadata: ProjectMetadata) -> Path:
        self.calls += 1
        artifact = jar_path(metadata)
        artifact.parent.mkdir(parents=True, exist_ok=True)
        artifact.write_bytes(b"")
        return artifact


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    return tmp_path / "target"


@pytest.fixture
def metadata(target_dir: Path) -> ProjectMetadata:
    return ProjectMetadata(
        name="svc",
        version="1.0",
        description="A service",
        url="https://example.com/svc",
        target_path=target_dir,
    )


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def fake_builder() -> FakeBuilder:
    return FakeBuilder()


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    path = tmp_path / "configs" / "settings.yaml"
    path.parent.mkdir(parents=True)
    path.write_text(
        "\n".join(
            [
                "project:",
                "  name: svc",
                "  version: '1.0'",
                "  description: A service",
                "  url: https://example.com/svc",
                "  target_path: target",
                "  jvm_opts: ['-Xmx256m', '-server']",
                "paths:",
                "  logs_root: logs",
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path
