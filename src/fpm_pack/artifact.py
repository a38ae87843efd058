"""Produce the standalone jar before anything else is staged."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Protocol, Sequence

import typer

from fpm_pack.config import ProjectMetadata
from fpm_pack.errors import ArtifactBuildError
from fpm_pack.executor import CommandExecutor, CommandResult
from fpm_pack.paths import jar_path

LOGGER = logging.getLogger(__name__)

Echo = Callable[..., None]


class ArtifactBuilder(Protocol):
    """Builds the project's standalone jar and returns where it was written."""

    def build(self, metadata: ProjectMetadata) -> Path: ...


def report_command_output(result: CommandResult, echo: Echo = typer.echo) -> None:
    """Print non-empty captured stdout to stdout and stderr to stderr."""

    stdout = result.stdout.rstrip("\n")
    stderr = result.stderr.rstrip("\n")
    if stdout:
        echo(stdout)
    if stderr:
        echo(stderr, err=True)


class CommandArtifactBuilder:
    """Run the project's own build command (``lein uberjar`` by default)."""

    def __init__(
        self,
        command: Sequence[str],
        executor: CommandExecutor,
        *,
        echo: Echo = typer.echo,
        logger: logging.Logger | None = None,
    ) -> None:
        if not command:
            raise ValueError("Artifact build command must not be empty.")
        self.command = tuple(command)
        self.executor = executor
        self.echo = echo
        self.logger = logger or LOGGER

    def build(self, metadata: ProjectMetadata) -> Path:
        result = self.executor.run(self.command)
        report_command_output(result, self.echo)
        if not result.ok:
            raise ArtifactBuildError(f"Artifact build command {' '.join(self.command)!r} exited with {result.exit_code}.")

        artifact = jar_path(metadata)
        if not artifact.is_file():
            raise ArtifactBuildError(f"Artifact build finished but {artifact} does not exist.")
        self.logger.info("artifact.built path=%s", artifact)
        return artifact
