"""Packaging pipeline orchestration: build, stage, synthesize, run fpm."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import typer

from fpm_pack.artifact import ArtifactBuilder, Echo, report_command_output
from fpm_pack.config import PackagingConfig, ProjectMetadata
from fpm_pack.errors import PackagingFailed
from fpm_pack.executor import CommandExecutor, CommandResult
from fpm_pack.invocation import fpm_command, render_command
from fpm_pack.options import PackageOptions
from fpm_pack.paths import package_path
from fpm_pack.staging import write_launcher, write_upstart_script

LOGGER = logging.getLogger(__name__)

FAILURE_BANNER = "Failed to build package!"


@dataclass(frozen=True, slots=True)
class PackageRunResult:
    """Return object for one packaging run."""

    command: tuple[str, ...]
    dry_run: bool
    exit_code: int
    package_path: Path | None = None
    command_result: CommandResult | None = None
    error: PackagingFailed | None = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def failure_exit_code(returncode: int) -> int:
    """Map a child return code to a process exit code.

    Negative codes mean the child died from a signal and become ``128 + signal``.
    """

    return returncode if returncode > 0 else 128 - returncode


def run_package_pipeline(
    metadata: ProjectMetadata,
    options: PackageOptions,
    *,
    builder: ArtifactBuilder,
    executor: CommandExecutor,
    packaging: PackagingConfig | None = None,
    logger: logging.Logger | None = None,
    echo: Echo = typer.echo,
) -> PackageRunResult:
    """Generate the package for the given project and options.

    A dry run only prints the fpm command; nothing is built, staged or executed.
    Builder and staging failures propagate. A nonzero fpm exit is returned as
    ``PackageRunResult.error`` with the exit code to terminate with.
    """

    effective_logger = logger or LOGGER
    config = packaging or PackagingConfig()
    command = fpm_command(metadata, options, tool=config.tool, defaults=config.default_dependencies)

    if options.dry_run:
        echo(render_command(command))
        return PackageRunResult(command=command, dry_run=True, exit_code=0)

    effective_logger.info(
        "pipeline.start name=%s version=%s type=%s",
        metadata.name,
        metadata.version,
        options.package_format,
    )
    echo("Creating uberjar")
    builder.build(metadata)
    echo("Creating wrapper binary")
    write_launcher(metadata, runtime=config.runtime, shebang=config.shebang, logger=effective_logger)
    echo("Creating upstart script")
    write_upstart_script(metadata, logger=effective_logger)
    echo("Building package")
    result = executor.run(command)
    report_command_output(result, echo)

    if not result.ok:
        exit_code = failure_exit_code(result.exit_code)
        effective_logger.error("pipeline.fpm_failed code=%s", result.exit_code)
        echo(FAILURE_BANNER, err=True)
        return PackageRunResult(
            command=command,
            dry_run=False,
            exit_code=exit_code,
            command_result=result,
            error=PackagingFailed(exit_code, result.stderr),
        )

    output_path = package_path(metadata, options.package_format)
    effective_logger.info("pipeline.done package=%s", output_path)
    return PackageRunResult(
        command=command,
        dry_run=False,
        exit_code=0,
        package_path=output_path,
        command_result=result,
    )
