"""Typer CLI entrypoint for fpm_pack."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml

from fpm_pack.artifact import CommandArtifactBuilder
from fpm_pack.config import AppSettings, load_settings
from fpm_pack.errors import ArtifactBuildError, ConfigError, FpmPackError, UsageError
from fpm_pack.executor import SubprocessExecutor
from fpm_pack.logging_utils import LOG_FILE_NAME, configure_logging
from fpm_pack.options import normalize_options
from fpm_pack.pipeline import run_package_pipeline

# Exit status click uses for its own usage errors.
CLICK_USAGE_EXIT = 2

app = typer.Typer(
    add_completion=False,
    help="Build deb, rpm and solaris packages for a standalone jar with fpm.",
    no_args_is_help=True,
)


def _load_and_optionally_configure_logger(
    config_file: Path | None,
    configure: bool,
    verbose: bool = False,
) -> tuple[AppSettings, logging.Logger]:
    try:
        settings = load_settings(config_file=config_file)
    except ConfigError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(exc.exit_code) from exc
    if configure:
        logger = configure_logging(
            settings.paths.logs_root / LOG_FILE_NAME,
            console_level=logging.INFO if verbose else logging.WARNING,
        )
    else:
        logger = logging.getLogger("fpm_pack")
    return settings, logger


@app.command(
    "package",
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    epilog="Run 'fpm-pack package help' for the package options and types.",
)
def package_cmd(
    ctx: typer.Context,
    arguments: list[str] | None = typer.Argument(
        None,
        metavar="[OPTIONS] TYPE",
        help="Package type (deb, rpm or solaris) with -d/--pkg-dependency PKG, -m/--maintainer EMAIL, --dry-run.",
        show_default=False,
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config-file",
        help="Optional settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Also show info-level log records on the console.",
    ),
) -> None:
    """Generate a minimalist package for the configured project.

    Package flags are passed through untouched and parsed by
    normalize_options, so every flag problem is reported in one message.
    """

    try:
        options = normalize_options([*(arguments or []), *ctx.args])
    except UsageError as exc:
        typer.echo(exc.message, err=exc.exit_code != 0)
        raise typer.Exit(exc.exit_code) from exc

    settings, logger = _load_and_optionally_configure_logger(
        config_file,
        configure=not options.dry_run,
        verbose=verbose,
    )
    executor = SubprocessExecutor(cwd=settings.paths.project_root, logger=logger)
    builder = CommandArtifactBuilder(settings.packaging.artifact_command, executor, logger=logger)

    try:
        result = run_package_pipeline(
            settings.project,
            options,
            builder=builder,
            executor=executor,
            packaging=settings.packaging,
            logger=logger,
        )
    except ArtifactBuildError as exc:
        logger.error("package.artifact_failed error=%s", exc)
        typer.echo(exc.message, err=True)
        raise typer.Exit(exc.exit_code) from exc
    except OSError as exc:
        logger.error("package.io_failed error=%s", exc)
        typer.echo(f"Fatal I/O error: {exc}", err=True)
        raise typer.Exit(1) from exc

    if result.error is not None:
        # Raised rather than typer.Exit so a tool exit of 2 is not read as a click usage error.
        raise result.error
    if result.package_path is not None:
        typer.echo(f"package_path: {result.package_path}")


@app.command("show-config")
def show_config(
    config_file: Path | None = typer.Option(
        None,
        "--config-file",
        help="Optional settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Print the effective configuration after env overrides."""

    settings, _ = _load_and_optionally_configure_logger(config_file, configure=False)
    rendered = yaml.safe_dump(settings.as_dict(), sort_keys=False)
    typer.echo(rendered)


def main(argv: list[str] | None = None) -> None:
    """CLI script entrypoint.

    Click's own usage errors exit 1 like every other usage error. A failed
    packaging run exits with the packaging tool's status.
    """

    try:
        app(args=argv, prog_name="fpm-pack")
    except FpmPackError as exc:
        raise SystemExit(exc.exit_code) from exc
    except SystemExit as exc:
        if exc.code == CLICK_USAGE_EXIT:
            raise SystemExit(1) from exc
        raise


if __name__ == "__main__":
    main()
