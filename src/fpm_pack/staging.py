"""Render and write the launcher script and upstart job shipped in the package."""

from __future__ import annotations

import logging
from pathlib import Path

from fpm_pack.config import ProjectMetadata
from fpm_pack.paths import bin_destination_path, bin_path, jar_destination_path, upstart_path
from fpm_pack.utils.paths import write_text_file

LOGGER = logging.getLogger(__name__)

DEFAULT_RUNTIME = "java"
DEFAULT_SHEBANG = "#!/bin/bash"


def jar_invocation(metadata: ProjectMetadata, runtime: str = DEFAULT_RUNTIME) -> str:
    """The command line that runs the installed jar, forwarding all arguments."""

    parts = [runtime, *metadata.jvm_opts, "-jar", str(jar_destination_path(metadata)), '"$@"']
    return " ".join(parts)


def launcher_script(
    metadata: ProjectMetadata,
    runtime: str = DEFAULT_RUNTIME,
    shebang: str = DEFAULT_SHEBANG,
) -> str:
    return f"{shebang}\n{jar_invocation(metadata, runtime)}\n"


def upstart_script(metadata: ProjectMetadata) -> str:
    return (
        "#!upstart\n"
        "\n"
        f'description "{metadata.name}"\n'
        "start on startup\n"
        "stop on shutdown\n"
        "respawn\n"
        f"exec {bin_destination_path(metadata)}\n"
    )


def write_launcher(
    metadata: ProjectMetadata,
    *,
    runtime: str = DEFAULT_RUNTIME,
    shebang: str = DEFAULT_SHEBANG,
    logger: logging.Logger | None = None,
) -> Path:
    """Write the executable launcher to the target directory and return its path."""

    effective_logger = logger or LOGGER
    path = write_text_file(bin_path(metadata), launcher_script(metadata, runtime, shebang), executable=True)
    effective_logger.info("staging.launcher_written path=%s", path)
    return path


def write_upstart_script(metadata: ProjectMetadata, *, logger: logging.Logger | None = None) -> Path:
    """Write the upstart job to the target directory and return its path."""

    effective_logger = logger or LOGGER
    path = write_text_file(upstart_path(metadata), upstart_script(metadata))
    effective_logger.info("staging.upstart_written path=%s", path)
    return path
