"""Package a standalone jar as deb, rpm or solaris packages with fpm."""

from fpm_pack.config import AppSettings, ProjectMetadata, load_settings
from fpm_pack.invocation import fpm_command
from fpm_pack.options import PackageOptions, normalize_options, validate_args
from fpm_pack.pipeline import PackageRunResult, run_package_pipeline

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "PackageOptions",
    "PackageRunResult",
    "ProjectMetadata",
    "fpm_command",
    "load_settings",
    "normalize_options",
    "run_package_pipeline",
    "validate_args",
]
