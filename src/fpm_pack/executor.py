"""Run external commands and capture their result."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Exit status and captured output of one finished command."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandExecutor(Protocol):
    """Anything that can run a token vector to completion."""

    def run(self, tokens: Sequence[str]) -> CommandResult: ...


class SubprocessExecutor:
    """Run commands as child processes, blocking until they exit.

    There is no timeout. A missing executable raises ``OSError``.
    """

    def __init__(self, cwd: Path | None = None, logger: logging.Logger | None = None) -> None:
        self.cwd = cwd
        self.logger = logger or LOGGER

    def run(self, tokens: Sequence[str]) -> CommandResult:
        self.logger.info("executor.run cmd=%s cwd=%s", tokens[0] if tokens else "", self.cwd)
        completed = subprocess.run(
            list(tokens),
            cwd=self.cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        self.logger.info("executor.exit cmd=%s code=%s", tokens[0] if tokens else "", completed.returncode)
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
