from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutcome:
    success: bool
    stdout: str = ""
    stderr: str = ""

    def failure_message(self, summary: str) -> str:
        """Append whatever the process printed to a one-line failure summary."""
        detail = (self.stderr or self.stdout).strip()
        return f"{summary}: {detail}" if detail else summary


class CommandRunner(Protocol):
    def __call__(self, program: str, *args: str) -> CommandOutcome: ...


def run(program: str, *args: str, cwd: Path | None = None) -> CommandOutcome:
    """Run a process to completion and report how it went.

    Never raises for a failing command: a non-zero exit, or a program that
    cannot be started at all, comes back as ``success=False``.
    """
    cmd = [program, *args]
    logger.debug("Running %s", cmd)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.debug("Could not start %s: %s", program, exc)
        return CommandOutcome(success=False, stderr=str(exc))

    if result.returncode != 0:
        logger.debug("%s exited with %d", cmd, result.returncode)
    return CommandOutcome(
        success=result.returncode == 0,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )
