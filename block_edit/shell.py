import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Mapping

from .errors import ShellError
from .types import ShellResult

logger = logging.getLogger(__name__)


def join_command(*args: str | Path) -> str:
    return shlex.join(str(arg) for arg in args)


def _decode(output: bytes) -> str:
    # Decoded by hand: text=True would fold CRLF into LF and corrupt patches.
    return output.decode("utf-8", errors="surrogateescape")


def run_shell(
    command: str,
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ShellResult:
    """Run ``command`` through the system shell and capture its output.

    Raises ``ShellError`` when the command exits non-zero. No timeout is
    applied; callers that need one must impose it themselves. ``env`` entries
    are layered over the current environment.
    """
    logger.debug("running %s (cwd=%s)", command, cwd)
    result = subprocess.run(
        command,
        shell=True,
        cwd=str(cwd) if cwd is not None else None,
        env={**os.environ, **env} if env else None,
        capture_output=True,
        check=False,
    )
    stdout = _decode(result.stdout)
    stderr = _decode(result.stderr)
    if result.returncode != 0:
        raise ShellError(
            command=command,
            returncode=result.returncode,
            stdout=stdout,
            stderr=stderr,
        )
    return ShellResult(stdout=stdout, stderr=stderr, returncode=result.returncode)
