import logging
from pathlib import Path
from typing import Protocol

from .errors import PatchError, ShellError
from .shell import join_command, run_shell
from .types import ApplyMode

logger = logging.getLogger(__name__)

SNAPSHOT_EMAIL = "temp@example.com"
SNAPSHOT_NAME = "Temp User"

APPLY_ENV = {"LC_ALL": "C"}
APPLIED_MARKER = "Applied patch"


class DiffPatchProvider(Protocol):
    def snapshot(self, directory: Path, filename: str) -> None:
        """Record ``directory/filename`` as the baseline revision."""

    def diff(self, directory: Path) -> str:
        """Return a unified diff of the working copy against the baseline."""

    def apply(self, snapshot_dir: Path, target_dir: Path, patch_path: Path, mode: ApplyMode) -> None:
        """Apply the patch at ``patch_path`` to files under ``target_dir``.

        ``snapshot_dir`` is the directory previously passed to ``snapshot``.
        """


class GitDiffPatchProvider:
    """Drives the ``git`` binary to snapshot, diff and apply."""

    def __init__(self, git: str = "git") -> None:
        self.git = git

    def _run(self, cwd: Path, *args: str | Path) -> str:
        return run_shell(join_command(self.git, *args), cwd=cwd).stdout

    def snapshot(self, directory: Path, filename: str) -> None:
        try:
            self._run(directory, "init", "-q")
            self._run(directory, "config", "user.email", SNAPSHOT_EMAIL)
            self._run(directory, "config", "user.name", SNAPSHOT_NAME)
            self._run(directory, "config", "core.autocrlf", "false")
            self._run(directory, "config", "commit.gpgsign", "false")
            # -f: the file may match the user's global excludes.
            self._run(directory, "add", "-f", "--", filename)
            self._run(directory, "commit", "-q", "--no-verify", "-m", "Original file")
        except ShellError as exc:
            raise PatchError(f"Failed to snapshot {filename}", stderr=exc.stderr) from exc

    def diff(self, directory: Path) -> str:
        try:
            return self._run(
                directory,
                "diff",
                "--no-color",
                "--no-ext-diff",
                "--src-prefix=a/",
                "--dst-prefix=b/",
            )
        except ShellError as exc:
            raise PatchError("Failed to compute diff", stderr=exc.stderr) from exc

    def apply(self, snapshot_dir: Path, target_dir: Path, patch_path: Path, mode: ApplyMode) -> None:
        # The snapshot repo stands in for any repository around target_dir,
        # so patch paths resolve against target_dir and its repo config is ignored.
        args: list[str | Path] = [
            self.git,
            f"--git-dir={snapshot_dir.resolve() / '.git'}",
            f"--work-tree={target_dir.resolve()}",
            "apply",
            "--verbose",
            "--whitespace=nowarn",
        ]
        if mode is ApplyMode.THREE_WAY:
            args.append("--3way")
        args.append(patch_path)

        command = join_command(*args)
        try:
            result = run_shell(command, cwd=target_dir, env=APPLY_ENV)
        except ShellError as exc:
            raise PatchError(f"Failed to apply changes ({mode})", stderr=exc.stderr) from exc
        # git exits 0 when it skips a patch whose paths it cannot place.
        if APPLIED_MARKER not in result.stderr:
            raise PatchError(f"Patch was not applied ({mode})", stderr=result.stderr)
