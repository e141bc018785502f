from dataclasses import dataclass


class BlockEditError(Exception):
    pass


class FormatError(BlockEditError, ValueError):
    pass


class NotFoundError(BlockEditError, LookupError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Search content not found in {path}")
        self.path = path


class EditIOError(BlockEditError, OSError):
    pass


@dataclass(slots=True)
class ShellError(BlockEditError):
    command: str
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        output = self.stderr.strip() or self.stdout.strip() or "(no output)"
        return f"Command failed with exit code {self.returncode}: {self.command}\n{output}"


@dataclass(slots=True)
class PatchError(BlockEditError):
    message: str
    stderr: str = ""

    def __str__(self) -> str:
        if self.stderr:
            return f"{self.message}\n{self.stderr.strip()}"
        return self.message
