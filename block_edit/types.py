from dataclasses import dataclass
from enum import StrEnum


class Strategy(StrEnum):
    IN_MEMORY = "in_memory"
    PATCH = "patch"


class ApplyMode(StrEnum):
    DIRECT = "direct"
    THREE_WAY = "three_way"


@dataclass(frozen=True, slots=True)
class SearchReplace:
    search: str
    replace: str


@dataclass(frozen=True, slots=True)
class EditBlock:
    path: str
    search_replace: SearchReplace


@dataclass(frozen=True, slots=True)
class ShellResult:
    stdout: str
    stderr: str
    returncode: int = 0


@dataclass(frozen=True, slots=True)
class Replaced:
    strategy: Strategy


@dataclass(frozen=True, slots=True)
class Failed:
    strategy: Strategy
    error: Exception
