import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_SIZE_THRESHOLD = 1_000_000

ENV_SIZE_THRESHOLD = "BLOCK_EDIT_SIZE_THRESHOLD"
ENV_TEMP_DIR = "BLOCK_EDIT_TEMP_DIR"
ENV_GIT = "BLOCK_EDIT_GIT"


@dataclass(frozen=True, slots=True)
class EditConfig:
    # Files at or above this many bytes go through the patch strategy first.
    size_threshold: int = DEFAULT_SIZE_THRESHOLD
    temp_root: str | None = None
    git: str = "git"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EditConfig":
        env = os.environ if environ is None else environ
        return cls._build(
            size_threshold=env.get(ENV_SIZE_THRESHOLD),
            temp_root=env.get(ENV_TEMP_DIR),
            git=env.get(ENV_GIT),
        )

    @classmethod
    def _build(cls, size_threshold: object, temp_root: object, git: object) -> "EditConfig":
        threshold = DEFAULT_SIZE_THRESHOLD
        if size_threshold is not None and str(size_threshold).strip():
            try:
                threshold = int(str(size_threshold).strip())
            except ValueError as exc:
                raise ValueError(f"size_threshold must be an integer, got {size_threshold!r}") from exc
            if threshold < 0:
                raise ValueError("size_threshold must be >= 0")

        root = str(temp_root).strip() if temp_root is not None else ""
        executable = str(git).strip() if git is not None else ""
        return cls(
            size_threshold=threshold,
            temp_root=root or None,
            git=executable or "git",
        )


def load_config(path: str | Path) -> EditConfig:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return EditConfig._build(
        size_threshold=raw.get("size_threshold"),
        temp_root=raw.get("temp_dir"),
        git=raw.get("git"),
    )
