import logging
import shutil
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import EditIOError

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "git-edit-"


@contextmanager
def workspace(temp_root: str | Path | None = None) -> Iterator[Path]:
    """Create a private staging directory and remove it on exit.

    The directory name is derived from a nanosecond timestamp plus a random
    suffix, so concurrent callers never share one. Removal errors are logged
    and swallowed so they cannot hide the outcome of the body.
    """
    try:
        path = Path(tempfile.mkdtemp(prefix=f"{WORKSPACE_PREFIX}{time.time_ns()}-", dir=temp_root))
    except OSError as exc:
        raise EditIOError(f"Cannot create workspace under {temp_root or tempfile.gettempdir()}: {exc}") from exc

    logger.debug("created workspace %s", path)
    try:
        yield path
    finally:
        try:
            shutil.rmtree(path)
        except OSError as exc:
            logger.error("Failed to clean up workspace %s: %s", path, exc)
