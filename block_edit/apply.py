import logging
import shutil
from pathlib import Path

from .config import EditConfig
from .errors import EditIOError, NotFoundError, PatchError
from .fileio import read_text, stat_size, write_text
from .parser import parse_edit_block
from .providers import DiffPatchProvider, GitDiffPatchProvider
from .types import ApplyMode, EditBlock, Failed, Replaced, SearchReplace, Strategy
from .workspace import workspace

logger = logging.getLogger(__name__)


def replace_first(content: str, search_replace: SearchReplace, path: str | Path) -> str:
    index = content.find(search_replace.search)
    if index == -1:
        raise NotFoundError(str(path))
    end = index + len(search_replace.search)
    return content[:index] + search_replace.replace + content[end:]


def in_memory_replace(path: str | Path, search_replace: SearchReplace) -> None:
    """Replace the first occurrence of the search text, rewriting the whole file.

    The file is left untouched when the replacement produces identical content.
    """
    content = read_text(path)
    new_content = replace_first(content, search_replace, path)
    if new_content != content:
        write_text(path, new_content)


def git_based_replace(
    path: str | Path,
    search_replace: SearchReplace,
    provider: DiffPatchProvider | None = None,
    config: EditConfig | None = None,
) -> None:
    """Replace the first occurrence of the search text by applying a patch.

    A copy of the file is committed in a throwaway workspace, edited there,
    and the resulting diff is applied to the original. If a direct apply
    fails, a three-way apply is tried before raising ``PatchError``. The
    workspace is always removed.
    """
    config = config or EditConfig()
    provider = provider or GitDiffPatchProvider(config.git)
    target = Path(path)

    with workspace(config.temp_root) as staging:
        staged = staging / target.name
        try:
            shutil.copyfile(target, staged)
        except OSError as exc:
            raise EditIOError(f"Cannot copy {target} into workspace: {exc}") from exc

        provider.snapshot(staging, target.name)

        content = read_text(staged)
        new_content = replace_first(content, search_replace, path)
        if new_content == content:
            return
        write_text(staged, new_content)

        patch_path = (staging / f"{target.name}.patch").resolve()
        write_text(patch_path, provider.diff(staging), errors="surrogateescape")

        _apply_patch(provider, staging, target.parent, patch_path)


def _apply_patch(
    provider: DiffPatchProvider, snapshot_dir: Path, target_dir: Path, patch_path: Path
) -> None:
    try:
        provider.apply(snapshot_dir, target_dir, patch_path, ApplyMode.DIRECT)
    except PatchError as exc:
        logger.debug("direct apply of %s failed, retrying with three-way merge: %s", patch_path, exc)
        provider.apply(snapshot_dir, target_dir, patch_path, ApplyMode.THREE_WAY)


def select_strategy(size: int, threshold: int) -> Strategy:
    if size < threshold:
        return Strategy.IN_MEMORY
    return Strategy.PATCH


def _attempt(
    strategy: Strategy,
    path: str | Path,
    search_replace: SearchReplace,
    config: EditConfig,
    provider: DiffPatchProvider | None,
) -> Replaced | Failed:
    try:
        if strategy is Strategy.PATCH:
            git_based_replace(path, search_replace, provider=provider, config=config)
        else:
            in_memory_replace(path, search_replace)
    except Exception as exc:
        return Failed(strategy=strategy, error=exc)
    return Replaced(strategy=strategy)


def perform_search_replace(
    path: str | Path,
    search_replace: SearchReplace,
    config: EditConfig | None = None,
    provider: DiffPatchProvider | None = None,
) -> Strategy:
    """Edit ``path`` in place and return the strategy that succeeded.

    Files below ``config.size_threshold`` bytes are edited in memory. Larger
    files go through ``git_based_replace`` first and fall back to the
    in-memory engine if that fails for any reason other than a missing match.
    """
    config = config or EditConfig()
    strategy = select_strategy(stat_size(path), config.size_threshold)
    logger.debug("editing %s with %s strategy", path, strategy)

    outcome = _attempt(strategy, path, search_replace, config, provider)
    match outcome:
        case Failed(strategy=Strategy.PATCH, error=NotFoundError()):
            # The staged copy is identical to the target, so the in-memory
            # engine would miss too.
            pass
        case Failed(strategy=Strategy.PATCH, error=error):
            logger.warning(
                "Patch-based replace failed for %s, falling back to in-memory replace: %s",
                path,
                error,
            )
            outcome = _attempt(Strategy.IN_MEMORY, path, search_replace, config, provider)

    match outcome:
        case Replaced(strategy=used):
            return used
        case Failed(error=error):
            raise error


def apply_edit_block(
    block_text: str,
    config: EditConfig | None = None,
    provider: DiffPatchProvider | None = None,
) -> EditBlock:
    """Parse an edit block and apply it to the file it names.

    Convenience wrapper around ``parse_edit_block`` + ``perform_search_replace``.
    Raises ``FormatError`` for a malformed block, ``NotFoundError`` if the search
    text is absent and ``EditIOError`` if the file cannot be accessed.
    """
    block = parse_edit_block(block_text)
    perform_search_replace(block.path, block.search_replace, config=config, provider=provider)
    return block
