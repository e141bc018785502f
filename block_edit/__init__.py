from .apply import (
    apply_edit_block,
    git_based_replace,
    in_memory_replace,
    perform_search_replace,
    replace_first,
    select_strategy,
)
from .config import EditConfig, load_config
from .errors import BlockEditError, EditIOError, FormatError, NotFoundError, PatchError, ShellError
from .parser import parse_edit_block
from .prompts import EDIT_BLOCK_DESCRIPTION, edit_block_description
from .providers import DiffPatchProvider, GitDiffPatchProvider
from .types import ApplyMode, EditBlock, SearchReplace, Strategy

__all__ = [
    "apply_edit_block",
    "ApplyMode",
    "BlockEditError",
    "DiffPatchProvider",
    "EDIT_BLOCK_DESCRIPTION",
    "edit_block_description",
    "EditBlock",
    "EditConfig",
    "EditIOError",
    "FormatError",
    "git_based_replace",
    "GitDiffPatchProvider",
    "in_memory_replace",
    "load_config",
    "NotFoundError",
    "parse_edit_block",
    "PatchError",
    "perform_search_replace",
    "replace_first",
    "SearchReplace",
    "select_strategy",
    "ShellError",
    "Strategy",
]
