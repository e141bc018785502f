from .errors import FormatError
from .types import EditBlock, SearchReplace

HEAD = "<<<<<<< SEARCH"
DIVIDER = "======="
UPDATED = ">>>>>>> REPLACE"

missing_markers_err = (
    "Invalid edit block format. REQUIRED: Exact "
    f'"{HEAD}", "{DIVIDER}", and "{UPDATED}" markers'
)
misordered_markers_err = (
    "Invalid edit block format. Markers must appear in order: "
    f'"{HEAD}", then "{DIVIDER}", then "{UPDATED}"'
)
missing_path_err = f"Invalid edit block format. The first line must be the file path, not '{HEAD}'"


def _find(lines: list[str], marker: str, start: int) -> int:
    try:
        return lines.index(marker, start)
    except ValueError:
        return -1


def parse_edit_block(block_text: str) -> EditBlock:
    """Parse a single edit block into a path and a search/replace pair.

    The first line is the file path. The marker lines must match exactly, with
    no surrounding whitespace, and appear in order. The path is only trimmed;
    ``~`` and relative segments are left for the caller to resolve.
    """
    lines = block_text.split("\n")
    path = lines[0].strip()
    if lines[0] == HEAD:
        raise FormatError(missing_path_err)

    head = _find(lines, HEAD, 1)
    divider = _find(lines, DIVIDER, head + 1) if head != -1 else -1
    updated = _find(lines, UPDATED, divider + 1) if divider != -1 else -1

    if updated == -1:
        if all(marker in lines for marker in (HEAD, DIVIDER, UPDATED)):
            raise FormatError(misordered_markers_err)
        raise FormatError(missing_markers_err)

    search = "\n".join(lines[head + 1 : divider])
    replace = "\n".join(lines[divider + 1 : updated])
    return EditBlock(path=path, search_replace=SearchReplace(search=search, replace=replace))
