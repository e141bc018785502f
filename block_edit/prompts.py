from .parser import DIVIDER, HEAD, UPDATED

example_block = f"""/full/path/to/file.txt
{HEAD}
original text to replace
{DIVIDER}
new replacement text
{UPDATED}"""

EDIT_BLOCK_DESCRIPTION = f"""Apply a surgical text replacement to a file.

The block must follow this format EXACTLY:

1. FIRST LINE: Full absolute file path (no ~ shortcut)
2. NEXT LINE: Exactly '{HEAD}' (case-sensitive)
3. NEXT LINES: Exact content to search for
4. NEXT LINE: Exactly '{DIVIDER}' (case-sensitive)
5. NEXT LINES: Exact replacement content
6. LAST LINE: Exactly '{UPDATED}' (case-sensitive)

Only the first occurrence of the search content is replaced.
The search content must match the file exactly, including whitespace and indentation.

Example:

{example_block}
"""


def edit_block_description(path: str | None = None) -> str:
    """Return the tool description, optionally with ``path`` in the example."""
    if path is None:
        return EDIT_BLOCK_DESCRIPTION
    return EDIT_BLOCK_DESCRIPTION.replace("/full/path/to/file.txt", path)
