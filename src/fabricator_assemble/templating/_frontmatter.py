"""Front matter parsing for source files."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

import yaml

type YAMLFrontmatter = dict[str, Any]  # pyright: ignore[reportExplicitAny]

_FRONTMATTER = re.compile(
    r"\A---[ \t]*\r?\n(?P<data>.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


@dataclass(slots=True)
class FrontMatter:
    """A source file split into its front matter and body.

    Attributes:
        data: Parsed front matter mapping (empty when the file has none).
        content: Body following the closing delimiter.
    """

    data: YAMLFrontmatter = field(default_factory=dict)
    content: str = ""


def parse_frontmatter(text: str) -> FrontMatter:
    """Split YAML front matter from the body of a source file.

    A front matter block starts on the first line with ``---`` and ends at
    the next line consisting of ``---``. Text without such a block is
    returned whole as the body.

    Args:
        text: The full file content.

    Returns:
        The parsed FrontMatter.

    Raises:
        yaml.YAMLError: If the block is not valid YAML.
        ValueError: If the block is valid YAML but not a mapping.
    """
    match = _FRONTMATTER.match(text)
    if match is None:
        return FrontMatter(data={}, content=text)

    loaded = yaml.safe_load(match.group("data"))  # pyright: ignore[reportAny]
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = f"Front matter must be a mapping, got {type(loaded).__name__}"  # pyright: ignore[reportAny]
        raise ValueError(msg)

    return FrontMatter(
        data=cast("YAMLFrontmatter", loaded),
        content=text[match.end() :],
    )


def load_frontmatter_file(path: Path) -> FrontMatter:
    """Read a UTF-8 file and parse its front matter."""
    return parse_frontmatter(path.read_text(encoding="utf-8"))
