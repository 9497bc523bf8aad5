"""Glob expansion and filesystem helpers.

Source patterns follow the conventions of the JavaScript ``globby`` module
that fabricator toolkits were written against: ``**`` crosses directories,
``{a,b}`` expands to alternatives and a leading ``!`` excludes matches.
"""

import glob
import re
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathspec import PathSpec

_BRACE_GROUP = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` groups in a glob pattern.

    Nested groups are expanded innermost first. Patterns without a group are
    returned unchanged.

    Args:
        pattern: Glob pattern, possibly containing brace groups.

    Returns:
        List of patterns with every group expanded, in declaration order.

    Example:
        >>> expand_braces("src/data/**/*.{json,yml}")
        ['src/data/**/*.json', 'src/data/**/*.yml']
    """
    match = _BRACE_GROUP.search(pattern)
    if match is None:
        return [pattern]

    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        for candidate in expand_braces(f"{head}{option}{tail}"):
            if candidate not in expanded:
                expanded.append(candidate)
    return expanded


def _build_exclusions(patterns: Sequence[str]) -> "PathSpec | None":  # noqa: UP037
    from pathspec import PathSpec as PathSpecClass  # noqa: PLC0415
    from pathspec.patterns.gitwildmatch import GitWildMatchPattern  # noqa: PLC0415

    negated = [
        expanded
        for pattern in patterns
        if pattern.startswith("!")
        for expanded in expand_braces(pattern[1:])
    ]
    if not negated:
        return None
    return PathSpecClass.from_lines(GitWildMatchPattern, negated)


def expand_patterns(
    patterns: str | Sequence[str],
    *,
    base_dir: Path,
) -> list[Path]:
    """Expand glob patterns to a list of files.

    Directories are never returned. Each positive pattern's matches are
    sorted; across patterns the declaration order is kept and duplicates are
    dropped, keeping the first occurrence.

    Args:
        patterns: One pattern or a sequence of patterns. Patterns starting
            with ``!`` exclude matching paths.
        base_dir: Directory that relative patterns are resolved against.

    Returns:
        Matching file paths, joined onto ``base_dir``.
    """
    if isinstance(patterns, str):
        patterns = [patterns]

    exclusions = _build_exclusions(patterns)

    files: list[Path] = []
    seen: set[Path] = set()

    for pattern in patterns:
        if pattern.startswith("!"):
            continue
        for expanded in expand_braces(pattern):
            matches = sorted(glob.glob(expanded, root_dir=base_dir, recursive=True))
            for match in matches:
                path = base_dir / match
                if path in seen or not path.is_file():
                    continue
                if exclusions is not None and exclusions.match_file(
                    Path(match).as_posix()
                ):
                    continue
                seen.add(path)
                files.append(path)

    return files


def ensure_parent_dir(path: Path) -> None:
    """Create the parent directory of ``path`` if it does not exist."""
    path.parent.mkdir(parents=True, exist_ok=True)


def read_text(path: Path) -> str:
    """Read a UTF-8 source file."""
    return path.read_text(encoding="utf-8")
