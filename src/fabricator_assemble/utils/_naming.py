"""Identifier and display-name helpers for source files."""

import re
from pathlib import PurePath

_WHITESPACE = re.compile(r"\s")
_ORDERING_PREFIX = re.compile(r"^[0-9|.\-]+")
_SEPARATORS = re.compile(r"[-_]")
_WORD = re.compile(r"\w\S*")


def get_name(file_path: str | PurePath, preserve_numbers: bool = False) -> str:  # noqa: FBT001, FBT002
    """Get the identifier of a file from its path.

    The extension is dropped and whitespace becomes ``-``. Unless
    ``preserve_numbers`` is set, a leading ordering prefix made of digits,
    dots and dashes is removed as well.

    Args:
        file_path: Path to the file.
        preserve_numbers: Keep a leading ordering prefix such as ``02-``.

    Returns:
        The derived identifier.

    Example:
        >>> get_name("./src/materials/structures/02-bar.html")
        'bar'
        >>> get_name("./src/materials/structures/02-bar.html", True)
        '02-bar'
    """
    name = _WHITESPACE.sub("-", PurePath(file_path).stem)
    if preserve_numbers:
        return name
    return _ORDERING_PREFIX.sub("", name)


def to_title_case(value: str) -> str:
    """Convert a file name to title case.

    Example:
        >>> to_title_case("foo-bar_baz")
        'Foo Bar Baz'
    """
    spaced = _SEPARATORS.sub(" ", value)
    return _WORD.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), spaced)


def slugify(value: str) -> str:
    """Replace runs of whitespace with a single dash."""
    return re.sub(r"\s+", "-", value)
