from typing import cast

import orjson

JSON_SUFFIXES = frozenset({".json"})


def load_json(json_str: str) -> object:
    """Load and parse a JSON string.

    Args:
        json_str: The JSON string to parse.

    Returns:
        The parsed JSON value.

    Raises:
        orjson.JSONDecodeError: If the string is not valid JSON.
    """
    return cast("object", orjson.loads(json_str))
