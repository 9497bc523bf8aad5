"""Substitution of a page body into a wrapper template."""

import re

BODY_PLACEHOLDER = re.compile(r"\{%\s?body\s?%\}")


def wrap_page(page: str, wrapper: str | None) -> str:
    """Insert ``page`` into every ``{% body %}`` placeholder of ``wrapper``.

    The substitution is literal and one level deep. Without a wrapper the
    page is returned as is.

    Example:
        >>> wrap_page("INNER", "OUTER {% body %} OUTER")
        'OUTER INNER OUTER'
    """
    if not wrapper:
        return page
    return BODY_PLACEHOLDER.sub(lambda _: page, wrapper)
