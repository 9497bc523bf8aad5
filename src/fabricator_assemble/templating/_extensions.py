"""Named extensions for the Jinja2 environment.

Custom tags are Jinja2 ``Extension`` subclasses; custom functions become
template globals. Both are keyed so they can be configured and reported by
name.
"""

from collections.abc import Callable
from dataclasses import dataclass

from jinja2.ext import Extension


@dataclass(slots=True, frozen=True)
class TemplateTag:
    """A render-time tag handler.

    Attributes:
        key: Name the tag is registered under.
        func: Jinja2 extension class implementing the tag.
    """

    key: str
    func: type[Extension]


@dataclass(slots=True, frozen=True)
class TemplateFunction:
    """A global function callable from templates.

    Attributes:
        key: Name the function is exposed as.
        func: The callable.
    """

    key: str
    func: Callable[..., object]
