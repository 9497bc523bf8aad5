"""Template rendering engine."""

from collections.abc import Mapping
from typing import cast

from jinja2 import Environment, Template


def render_template_string(
    template_str: str,
    context: Mapping[str, object],
    *,
    env: Environment | None = None,
) -> str:
    """Render a Jinja2 template string with context.

    Args:
        template_str: The Jinja2 template string.
        context: Template variables.
        env: Optional Jinja2 Environment. If not provided, creates a standalone
            Template instance.

    Returns:
        Rendered string.

    Raises:
        jinja2.TemplateError: If the template cannot be parsed or rendered.
    """
    if env is not None:
        template = env.from_string(template_str)
    else:
        template = Template(template_str)  # pyright: ignore[reportAny]

    return cast("str", template.render(dict(context)))
