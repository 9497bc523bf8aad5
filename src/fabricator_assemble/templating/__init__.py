r"""Templating collaborators for the assembler.

Jinja2 renders views, Python-Markdown renders docs and PyYAML decodes front
matter.

Basic usage:
    from fabricator_assemble.templating import (
        create_environment,
        parse_frontmatter,
        render_template_string,
    )

    env = create_environment([Path("src/views")], templates={"default": layout})
    page = parse_frontmatter("---\ntitle: Home\n---\n<h1>{{ title }}</h1>")
    html = render_template_string(page.content, page.data, env=env)
"""

from ._environment import EnvironmentConfig, create_environment
from ._extensions import TemplateFunction, TemplateTag
from ._frontmatter import (
    FrontMatter,
    YAMLFrontmatter,
    load_frontmatter_file,
    parse_frontmatter,
)
from ._markdown import render_markdown
from ._renderer import render_template_string

__all__ = [
    "EnvironmentConfig",
    "FrontMatter",
    "TemplateFunction",
    "TemplateTag",
    "YAMLFrontmatter",
    "create_environment",
    "load_frontmatter_file",
    "parse_frontmatter",
    "render_markdown",
    "render_template_string",
]
