"""Logic for rendering the properties document through a Jinja2 template."""

from jinja2 import Environment, StrictUndefined, TemplateError as JinjaTemplateError

from property_documenter.errors import TemplateError
from property_documenter.header_slug import header_slug
from property_documenter.md_cell import md_cell
from property_documenter.render_context import RenderContext


def _finalize(v: object) -> object:
    return "" if v is None else v


def build_environment() -> Environment:
    """Create the Jinja2 environment used for Markdown output."""
    env = Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        finalize=_finalize,
    )
    env.filters["slug"] = header_slug
    env.filters["md_cell"] = md_cell
    return env


def render_document(context: RenderContext, template_source: str, template_name: str) -> str:
    """Render the whole document in memory.

    Compilation and rendering failures both raise ``TemplateError`` naming the
    template.
    """
    env = build_environment()
    try:
        template = env.from_string(template_source)
    except JinjaTemplateError as e:
        msg = f"Error compiling template ({e})"
        raise TemplateError(msg, template_name) from e
    try:
        return template.render(**context.template_params())
    except Exception as e:
        # Custom templates may fail with any Python error, not only Jinja's
        msg = f"Error rendering template ({type(e).__name__}: {e})"
        raise TemplateError(msg, template_name) from e
