"""Load and render the Jinja2 templates that format create-gem output."""

from pathlib import Path

import jinja2

_TEMPLATES_DIR = Path(__file__).parent

_environment = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATES_DIR)),
    keep_trailing_newline=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs) -> str:
    """Render a template from this directory.

    Args:
        template_name: Template filename (e.g. "summary.j2")
        **kwargs: Template variables.

    Returns:
        The rendered template string.
    """
    return _environment.get_template(template_name).render(**kwargs)
