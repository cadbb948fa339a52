"""
Jinja2 filters for the case converters.

Makes the converters available inside templates, e.g.
``{{ field_name | kebab_case }}``.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, select_autoescape

from case_convert.string_case import camelcase, camelcase_loose, dotcase, kebabcase

# Register filters that will be available in Jinja templates
FILTERS = {
    "camel_case": camelcase,
    "camel_case_loose": camelcase_loose,
    "dot_case": dotcase,
    "kebab_case": kebabcase,
}


def register_filters(env: Environment) -> Environment:
    """Install the case filters into an existing environment.

    Args:
        env: Jinja2 environment to extend.

    Returns:
        The same environment, for chaining.
    """
    env.filters.update(FILTERS)
    return env


def create_environment(**options: Any) -> Environment:
    """Create a Jinja2 environment with the case filters registered.

    Keyword arguments are passed to :class:`jinja2.Environment` and override
    the defaults.

    Examples:
        >>> env = create_environment()
        >>> env.from_string("{{ name | dot_case }}").render(name="SCREEN_NAME")
        'screen.name'
    """
    settings: dict[str, Any] = {
        "autoescape": select_autoescape(["html", "xml"]),
        "trim_blocks": True,
        "lstrip_blocks": True,
    }
    settings.update(options)
    return register_filters(Environment(**settings))
