"""Template emission."""

from psbuild.templates.emitter import emit_templates, render_template

__all__ = [
    "emit_templates",
    "render_template",
]
