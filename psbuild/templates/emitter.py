"""Writes rewritten template documents to their served locations."""

from __future__ import annotations

import logging
from pathlib import Path

from psbuild.cachebust import (
    FileReader,
    UrlRewriter,
    read_file,
    substitute_domain_literals,
)
from psbuild.config.models import RouteTable, TemplateConfig
from psbuild.errors import ConfigError

logger = logging.getLogger(__name__)


def render_template(text: str, template: TemplateConfig, rewriter: UrlRewriter) -> str:
    if template.mode == "domains":
        return substitute_domain_literals(text, rewriter.routes)
    return rewriter.rewrite(text)


def emit_templates(
    root: Path,
    templates: list[TemplateConfig],
    routes: RouteTable,
    replay_root: Path | None = None,
    reader: FileReader = read_file,
) -> list[Path]:
    """Render each template and write it next to (or instead of) its source.

    Documents are processed one at a time in the given order. Returns the
    written paths.
    """
    rewriter = UrlRewriter(routes, root, replay_root, reader)
    written: list[Path] = []
    for template in templates:
        source = root / template.source
        try:
            with open(source, encoding="utf-8", newline="") as f:
                text = f.read()
        except OSError as e:
            raise ConfigError(f"Template {source} could not be read: {e}") from e

        dest = root / template.target
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(
            render_template(text, template, rewriter), encoding="utf-8", newline=""
        )
        logger.debug("wrote %s", dest)
        written.append(dest)
    return written
