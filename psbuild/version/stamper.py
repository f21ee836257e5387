"""Version stamping: build identifier plus the generated config block."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from psbuild.config.loader import load_release_version
from psbuild.config.models import BuildConfig, RouteTable
from psbuild.vcs import Revision, lookup_revision

logger = logging.getLogger(__name__)

BEGIN_MARKER = "/*** Begin automatically generated configuration ***/"
END_MARKER = "/*** End automatically generated configuration ***/"

_BLOCK_RE = re.compile(re.escape(BEGIN_MARKER) + r".+" + re.escape(END_MARKER), re.DOTALL)


def build_version(release: str, revision: Revision | None, short_length: int = 8) -> str:
    """Append ``(head)`` or ``(head/mergebase)`` to *release* when a revision is known."""
    if revision is None:
        return release
    head, merge_base = revision.short(short_length)
    if revision.head == revision.merge_base:
        suffix = head
    else:
        suffix = f"{head}/{merge_base}"
    return f"{release} ({suffix})"


def render_config_block(version: str, routes: RouteTable) -> str:
    lines = [
        BEGIN_MARKER,
        f"Config.version = {json.dumps(version)};",
        "",
        "Config.routes = {",
    ]
    for key, value in routes.model_dump().items():
        lines.append(f"\t{key}: '{value}',")
    lines.append("};")
    lines.append(END_MARKER)
    return "\n".join(lines)


def splice_config_block(text: str, block: str) -> str:
    """Replace an existing generated block in *text*, or append *block*."""
    if _BLOCK_RE.search(text):
        # Callable replacement: the block may contain backslashes.
        return _BLOCK_RE.sub(lambda _m: block, text, count=1)
    return text + block


def stamp_config(root: Path, config: BuildConfig, routes: RouteTable) -> str:
    """Write the generated block into config.js and its deployed copy.

    Returns the computed version string.
    """
    release = load_release_version(root / config.paths.package_json)
    revision = lookup_revision(
        root, config.version.upstream_ref, timeout=config.version.git_timeout
    )
    version = build_version(release, revision, config.version.short_length)

    config_path = root / config.paths.config_js
    try:
        original = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("%s does not exist yet, creating it", config_path)
        original = ""

    data = splice_config_block(original, render_config_block(version, routes)).encode("utf-8")
    for dest in (config_path, root / config.paths.config_js_copy):
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(data)
        logger.debug("wrote %s (%d bytes)", dest, len(data))

    logger.debug("stamped version %s", version)
    return version
