"""Build version stamping."""

from psbuild.version.stamper import (
    BEGIN_MARKER,
    END_MARKER,
    build_version,
    render_config_block,
    splice_config_block,
    stamp_config,
)

__all__ = [
    "BEGIN_MARKER",
    "END_MARKER",
    "build_version",
    "render_config_block",
    "splice_config_block",
    "stamp_config",
]
