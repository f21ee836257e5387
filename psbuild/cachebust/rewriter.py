"""Asset reference rewriting: domain routing plus content-hash cachebusters.

References look like ``src="path"`` or ``href="path?query"``. Each is
rewritten on its own; nothing carries over from one reference to the next.
"""

from __future__ import annotations

import re
from pathlib import Path

from psbuild.cachebust.hashing import FileReader, random_marker, read_file, try_hash
from psbuild.config.models import RouteTable

_REFERENCE_RE = re.compile(r'(src|href)="([^"]*?)(\?[^"]*)?"')

CLIENT_DOMAIN = "play.pokemonshowdown.com"

# Checked in this order; each is replaced at most once per path.
SOURCE_DOMAINS = (
    ("replay.pokemonshowdown.com", "replays"),
    ("dex.pokemonshowdown.com", "dex"),
    (CLIENT_DOMAIN, "client"),
    ("pokemonshowdown.com", "root"),
)

RELATIVE_FALLBACK = "v1"


class UrlRewriter:
    """Rewrites every asset reference in a template document.

    Absolute paths are hashed relative to *root* with the client route
    segment removed; bare relative paths are hashed relative to
    *replay_root*. Unreadable files never fail the rewrite.
    """

    def __init__(
        self,
        routes: RouteTable,
        root: Path,
        replay_root: Path | None = None,
        reader: FileReader = read_file,
    ) -> None:
        self.routes = routes
        self.root = root
        if replay_root is None:
            replay_root = root / "replay.pokemonshowdown.com"
        self.replay_root = replay_root
        self.reader = reader

    def substitute_domains(self, path: str) -> str:
        for domain, key in SOURCE_DOMAINS:
            path = path.replace(f"/{domain}/", f"/{getattr(self.routes, key)}/", 1)
        return path

    def cachebuster(self, path: str) -> str:
        if path.startswith("/"):
            rel = path[1:].replace(f"/{self.routes.client}/", "", 1)
            return try_hash(self.root / rel, self.reader, self.root) or random_marker()
        return try_hash(self.replay_root / path, self.reader, self.root) or RELATIVE_FALLBACK

    def _rewrite_match(self, m: re.Match) -> str:
        attr, path, query = m.group(1), m.group(2), m.group(3)
        path = self.substitute_domains(path)
        if query is None:
            return f'{attr}="{path}"'
        return f'{attr}="{path}?{self.cachebuster(path)}"'

    def rewrite(self, text: str) -> str:
        return _REFERENCE_RE.sub(self._rewrite_match, text)


def rewrite_urls(
    text: str,
    routes: RouteTable,
    root: Path,
    reader: FileReader = read_file,
    replay_root: Path | None = None,
) -> str:
    """Rewrite all ``src``/``href`` references in *text*."""
    return UrlRewriter(routes, root, replay_root, reader).rewrite(text)


def substitute_domain_literals(text: str, routes: RouteTable) -> str:
    """Whole-document replacement of the client domain with its route."""
    return text.replace(CLIENT_DOMAIN, routes.client)
