"""Cachebusting and URL rewriting for template documents."""

from psbuild.cachebust.hashing import (
    FileReader,
    content_hash,
    random_marker,
    read_file,
    try_hash,
)
from psbuild.cachebust.rewriter import (
    RELATIVE_FALLBACK,
    UrlRewriter,
    rewrite_urls,
    substitute_domain_literals,
)

__all__ = [
    "FileReader",
    "RELATIVE_FALLBACK",
    "UrlRewriter",
    "content_hash",
    "random_marker",
    "read_file",
    "rewrite_urls",
    "substitute_domain_literals",
    "try_hash",
]
