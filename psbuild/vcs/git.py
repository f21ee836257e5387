"""Best-effort git lookups. Every failure returns None instead of raising."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from psbuild.vcs.models import Revision

logger = logging.getLogger(__name__)


def git_output(args: list[str], cwd: Path, timeout: float = 10.0) -> str | None:
    """Run ``git <args>`` in *cwd* and return stripped stdout, or None."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("git %s failed: %s", " ".join(args), e)
        return None

    if result.returncode != 0:
        logger.debug("git %s exited %d", " ".join(args), result.returncode)
        return None
    return result.stdout.strip() or None


def lookup_revision(
    root: Path, upstream_ref: str = "origin/master", timeout: float = 10.0
) -> Revision | None:
    """Return HEAD and its merge-base with *upstream_ref*, or None if either is unknown."""
    head = git_output(["rev-parse", "HEAD"], root, timeout)
    if head is None:
        return None
    merge_base = git_output(["merge-base", "HEAD", upstream_ref], root, timeout)
    if merge_base is None:
        return None
    return Revision(head=head, merge_base=merge_base)
