"""Source-control lookups for build versioning."""

from psbuild.vcs.git import git_output, lookup_revision
from psbuild.vcs.models import Revision

__all__ = [
    "Revision",
    "git_output",
    "lookup_revision",
]
