from .loader import load_config, load_release_version, load_routes
from .models import (
    BuildConfig,
    CompileConfig,
    DirPair,
    FileBundle,
    PathsConfig,
    RouteTable,
    TemplateConfig,
    VersionConfig,
)

__all__ = [
    "BuildConfig",
    "CompileConfig",
    "DirPair",
    "FileBundle",
    "PathsConfig",
    "RouteTable",
    "TemplateConfig",
    "VersionConfig",
    "load_config",
    "load_release_version",
    "load_routes",
]
