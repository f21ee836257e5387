"""Runs the build phases in order: version, compile, cachebust."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field
from rich.console import Console

from psbuild.cachebust import FileReader, read_file
from psbuild.compiler import Compiler, CompileSummary, load_compile_options, run_compile
from psbuild.config import BuildConfig, load_routes
from psbuild.templates import emit_templates
from psbuild.version import stamp_config

logger = logging.getLogger(__name__)


class BuildReport(BaseModel):
    version: str
    compile: CompileSummary
    written: list[Path] = Field(default_factory=list)


class BuildPipeline:
    """One build of the project at *root*.

    Each phase's output is the next phase's input, so nothing overlaps:
    compiled bundles must be on disk before the cachebuster hashes them.
    """

    def __init__(
        self,
        root: Path,
        config: BuildConfig,
        compiler: Compiler,
        console: Console | None = None,
        reader: FileReader = read_file,
    ) -> None:
        self.root = root
        self.config = config
        self.compiler = compiler
        self.console = console or Console(highlight=False)
        self.reader = reader

    def run(self, full: bool = False) -> BuildReport:
        routes = load_routes(self.root / self.config.paths.routes_file)

        self.console.print("Updating version... ", end="")
        version = stamp_config(self.root, self.config, routes)
        self.console.print("DONE")

        self.console.print("Compiling TS... ", end="")
        options = load_compile_options(
            self.root / self.config.paths.babelrc, self.config.compile.ignore
        )
        summary = run_compile(self.compiler, self.root, self.config.compile, options, full)
        self.console.print(f"{summary.describe()} DONE")

        self.console.print("Updating cachebuster and URLs... ", end="")
        written = emit_templates(
            self.root,
            self.config.templates,
            routes,
            replay_root=self.root / self.config.paths.replay_root,
            reader=self.reader,
        )
        self.console.print("DONE")

        logger.debug("build %s finished, %d document(s) written", version, len(written))
        return BuildReport(version=version, compile=summary, written=written)
