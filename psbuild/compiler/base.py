"""Abstract compiler interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from psbuild.compiler.models import CompileOptions


class Compiler(ABC):
    """The transpiler the orchestrator delegates to.

    Both methods return the number of source files actually compiled and
    raise ``CompileError`` on failure.
    """

    @abstractmethod
    def compile_to_dir(self, source: Path, output: Path, options: CompileOptions) -> int:
        """Compile a source tree (or one file) into an output directory."""
        ...

    @abstractmethod
    def compile_to_file(
        self, sources: list[Path], output: Path, options: CompileOptions
    ) -> int:
        """Compile an ordered list of files into one combined output file."""
        ...
