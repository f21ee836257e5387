"""Pydantic models for compile tasks and options."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class CompileOptions(BaseModel):
    """Options shared by every task in one compile run."""

    babel: dict[str, Any] = Field(
        default_factory=dict, description="Base transpiler config read from .babelrc"
    )
    ignore: list[str] | None = Field(
        default=None, description="Root-relative source paths to skip"
    )
    incremental: bool = True
    babelrc: bool = False

    def without_ignore(self) -> CompileOptions:
        return self.model_copy(update={"ignore": None})

    def is_ignored(self, rel_path: str) -> bool:
        return bool(self.ignore) and rel_path in self.ignore


class CompileTask(BaseModel):
    """One compiler invocation.

    ``dir`` tasks map ``sources[0]`` (a directory, or a single file) into the
    ``output`` directory. ``files`` tasks merge ``sources`` in order into the
    single ``output`` file.
    """

    name: str
    kind: Literal["dir", "files"]
    sources: list[str]
    output: str


class CompileSummary(BaseModel):
    files: int = 0
    seconds: float = 0.0
    tasks: list[str] = Field(default_factory=list)

    def describe(self) -> str:
        noun = "file" if self.files == 1 else "files"
        return f"({self.files} {noun} in {self.seconds:.3f}s)"
