"""Compilation orchestration."""

from psbuild.compiler.babel import BabelCompiler
from psbuild.compiler.base import Compiler
from psbuild.compiler.models import CompileOptions, CompileSummary, CompileTask
from psbuild.compiler.orchestrator import (
    execute_task,
    load_compile_options,
    plan_tasks,
    run_compile,
)

__all__ = [
    "BabelCompiler",
    "CompileOptions",
    "CompileSummary",
    "CompileTask",
    "Compiler",
    "execute_task",
    "load_compile_options",
    "plan_tasks",
    "run_compile",
]
