"""Chooses which compile tasks run, and with which options."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path

from psbuild.compiler.base import Compiler
from psbuild.compiler.models import CompileOptions, CompileSummary, CompileTask
from psbuild.config.models import CompileConfig
from psbuild.errors import ConfigError

logger = logging.getLogger(__name__)


def load_compile_options(path: Path, ignore: list[str]) -> CompileOptions:
    """Build the base options from a .babelrc file.

    Ancestor config discovery is forced off and incremental mode on; *ignore*
    becomes the default ignore set.
    """
    try:
        babel = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Compiler config not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read compiler config {path}: {e}") from e
    if not isinstance(babel, dict):
        raise ConfigError(f"Compiler config {path} must be a JSON object")

    return CompileOptions(
        babel=babel,
        ignore=list(ignore),
        incremental=True,
        babelrc=False,
    )


def plan_tasks(
    config: CompileConfig, options: CompileOptions, root: Path, full: bool
) -> tuple[list[CompileTask], CompileOptions]:
    """Return the ordered tasks for this run and the options to run them with."""
    drop_ignore = full
    if not full and not (root / config.graphics.output).exists():
        logger.debug("%s is missing, compiling graphics", config.graphics.output)
        drop_ignore = True
    if drop_ignore:
        options = options.without_ignore()

    tasks = [
        CompileTask(
            name="client",
            kind="dir",
            sources=[config.primary.source],
            output=config.primary.output,
        ),
        CompileTask(
            name="replays",
            kind="dir",
            sources=[config.replays.source],
            output=config.replays.output,
        ),
        CompileTask(
            name="battledata",
            kind="files",
            sources=list(config.battle_data.sources),
            output=config.battle_data.output,
        ),
    ]
    if drop_ignore:
        tasks.append(
            CompileTask(
                name="graphics",
                kind="files",
                sources=list(config.graphics.sources),
                output=config.graphics.output,
            )
        )
    if full:
        tasks.append(
            CompileTask(
                name="chat-formatter",
                kind="dir",
                sources=[config.chat_formatter.source],
                output=config.chat_formatter.output,
            )
        )
    return tasks, options


def execute_task(
    compiler: Compiler, task: CompileTask, root: Path, options: CompileOptions
) -> int:
    if task.kind == "dir":
        return compiler.compile_to_dir(root / task.sources[0], root / task.output, options)
    return compiler.compile_to_file(
        [root / s for s in task.sources], root / task.output, options
    )


def run_compile(
    compiler: Compiler,
    root: Path,
    config: CompileConfig,
    options: CompileOptions,
    full: bool = False,
) -> CompileSummary:
    """Run every planned task in order. Any CompileError propagates."""
    started = time.perf_counter()
    tasks, options = plan_tasks(config, options, root, full)

    summary = CompileSummary()
    for task in tasks:
        count = execute_task(compiler, task, root, options)
        logger.debug("task %s compiled %d file(s)", task.name, count)
        summary.files += count
        summary.tasks.append(task.name)

    summary.seconds = round(time.perf_counter() - started, 3)
    logger.debug("compiled %d file(s) in %.3fs", summary.files, summary.seconds)
    return summary
