"""Compiler adapter that shells out to the Babel CLI."""

from __future__ import annotations

import json
import logging
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from psbuild.compiler.base import Compiler
from psbuild.compiler.models import CompileOptions
from psbuild.errors import CompileError

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = {".ts", ".tsx", ".js", ".jsx"}


def _is_fresh(output: Path, sources: list[Path]) -> bool:
    """True if *output* exists and is newer than every source."""
    try:
        built = output.stat().st_mtime
        return all(src.stat().st_mtime <= built for src in sources)
    except OSError:
        return False


def _collect_sources(source: Path, output: Path) -> list[tuple[Path, Path]]:
    if source.is_file():
        return [(source, output / f"{source.stem}.js")]
    if not source.is_dir():
        raise CompileError(f"Source tree does not exist: {source}")
    pairs = []
    for p in sorted(source.rglob("*")):
        if not p.is_file() or p.suffix not in SOURCE_SUFFIXES or p.name.endswith(".d.ts"):
            continue
        pairs.append((p, (output / p.relative_to(source)).with_suffix(".js")))
    return pairs


class BabelCompiler(Compiler):
    """Runs ``npx babel`` once per output file.

    Automatic ``.babelrc`` discovery is disabled unless ``options.babelrc``
    is set; the base config from the options is passed via ``--config-file``.
    """

    def __init__(
        self,
        root: Path,
        command: list[str] | None = None,
        timeout: float = 600.0,
    ) -> None:
        self.root = root
        self.command = command or ["npx", "babel"]
        self.timeout = timeout

    def _rel(self, path: Path) -> str:
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    def compile_to_dir(self, source: Path, output: Path, options: CompileOptions) -> int:
        compiled = 0
        with self._config_file(options) as config_file:
            for src, dst in _collect_sources(source, output):
                if options.is_ignored(self._rel(src)):
                    logger.debug("ignored %s", src)
                    continue
                if options.incremental and _is_fresh(dst, [src]):
                    continue
                self._run([str(src), "--out-file", str(dst)], dst, options, config_file)
                compiled += 1
        logger.debug("%s -> %s: %d compiled", source, output, compiled)
        return compiled

    def compile_to_file(
        self, sources: list[Path], output: Path, options: CompileOptions
    ) -> int:
        active = [s for s in sources if not options.is_ignored(self._rel(s))]
        if not active:
            return 0
        if options.incremental and _is_fresh(output, active):
            logger.debug("%s is up to date", output)
            return 0
        with self._config_file(options) as config_file:
            self._run(
                [*(str(s) for s in active), "--out-file", str(output)],
                output,
                options,
                config_file,
            )
        return len(active)

    @contextmanager
    def _config_file(self, options: CompileOptions) -> Iterator[Path]:
        with tempfile.TemporaryDirectory(prefix="psbuild-") as tmp:
            path = Path(tmp) / "babel.config.json"
            path.write_text(json.dumps(options.babel), encoding="utf-8")
            yield path

    def _run(
        self, args: list[str], output: Path, options: CompileOptions, config_file: Path
    ) -> None:
        output.parent.mkdir(parents=True, exist_ok=True)
        cmd = [*self.command, *args, "--config-file", str(config_file)]
        if not options.babelrc:
            cmd.append("--no-babelrc")
        try:
            result = subprocess.run(
                cmd,
                cwd=self.root,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise CompileError(f"Compiler not found: {self.command[0]}", command=cmd) from e
        except subprocess.TimeoutExpired as e:
            raise CompileError(
                f"Compiler timed out after {self.timeout}s", command=cmd
            ) from e

        if result.returncode != 0:
            raise CompileError(
                f"Compilation of {output} failed (exit {result.returncode})",
                command=cmd,
                returncode=result.returncode,
                stderr=result.stderr[-2000:],
            )
