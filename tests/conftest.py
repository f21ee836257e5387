"""Shared test fixtures for psbuild."""

import json
from pathlib import Path

import pytest

from psbuild.compiler import CompileOptions, Compiler
from psbuild.config.models import BuildConfig, RouteTable
from psbuild.errors import CompileError


class RecordingCompiler(Compiler):
    """Fake compiler: records each call and writes a stub output file."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[tuple[str, list[Path], Path, CompileOptions]] = []
        self.fail_on = fail_on

    def _check(self, output: Path) -> None:
        if self.fail_on and output.as_posix().endswith(self.fail_on):
            raise CompileError(f"boom: {output}", returncode=1, stderr="SyntaxError")

    def compile_to_dir(self, source, output, options):
        self.calls.append(("dir", [source], output, options))
        self._check(output)
        output.mkdir(parents=True, exist_ok=True)
        return 2

    def compile_to_file(self, sources, output, options):
        self.calls.append(("files", list(sources), output, options))
        self._check(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(b"// compiled " + output.name.encode())
        return len(sources)

    def outputs(self) -> list[str]:
        return [call[2].name for call in self.calls]


ROUTES = {
    "root": "pokemonshowdown.com",
    "client": "play.pokemonshowdown.com",
    "dex": "dex.pokemonshowdown.com",
    "replays": "replay.pokemonshowdown.com",
    "users": "pokemonshowdown.com/users",
    "psmain": "pokemonshowdown.com",
}

INDEX_TEMPLATE = """\
<!DOCTYPE html>
<link rel="stylesheet" href="/play.pokemonshowdown.com/style/client.css?" />
<script src="/play.pokemonshowdown.com/js/battledata.js?"></script>
<a href="https://pokemonshowdown.com/">home</a>
"""

REPLAY_TEMPLATE = """\
<?php include 'theme/panels.lib.php'; ?>
<script src="js/replays.js?"></script>
<script src="/replay.pokemonshowdown.com/js/utils.js"></script>
"""

EMBED_TEMPLATE = """\
var host = 'play.pokemonshowdown.com';
document.write('<script src="https://play.pokemonshowdown.com/js/battle.js"></script>');
"""


@pytest.fixture
def routes():
    return RouteTable(
        root="root-route",
        client="static",
        dex="dex-route",
        replays="replay-route",
        users="users-route",
        psmain="main-route",
    )


@pytest.fixture
def sample_config():
    return BuildConfig()


@pytest.fixture
def recording_compiler():
    return RecordingCompiler()


def make_project(root: Path, routes: dict | None = None) -> Path:
    """Lay out the minimal set of inputs a full build reads."""
    (root / "config").mkdir(parents=True, exist_ok=True)
    (root / "config" / "routes.json").write_text(json.dumps(routes or ROUTES))
    (root / "config" / "config.js").write_text("var Config = {};\n")
    (root / "package.json").write_text(json.dumps({"name": "client", "version": "0.11.2"}))
    (root / ".babelrc").write_text(json.dumps({"presets": ["@babel/preset-typescript"]}))

    client = root / "play.pokemonshowdown.com"
    replay = root / "replay.pokemonshowdown.com"
    (client / "style").mkdir(parents=True)
    (client / "style" / "client.css").write_text("body { margin: 0; }\n")
    (replay / "js").mkdir(parents=True)
    (replay / "js" / "replays.js").write_text("console.log('replays');\n")
    (client / "js").mkdir(parents=True)
    (client / "js" / "replay-embed.template.js").write_text(EMBED_TEMPLATE)
    (replay / "index.template.php").write_text(REPLAY_TEMPLATE)
    for name in ("index", "preactalpha", "crossprotocol"):
        (client / f"{name}.template.html").write_text(INDEX_TEMPLATE)
    return root


@pytest.fixture
def project(tmp_path):
    return make_project(tmp_path)


@pytest.fixture
def compiler_factory():
    return RecordingCompiler
