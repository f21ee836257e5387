from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CLIENT_DIR = "play.pokemonshowdown.com"
REPLAY_DIR = "replay.pokemonshowdown.com"

GRAPHICS_SOURCES = [
    f"{CLIENT_DIR}/src/battle-animations.ts",
    f"{CLIENT_DIR}/src/battle-animations-moves.ts",
]


class RouteTable(BaseModel):
    """Logical domain -> deployment host/path prefix.

    Field order is significant: it is the order the routes are rendered in
    the generated configuration block.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    root: str
    client: str
    dex: str
    replays: str
    users: str
    psmain: str


class PathsConfig(BaseModel):
    routes_file: str = "config/routes.json"
    babelrc: str = ".babelrc"
    config_js: str = "config/config.js"
    config_js_copy: str = f"{CLIENT_DIR}/config/config.js"
    package_json: str = "package.json"
    replay_root: str = REPLAY_DIR


class VersionConfig(BaseModel):
    upstream_ref: str = "origin/master"
    short_length: int = 8
    git_timeout: float = 10.0


class DirPair(BaseModel):
    source: str
    output: str


class FileBundle(BaseModel):
    sources: list[str]
    output: str


class CompileConfig(BaseModel):
    primary: DirPair = Field(
        default_factory=lambda: DirPair(
            source=f"{CLIENT_DIR}/src", output=f"{CLIENT_DIR}/js"
        )
    )
    replays: DirPair = Field(
        default_factory=lambda: DirPair(
            source=f"{REPLAY_DIR}/src", output=f"{REPLAY_DIR}/js"
        )
    )
    battle_data: FileBundle = Field(
        default_factory=lambda: FileBundle(
            sources=[
                f"{CLIENT_DIR}/src/battle-dex.ts",
                f"{CLIENT_DIR}/src/battle-dex-data.ts",
                f"{CLIENT_DIR}/src/battle-log.ts",
                f"{CLIENT_DIR}/src/battle-log-misc.js",
                f"{CLIENT_DIR}/src/battle-text-parser.ts",
                f"{CLIENT_DIR}/src/battle-scene-stub.ts",
                f"{CLIENT_DIR}/src/battle-choices.ts",
                f"{CLIENT_DIR}/src/battle.ts",
            ],
            output=f"{CLIENT_DIR}/js/battledata.js",
        )
    )
    graphics: FileBundle = Field(
        default_factory=lambda: FileBundle(
            sources=list(GRAPHICS_SOURCES),
            output=f"{CLIENT_DIR}/data/graphics.js",
        )
    )
    chat_formatter: DirPair = Field(
        default_factory=lambda: DirPair(
            source="caches/pokemon-showdown/server/chat-formatter.ts",
            output=f"{CLIENT_DIR}/js/server",
        )
    )
    ignore: list[str] = Field(default_factory=lambda: list(GRAPHICS_SOURCES))


class TemplateConfig(BaseModel):
    source: str
    target: str
    mode: Literal["cachebust", "domains"] = "cachebust"


def _default_templates() -> list[TemplateConfig]:
    return [
        TemplateConfig(
            source=f"{CLIENT_DIR}/index.template.html",
            target=f"{CLIENT_DIR}/index.html",
        ),
        TemplateConfig(
            source=f"{CLIENT_DIR}/preactalpha.template.html",
            target=f"{CLIENT_DIR}/preactalpha.html",
        ),
        TemplateConfig(
            source=f"{CLIENT_DIR}/crossprotocol.template.html",
            target=f"{CLIENT_DIR}/crossprotocol.html",
        ),
        TemplateConfig(
            source=f"{REPLAY_DIR}/index.template.php",
            target=f"{REPLAY_DIR}/index.php",
        ),
        TemplateConfig(
            source=f"{CLIENT_DIR}/js/replay-embed.template.js",
            target=f"{CLIENT_DIR}/js/replay-embed.js",
            mode="domains",
        ),
    ]


class BuildConfig(BaseModel):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    version: VersionConfig = Field(default_factory=VersionConfig)
    compile: CompileConfig = Field(default_factory=CompileConfig)
    templates: list[TemplateConfig] = Field(default_factory=_default_templates)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
