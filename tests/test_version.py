"""Tests for psbuild.version — version string and generated config block."""

from unittest.mock import patch

from psbuild.config import BuildConfig, load_routes
from psbuild.vcs import Revision
from psbuild.version import (
    BEGIN_MARKER,
    END_MARKER,
    build_version,
    render_config_block,
    splice_config_block,
    stamp_config,
)

HEAD = "abcdef1234567890abcdef1234567890abcdef12"
BASE = "0123456789abcdef0123456789abcdef01234567"


class TestBuildVersion:
    def test_no_revision(self):
        assert build_version("0.11.2", None) == "0.11.2"

    def test_head_equals_merge_base(self):
        rev = Revision(head=HEAD, merge_base=HEAD)
        assert build_version("0.11.2", rev) == "0.11.2 (abcdef12)"

    def test_head_differs_from_merge_base(self):
        rev = Revision(head=HEAD, merge_base=BASE)
        assert build_version("0.11.2", rev) == "0.11.2 (abcdef12/01234567)"

    def test_commits_sharing_short_prefix_still_differ(self):
        rev = Revision(head="abcdef12" + "0" * 32, merge_base="abcdef12" + "1" * 32)
        assert build_version("0.11.2", rev) == "0.11.2 (abcdef12/abcdef12)"


class TestRenderConfigBlock:
    def test_shape(self, routes):
        block = render_config_block("1.0 (abc)", routes)
        assert block == (
            f"{BEGIN_MARKER}\n"
            'Config.version = "1.0 (abc)";\n'
            "\n"
            "Config.routes = {\n"
            "\troot: 'root-route',\n"
            "\tclient: 'static',\n"
            "\tdex: 'dex-route',\n"
            "\treplays: 'replay-route',\n"
            "\tusers: 'users-route',\n"
            "\tpsmain: 'main-route',\n"
            "};\n"
            f"{END_MARKER}"
        )

    def test_version_is_escaped(self, routes):
        block = render_config_block('1.0 "beta"', routes)
        assert 'Config.version = "1.0 \\"beta\\"";' in block


class TestSpliceConfigBlock:
    def test_appends_when_absent(self, routes):
        block = render_config_block("1.0", routes)
        assert splice_config_block("var Config = {};\n", block) == "var Config = {};\n" + block

    def test_replaces_existing_block(self, routes):
        first = splice_config_block("var Config = {};\n", render_config_block("1.0", routes))
        text = first + "\n// trailing\n"
        second = splice_config_block(text, render_config_block("2.0", routes))
        assert second.count(BEGIN_MARKER) == 1
        assert second.count(END_MARKER) == 1
        assert '"2.0"' in second
        assert '"1.0"' not in second
        assert second.startswith("var Config = {};\n")
        assert second.endswith("\n// trailing\n")

    def test_two_existing_blocks_collapse_to_one(self, routes):
        old = render_config_block("1.0", routes)
        text = f"var Config = {{}};\n{old}\n{old}\n"
        result = splice_config_block(text, render_config_block("2.0", routes))
        assert result.count(BEGIN_MARKER) == 1
        assert result.count(END_MARKER) == 1
        assert '"1.0"' not in result
        assert result.endswith(END_MARKER + "\n")

    def test_backslashes_in_block_survive(self, routes):
        text = splice_config_block("", render_config_block("1.0", routes))
        block = render_config_block("1.0\\n", routes)
        assert splice_config_block(text, block) == block


class TestStampConfig:
    def test_writes_both_copies(self, project):
        config = BuildConfig()
        routes = load_routes(project / config.paths.routes_file)
        with patch(
            "psbuild.version.stamper.lookup_revision",
            return_value=Revision(head=HEAD, merge_base=BASE),
        ):
            version = stamp_config(project, config, routes)

        assert version == "0.11.2 (abcdef12/01234567)"
        primary = (project / config.paths.config_js).read_bytes()
        copy = (project / config.paths.config_js_copy).read_bytes()
        assert primary == copy
        assert primary.startswith(b"var Config = {};\n")
        assert b"client: 'play.pokemonshowdown.com'," in primary

    def test_rerun_does_not_duplicate(self, project, routes):
        config = BuildConfig()
        with patch("psbuild.version.stamper.lookup_revision", return_value=None):
            stamp_config(project, config, routes)
            stamp_config(project, config, routes)
        text = (project / config.paths.config_js).read_text()
        assert text.count(BEGIN_MARKER) == 1
        assert text.count(END_MARKER) == 1
        assert 'Config.version = "0.11.2";' in text

    def test_missing_config_js_is_created(self, project, routes):
        config = BuildConfig()
        (project / config.paths.config_js).unlink()
        with patch("psbuild.version.stamper.lookup_revision", return_value=None):
            stamp_config(project, config, routes)
        assert (project / config.paths.config_js).read_text().startswith(BEGIN_MARKER)
