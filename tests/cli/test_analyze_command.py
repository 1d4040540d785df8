"""Tests for the sharingan CLI."""

import json

import pytest
from typer.testing import CliRunner

from sharingan import __version__
from sharingan.cli import app
from sharingan.scanning.treesitter_parser import TREE_SITTER_AVAILABLE

runner = CliRunner()

requires_grammar = pytest.mark.skipif(
    not TREE_SITTER_AVAILABLE, reason="tree-sitter-go not installed"
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of the run."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"sharingan {__version__}" in result.output


class TestAnalyzeErrors:
    def test_unknown_format(self, order_repo):
        result = runner.invoke(app, ["analyze", str(order_repo), "--format", "svg"])
        assert result.exit_code == 1
        assert "unknown format" in result.output

    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "repository path does not exist" in result.output

    def test_no_components(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, ["analyze", str(empty)])
        assert result.exit_code == 1
        assert "no architectural components found" in result.output
        assert not (empty / "architecture.html").exists()

    def test_invalid_config_file(self, order_repo, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("max_files = 0\n")
        result = runner.invoke(app, ["analyze", str(order_repo), "--config", str(bad)])
        assert result.exit_code == 1
        assert "Error:" in result.output


@requires_grammar
class TestAnalyzeOutputs:
    """Each output format writes its file and prints a summary."""

    def test_default_html(self, order_repo):
        result = runner.invoke(app, ["analyze", str(order_repo)])
        assert result.exit_code == 0, result.output
        assert "Architecture report generated!" in result.output
        assert "Theme: dark" in result.output
        assert "Services (Business Logic): 1" in result.output
        page = (order_repo / "architecture.html").read_text(encoding="utf-8")
        assert "<title>Go Architecture Report</title>" in page

    def test_html_options(self, order_repo, tmp_path):
        out = tmp_path / "report.html"
        result = runner.invoke(
            app,
            [
                "analyze",
                str(order_repo),
                "-o",
                str(out),
                "--title",
                "Orders",
                "--description",
                "Order pipeline",
                "--theme",
                "light",
                "--widgets",
                "stats_cards,components_table",
            ],
        )
        assert result.exit_code == 0, result.output
        page = out.read_text(encoding="utf-8")
        assert "<title>Orders</title>" in page
        assert "Order pipeline" in page
        assert 'id="architecture-graph"' not in page
        assert "Theme: light" in result.output

    def test_dot(self, order_repo, tmp_path):
        out = tmp_path / "arch.dot"
        result = runner.invoke(app, ["analyze", str(order_repo), "-f", "dot", "-o", str(out)])
        assert result.exit_code == 0, result.output
        dot = out.read_text()
        assert dot.startswith("digraph Architecture {")
        assert '"OrderService" -> "OrderRepository"' in dot
        assert "Theme:" not in result.output

    def test_json_default_path(self, order_repo):
        result = runner.invoke(app, ["analyze", str(order_repo), "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads((order_repo / "architecture.json").read_text())
        assert [c["name"] for c in data["components"]] == ["OrderRepository", "OrderService"]

    def test_rich(self, order_repo):
        result = runner.invoke(app, ["analyze", str(order_repo), "--format", "rich"])
        assert result.exit_code == 0, result.output
        assert "Architecture Components" in result.output
        assert not (order_repo / "architecture.html").exists()

    def test_config_file_applies(self, order_repo, tmp_path):
        cfg = tmp_path / "sharingan.toml"
        cfg.write_text('[sharingan]\nexcluded_dirs = ["service"]\n')
        out = tmp_path / "arch.json"
        result = runner.invoke(
            app, ["analyze", str(order_repo), "-f", "json", "-o", str(out), "-c", str(cfg)]
        )
        assert result.exit_code == 0, result.output
        names = [c["name"] for c in json.loads(out.read_text())["components"]]
        assert names == ["OrderRepository"]


class TestErrorOutputIsLiteral:
    """User-supplied text is printed verbatim, never read as markup."""

    def test_format_with_markup_characters(self, order_repo):
        result = runner.invoke(app, ["analyze", str(order_repo), "--format", "[/x]"])
        assert result.exit_code == 1
        assert "unknown format '[/x]'" in result.output

    def test_missing_path_with_markup_characters(self, tmp_path):
        missing = tmp_path / "[bold]" / "[/x]"
        result = runner.invoke(app, ["analyze", str(missing)])
        assert result.exit_code == 1
        assert "repository path does not exist" in result.output
        assert "[/x]" in result.output.replace("\n", "")

    def test_config_error_with_markup_characters(self, order_repo, tmp_path):
        bad = tmp_path / "[red]bad.toml"
        bad.write_text("max_files = [\n")
        result = runner.invoke(app, ["analyze", str(order_repo), "--config", str(bad)])
        assert result.exit_code == 1
        assert "[red]bad.toml" in result.output.replace("\n", "")
