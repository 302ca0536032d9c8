"""Integration tests for the graphwalk CLI."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from graphwalk.cli import app

runner = CliRunner()

CHAIN = ["--edge", "1:2", "--edge", "2:3", "--edge", "3:4"]
WEIGHTED = [
    "--edge", "1:2:2", "--edge", "1:3:6", "--edge", "2:3:7", "--edge", "2:4:3",
    "--edge", "3:4:4", "--edge", "4:5:9", "--edge", "5:6:11", "--edge", "5:7:4",
    "--edge", "6:7:6", "--edge", "6:8:5", "--edge", "7:8:8", "--edge", "10:11:1",
]


def _first_column(output: str) -> list[str]:
    return [line.split("\t")[0] for line in output.splitlines()]


class TestWalkCommands:
    def test_bfs(self) -> None:
        result = runner.invoke(
            app,
            ["bfs", "--source", "1", "--edge", "1:2", "--edge", "1:3", "--edge", "2:4",
             "--edge", "3:4", "--edge", "4:5"],
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1\t0", "2\t1", "3\t1", "4\t2", "5\t3"]

    def test_dfs_post_order(self) -> None:
        result = runner.invoke(app, ["dfs", "--source", "1", "--order", "post", *CHAIN])
        assert result.exit_code == 0
        assert _first_column(result.output) == ["4", "3", "2", "1"]

    def test_unreachable(self) -> None:
        result = runner.invoke(
            app, ["unreachable", "--source", "1", *CHAIN, "--edge", "10:11"]
        )
        assert result.exit_code == 0
        assert sorted(result.output.split()) == ["10", "11"]

    def test_shortest_path(self) -> None:
        result = runner.invoke(
            app, ["shortest-path", "--source", "1", "--dest", "8", *WEIGHTED]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "1\t0", "2\t2", "4\t5", "5\t14", "7\t18", "8\t26",
        ]

    def test_toposort(self) -> None:
        result = runner.invoke(app, ["toposort", *CHAIN])
        assert result.exit_code == 0
        assert result.output.split() == ["4", "3", "2", "1"]


class TestErrors:
    def test_missing_source(self) -> None:
        result = runner.invoke(app, ["bfs", "--source", "42", *CHAIN])
        assert result.exit_code == 2
        assert "not found" in result.output

    def test_no_path(self) -> None:
        result = runner.invoke(
            app, ["shortest-path", "--source", "1", "--dest", "10", *WEIGHTED]
        )
        assert result.exit_code == 2
        assert "No path exists" in result.output

    def test_cycle(self) -> None:
        result = runner.invoke(app, ["toposort", *CHAIN, "--edge", "4:1"])
        assert result.exit_code == 2
        assert "Cycle detected" in result.output

    def test_malformed_edge(self) -> None:
        result = runner.invoke(app, ["bfs", "--source", "1", "--edge", "1-2"])
        assert result.exit_code == 2

    def test_negative_weight(self) -> None:
        result = runner.invoke(app, ["bfs", "--source", "1", "--edge", "1:2:-3"])
        assert result.exit_code == 2


class TestDot:
    def test_stdout(self) -> None:
        result = runner.invoke(app, ["dot", "--directed", *CHAIN])
        assert result.exit_code == 0
        assert result.output.startswith("strict digraph {")
        assert "\t1 -> 2 []" in result.output

    def test_out_file_with_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "graphwalk.yml"
        cfg.write_text("dot:\n  node_attributes:\n    shape: circle\n")
        out = tmp_path / "nested" / "graph.dot"

        result = runner.invoke(
            app, ["dot", *CHAIN, "--config", str(cfg), "--out", str(out)]
        )
        assert result.exit_code == 0
        assert "Wrote graph (DOT)" in result.output

        text = out.read_text(encoding="utf-8")
        assert text.startswith("strict graph {")
        assert '\tnode [shape="circle"]' in text
        assert "\t1 -- 2 []" in text
