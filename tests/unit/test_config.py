"""Tests for config.load_config()."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from graphwalk.config import load_config

DEFAULT_NODE_SHAPE = "record"


class TestDefaults:
    def test_default_config_no_file(self) -> None:
        config = load_config(None)
        assert config.dot.node_attributes["shape"] == DEFAULT_NODE_SHAPE
        assert config.dot.edge_attributes == {"color": "black"}

    def test_default_config_missing_file(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yml")
        assert config.dot.node_attributes["shape"] == DEFAULT_NODE_SHAPE


class TestCustomConfig:
    def test_custom_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.yml"
        cfg.write_text(
            "dot:\n"
            "  node_attributes:\n"
            "    shape: circle\n"
            "    color: red\n"
            "  edge_attributes:\n"
            "    style: dashed\n"
        )
        config = load_config(cfg)
        assert config.dot.node_attributes == {"shape": "circle", "color": "red"}
        assert config.dot.edge_attributes == {"style": "dashed"}

    def test_partial_config_keeps_other_defaults(self, tmp_path: Path) -> None:
        cfg = tmp_path / "partial.yml"
        cfg.write_text("dot:\n  edge_attributes:\n    color: blue\n")
        config = load_config(cfg)
        assert config.dot.edge_attributes == {"color": "blue"}
        assert config.dot.node_attributes["shape"] == DEFAULT_NODE_SHAPE


class TestMalformedYAML:
    def test_malformed_yaml_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("{{{{not yaml!!!!")
        config = load_config(bad)
        assert config.dot.node_attributes["shape"] == DEFAULT_NODE_SHAPE

    def test_non_mapping_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "list.yml"
        bad.write_text("- item1\n- item2\n")
        config = load_config(bad)
        assert config.dot.node_attributes["shape"] == DEFAULT_NODE_SHAPE

    def test_invalid_values_return_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "invalid.yml"
        bad.write_text("dot:\n  node_attributes: not-a-mapping\n")
        config = load_config(bad)
        assert config.dot.node_attributes["shape"] == DEFAULT_NODE_SHAPE

    def test_bad_attribute_name_returns_default_style(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        bad = tmp_path / "badname.yml"
        bad.write_text('dot:\n  edge_attributes:\n    "arrow head": none\n')
        with caplog.at_level(logging.WARNING, logger="graphwalk"):
            config = load_config(bad)
        assert config.dot.edge_attributes == {"color": "black"}
        assert "invalid DOT attribute name 'arrow head'" in caplog.text
        assert "using the default style" in caplog.text


class TestLogging:
    def test_loaded_style_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        cfg = tmp_path / "style.yml"
        cfg.write_text("dot:\n  node_attributes:\n    shape: box\n")
        with caplog.at_level(logging.DEBUG, logger="graphwalk"):
            load_config(cfg)
        assert "1 node and 1 edge attributes" in caplog.text

    def test_missing_file_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="graphwalk"):
            load_config(tmp_path / "nope.yml")
        assert "file not found" in caplog.text
