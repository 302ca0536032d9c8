"""Configuration loader: DOT export styling read from graphwalk.yml."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from graphwalk.dot import DotStyle
from graphwalk.logger import logger


class GraphwalkConfig(BaseModel):
    dot: DotStyle = Field(default_factory=DotStyle)


def _default_style(reason: str, path: Path) -> GraphwalkConfig:
    logger.warning("DOT style from %s ignored (%s), using the default style", path, reason)
    return GraphwalkConfig()


def load_config(path: Path | None = None) -> GraphwalkConfig:
    """Load the DOT style from a YAML file.

    Any problem with the file (missing, unreadable, malformed YAML, a bad
    attribute name) is logged and the built-in style is used instead.
    """
    if path is None:
        logger.debug("No style file given, using the default DOT style")
        return GraphwalkConfig()

    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _default_style("file not found", path)
    except OSError as e:
        return _default_style(f"cannot read: {e}", path)
    except yaml.YAMLError as e:
        return _default_style(f"malformed YAML: {e}", path)

    if not isinstance(raw, dict):
        return _default_style("top level is not a mapping", path)

    try:
        config = GraphwalkConfig.model_validate(raw)
    except ValidationError as e:
        return _default_style(f"invalid style: {e}", path)

    logger.debug(
        "Loaded DOT style from %s: %d node and %d edge attributes",
        path,
        len(config.dot.node_attributes),
        len(config.dot.edge_attributes),
    )
    return config
