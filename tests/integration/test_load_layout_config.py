from __future__ import annotations

from pathlib import Path

import pytest

from api.config import ConfigurationError, LayoutConfig, load_layout_config
from engine.layout.options import DrawingOptions
from util.utils import load_config


@pytest.mark.integration
def test_repository_default_config_is_valid() -> None:
    cfg = load_layout_config()
    assert isinstance(cfg, LayoutConfig)
    assert cfg.layer_count >= 1


@pytest.mark.integration
def test_root_config_overrides_default(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "layout:\n  layer_count: 2\n  structure_edge_count: 5\nother: 1\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text(
        "layout:\n  layer_count: 7\n  drawing_options: [draw_structure_edges]\n",
        encoding="utf-8",
    )
    raw = load_config(tmp_path)
    assert raw["other"] == 1
    cfg = load_layout_config(project_root=tmp_path)
    # トップレベルのみ上書き（layout セクションは丸ごと置き換わる）
    assert cfg.layer_count == 7
    assert cfg.structure_edge_count == 3
    assert cfg.drawing_options == DrawingOptions.DRAW_STRUCTURE_EDGES


@pytest.mark.integration
def test_missing_or_broken_files_fall_back(tmp_path: Path) -> None:
    assert load_layout_config(project_root=tmp_path) == LayoutConfig()
    (tmp_path / "config.yaml").write_text("layout: [unclosed\n", encoding="utf-8")
    assert load_config(tmp_path) == {}


@pytest.mark.integration
def test_non_mapping_section_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("layout: 3\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_layout_config(project_root=tmp_path)
