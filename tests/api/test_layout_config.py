"""
どこで: tests（api.config）。
何を: 設定の検証（不正値は ConfigurationError）、辞書からの構築、丸め（clamp）を確認。
なぜ: エンジンは検証済みの入力を前提とするため、不正な設定は必ずここで止まる必要がある。
"""

from __future__ import annotations

import pytest

from api import ConfigurationError, LayoutConfig, Viewport, layout
from engine.core.color import BLACK, CLEAR, Color
from engine.layout.options import ColorOptions, DrawingOptions


def test_defaults() -> None:
    cfg = LayoutConfig()
    assert cfg.layer_count == 1
    assert cfg.scale == 1.0
    assert cfg.polygon_edge_count == 1
    assert cfg.drawing_options == DrawingOptions.DRAW_POLYGON_EDGES
    assert cfg.color_options == ColorOptions.NONE
    assert (cfg.inner_color, cfg.outer_color, cfg.default_stroke_color) == (CLEAR, CLEAR, BLACK)


@pytest.mark.parametrize(
    "field, value",
    [
        ("layer_count", 0),
        ("scale", 0.0),
        ("scale", -2.0),
        ("structure_edge_count", 2),
        ("polygon_edge_count", 2),
        ("polygon_edge_count", 0),
    ],
)
def test_invalid_values_are_rejected(field: str, value: object) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        LayoutConfig(**{field: value})
    assert excinfo.value.field == field
    assert excinfo.value.value == value
    assert isinstance(excinfo.value, ValueError)


def test_from_mapping_parses_options_and_colors() -> None:
    cfg = LayoutConfig.from_mapping(
        {
            "layer_count": "4",
            "scale": 0.5,
            "structure_edge_count": 6,
            "polygon_edge_count": 1,
            "drawing_options": ["draw_structure_edges", "reverse_drawing_order"],
            "color_options": "color_in_polygons",
            "inner_color": "#FF0000",
            "outer_color": [0, 0, 255, 255],
        }
    )
    assert cfg.layer_count == 4
    assert cfg.scale == 0.5
    assert cfg.drawing_options == (
        DrawingOptions.DRAW_STRUCTURE_EDGES | DrawingOptions.REVERSE_DRAWING_ORDER
    )
    assert cfg.color_options == ColorOptions.COLOR_IN_POLYGONS
    assert cfg.inner_color == Color(1.0, 0.0, 0.0, 1.0)
    assert cfg.outer_color == Color(0.0, 0.0, 1.0, 1.0)


def test_from_mapping_empty_options() -> None:
    cfg = LayoutConfig.from_mapping({"drawing_options": None, "color_options": []})
    assert cfg.drawing_options == DrawingOptions.NONE
    assert cfg.color_options == ColorOptions.NONE


@pytest.mark.parametrize(
    "data, field",
    [
        ({"layers": 3}, "layers"),
        ({"layer_count": "many"}, "layer_count"),
        ({"layer_count": True}, "layer_count"),
        ({"scale": "big"}, "scale"),
        ({"drawing_options": ["sparkles"]}, "drawing_options"),
        ({"inner_color": "#12"}, "inner_color"),
        ({"structure_edge_count": 1}, "structure_edge_count"),
    ],
)
def test_from_mapping_errors_name_the_field(data: dict, field: str) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        LayoutConfig.from_mapping(data)
    assert excinfo.value.field == field


def test_from_mapping_clamps_counts() -> None:
    cfg = LayoutConfig.from_mapping(
        {"layer_count": -3, "structure_edge_count": 1, "polygon_edge_count": 2}, clamp=True
    )
    assert (cfg.layer_count, cfg.structure_edge_count, cfg.polygon_edge_count) == (1, 3, 3)
    circle = LayoutConfig.from_mapping({"polygon_edge_count": 0}, clamp=True)
    assert circle.polygon_edge_count == 1


def test_layout_facade() -> None:
    cfg = LayoutConfig(layer_count=2, structure_edge_count=5, polygon_edge_count=3)
    result = layout(cfg, Viewport.of_size(300, 200))
    assert [len(plan.polygons) for plan in result.layers] == [5, 1]
