"""
どこで: tests（engine.layout のエラー方針）。
何を: 検証を経ない不正な入力がエンジン内部に届いた場合、入力エラー（ValueError）ではなく
      契約違反 `LayoutInvariantError` として送出され、元のエラーを保持することを確認。
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from engine.core.color import BLACK, CLEAR
from engine.core.errors import (
    InvalidCornerDistanceError,
    InvalidEdgeCountError,
    LayoutInvariantError,
)
from engine.layout import ColorOptions, DrawingOptions, compute_layout
from engine.layout.viewport import Viewport


def _raw_params(**overrides):
    values = dict(
        layer_count=2,
        scale=1.0,
        structure_edge_count=4,
        polygon_edge_count=4,
        drawing_options=DrawingOptions.DRAW_POLYGON_EDGES,
        color_options=ColorOptions.NONE,
        inner_color=CLEAR,
        outer_color=CLEAR,
        default_stroke_color=BLACK,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_invalid_polygon_edge_count_is_fatal() -> None:
    with pytest.raises(LayoutInvariantError) as excinfo:
        compute_layout(_raw_params(polygon_edge_count=2), Viewport.of_size(100, 100))
    assert isinstance(excinfo.value.original, InvalidEdgeCountError)
    assert excinfo.value.__cause__ is excinfo.value.original
    assert not isinstance(excinfo.value, ValueError)


def test_invalid_structure_edge_count_is_fatal_even_at_layer_zero() -> None:
    params = _raw_params(layer_count=1, structure_edge_count=2)
    with pytest.raises(LayoutInvariantError) as excinfo:
        compute_layout(params, Viewport.of_size(100, 100))
    assert isinstance(excinfo.value.original, InvalidEdgeCountError)


def test_negative_corner_distance_is_fatal() -> None:
    with pytest.raises(LayoutInvariantError) as excinfo:
        compute_layout(_raw_params(scale=-1.0), Viewport.of_size(100, 100))
    original = excinfo.value.original
    assert isinstance(original, InvalidCornerDistanceError)
    assert original.distance < 0
