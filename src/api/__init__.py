"""
どこで: `api` 入口（高レベル公開 API）。
何を: 設定 `LayoutConfig`・描画領域 `Viewport`・オプションフラグ・描画指示の型を再輸出し、
      `layout(config, viewport)` を提供する。
なぜ: 利用者（描画協調側）が単一名前空間から設定読み込み → レイアウト計算まで完結できるようにするため。

Usage:
    from api import DrawingOptions, LayoutConfig, Viewport, layout

    cfg = LayoutConfig(
        layer_count=4,
        structure_edge_count=6,
        polygon_edge_count=6,
        drawing_options=DrawingOptions.DRAW_POLYGON_EDGES | DrawingOptions.DRAW_STRUCTURE_EDGES,
    )
    result = layout(cfg, Viewport.of_size(800, 600))
    for directive in result.directives():
        ...
"""

from __future__ import annotations

import numpy as np

from engine.core.color import Color
from engine.core.path import CirclePath, PolygonPath
from engine.core.vector import Point, Vector
from engine.layout import (
    ColorOptions,
    DrawingOptions,
    LayerPlan,
    LayoutResult,
    PolygonDirective,
    StructureDirective,
    Viewport,
    compute_layout,
)

from .config import ConfigurationError, LayoutConfig, load_layout_config


def layout(
    config: LayoutConfig,
    viewport: Viewport,
    *,
    rng: np.random.Generator | None = None,
    early_termination: bool | None = None,
) -> LayoutResult:
    """`config` に従って `viewport` 内のレイアウトを計算する。"""
    return compute_layout(config, viewport, rng=rng, early_termination=early_termination)


__all__ = [
    "CirclePath",
    "Color",
    "ColorOptions",
    "ConfigurationError",
    "DrawingOptions",
    "LayerPlan",
    "LayoutConfig",
    "LayoutResult",
    "Point",
    "PolygonDirective",
    "PolygonPath",
    "StructureDirective",
    "Vector",
    "Viewport",
    "layout",
    "load_layout_config",
]

# バージョン情報
__version__ = "2026.10"
