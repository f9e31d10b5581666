"""
どこで: `engine.layout` サブパッケージ。
何を: 同心レイヤー状に正多角形を配置するレイアウトエンジンと、その入出力型。
"""

from .engine import compute_layout, layer_order, polygon_centers, polygon_corner_distance
from .options import ColorOptions, DrawingOptions
from .types import (
    Directive,
    LayerPlan,
    LayoutParameters,
    LayoutResult,
    PolygonDirective,
    StructureDirective,
)
from .viewport import Viewport

__all__ = [
    "ColorOptions",
    "Directive",
    "DrawingOptions",
    "LayerPlan",
    "LayoutParameters",
    "LayoutResult",
    "PolygonDirective",
    "StructureDirective",
    "Viewport",
    "compute_layout",
    "layer_order",
    "polygon_centers",
    "polygon_corner_distance",
]
