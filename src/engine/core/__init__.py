"""
どこで: `engine.core` サブパッケージ。
何を: 2D の点/ベクトル・線分・パス記述子・色補間と、それらの構築エラー型を提供。
なぜ: レイアウトエンジン（`engine.layout`）と形状生成（`shapes`）が共有する UI 非依存の基盤とするため。
"""

from .color import BLACK, CLEAR, Color, layer_factor, mix, random_color
from .errors import (
    GeometryError,
    InvalidCornerDistanceError,
    InvalidEdgeCountError,
    InvalidSegmentCountError,
    LayoutInvariantError,
    NoPointsError,
    SinglePointError,
    TooFewPointsError,
)
from .line import Line, connect_consecutively
from .path import CirclePath, Path, PolygonPath, closed_path
from .vector import Point, Vector

__all__ = [
    "BLACK",
    "CLEAR",
    "CirclePath",
    "Color",
    "GeometryError",
    "InvalidCornerDistanceError",
    "InvalidEdgeCountError",
    "InvalidSegmentCountError",
    "LayoutInvariantError",
    "Line",
    "NoPointsError",
    "Path",
    "Point",
    "PolygonPath",
    "SinglePointError",
    "TooFewPointsError",
    "Vector",
    "closed_path",
    "connect_consecutively",
    "layer_factor",
    "mix",
    "random_color",
]
