"""
どこで: `shapes` パッケージ。
何を: 正多角形の頂点生成とパス構築（`shapes.polygon`）を再輸出する。
"""

from .polygon import MIN_EDGE_COUNT, corner_points, regular_polygon_path

__all__ = [
    "MIN_EDGE_COUNT",
    "corner_points",
    "regular_polygon_path",
]
