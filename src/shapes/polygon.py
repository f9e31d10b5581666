"""
どこで: `shapes.polygon`
何を: 正多角形の頂点座標の生成と、正多角形パス（辺数 1 は円）の構築。
なぜ: レイアウトエンジンが「構造多角形の頂点」と「各中心に置く多角形」を同じ規則で得るため。

頂点の並び:
- 角度の刻みは `π - π·(n-2)/n`（= 2π/n）。
- 頂点 index は 1..n で、`center + d·(sin(step·k), cos(step·k))` を順に並べる。
  すなわち最初の頂点は角度 0 ではなく 1 刻み目に置かれ、以後同じ回転方向に進む。
"""

from __future__ import annotations

import math

import numpy as np

from engine.core.errors import InvalidCornerDistanceError, InvalidEdgeCountError
from engine.core.path import CirclePath, Path, closed_path
from engine.core.vector import Point

MIN_EDGE_COUNT = 3


def _corner_offsets(edge_count: int) -> np.ndarray:
    """単位円上の頂点オフセット `(edge_count, 2)` を返す（列は sin, cos）。"""
    step = math.pi - math.pi * (edge_count - 2) / edge_count
    angles = step * np.arange(1, edge_count + 1, dtype=np.float64)
    return np.stack([np.sin(angles), np.cos(angles)], axis=1)


def corner_points(edge_count: int, center: Point, corner_distance: float) -> list[Point]:
    """正多角形の頂点を返す。

    引数:
        edge_count: 辺の数（3 以上）。
        center: 中心。
        corner_distance: 中心から各頂点までの距離（正）。

    返り値:
        `edge_count` 個の頂点（モジュール docstring の回転順）。

    例外:
        InvalidEdgeCountError: `edge_count <= 2`。
        InvalidCornerDistanceError: `corner_distance <= 0`。
    """
    if edge_count < MIN_EDGE_COUNT:
        raise InvalidEdgeCountError(edge_count)
    if not corner_distance > 0:
        raise InvalidCornerDistanceError(corner_distance)

    xy = _corner_offsets(int(edge_count)) * float(corner_distance)
    xy[:, 0] += center.x
    xy[:, 1] += center.y
    return [Point(float(x), float(y)) for x, y in xy]


def regular_polygon_path(edge_count: int, center: Point, radius: float) -> Path:
    """正多角形のパスを返す。`edge_count == 1` のときは半径 `radius` の円。

    それ以外は `corner_points` → `closed_path` に委譲し、そのエラーをそのまま伝搬する。
    """
    if edge_count == 1:
        return CirclePath(center, float(radius))
    return closed_path(corner_points(edge_count, center, radius))


__all__ = ["MIN_EDGE_COUNT", "corner_points", "regular_polygon_path"]
