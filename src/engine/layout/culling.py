"""
どこで: `engine.layout.culling`
何を: 多角形中心列の可視マスク（外接正方形と描画領域の交差判定）を Numba で一括計算する。
なぜ: レイヤー数の二乗で増える中心点を Python ループで 1 点ずつ判定しないため。

Notes
-----
- 判定は `Viewport.intersects_square` と同じ（両軸とも開区間の重なり、辺の接触のみは不可視）。
- 可視性を変えない純粋な省略処理であり、見えるはずの多角形を落としてはならない。
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from engine.core.vector import Point

from .viewport import Viewport


@njit(cache=True)
def _visible_mask_njit(
    centers: np.ndarray,
    half_side: float,
    min_x: float,
    min_y: float,
    max_x: float,
    max_y: float,
) -> np.ndarray:
    n = centers.shape[0]
    out = np.empty(n, dtype=np.bool_)
    for i in range(n):
        cx = centers[i, 0]
        cy = centers[i, 1]
        out[i] = (
            cx - half_side < max_x
            and cx + half_side > min_x
            and cy - half_side < max_y
            and cy + half_side > min_y
        )
    return out


def visible_mask(centers: Sequence[Point], half_side: float, viewport: Viewport) -> np.ndarray:
    """各中心の外接正方形（一辺 `2 * half_side`）が `viewport` と重なるかを bool 配列で返す。"""
    if len(centers) == 0:
        return np.zeros(0, dtype=np.bool_)
    xy = np.array([(p.x, p.y) for p in centers], dtype=np.float64)
    return _visible_mask_njit(
        xy,
        float(half_side),
        float(viewport.min_x),
        float(viewport.min_y),
        float(viewport.max_x),
        float(viewport.max_y),
    )


__all__ = ["visible_mask"]
