"""共通フィクスチャ。

- 乱数シード固定
- 標準的な描画領域と、正方形の頂点列
"""

from __future__ import annotations

import numpy as np
import pytest

from engine.core.vector import Point
from engine.layout.viewport import Viewport


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def square_viewport() -> Viewport:
    return Viewport.of_size(400, 400)


@pytest.fixture()
def square_corners() -> list[Point]:
    """原点中心・頂点距離 50 の正方形（`corner_points(4, origin, 50)` の並び）。"""
    return [
        Point(50.0, 0.0),
        Point(0.0, -50.0),
        Point(-50.0, 0.0),
        Point(0.0, 50.0),
    ]
