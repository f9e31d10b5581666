"""テスト用の幾何アサーション。"""

from __future__ import annotations

from engine.core.vector import Point


def assert_point_close(actual: Point, expected: Point, tol: float = 1e-9) -> None:
    assert abs(actual.x - expected.x) <= tol, (actual, expected)
    assert abs(actual.y - expected.y) <= tol, (actual, expected)
