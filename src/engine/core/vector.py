"""
どこで: `engine.core.vector`
何を: 2D の点 `Point` と方向ベクトル `Vector`（不変の値型）と、その最小限の演算。
なぜ: 線分分割・頂点生成・中心点列の組み立てを、座標の手計算ではなく型付きの演算で書くため。

演算:
- `Point + Vector -> Point`
- `Point - Point -> Vector`
- `float * Vector -> Vector`（`Vector * float` も可）
- `Vector + Vector -> Vector`
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from common.types import Vec2


@dataclass(frozen=True)
class Vector:
    dx: float
    dy: float

    def __add__(self, other: object) -> "Vector":
        if isinstance(other, Vector):
            return Vector(self.dx + other.dx, self.dy + other.dy)
        return NotImplemented

    def __mul__(self, factor: object) -> "Vector":
        if isinstance(factor, (int, float)):
            return Vector(factor * self.dx, factor * self.dy)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return Vector(-self.dx, -self.dy)

    @property
    def length(self) -> float:
        return math.hypot(self.dx, self.dy)

    def as_tuple(self) -> Vec2:
        return (self.dx, self.dy)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: object) -> "Point":
        if isinstance(other, Vector):
            return Point(self.x + other.dx, self.y + other.dy)
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return NotImplemented

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Vec2:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


__all__ = ["Point", "Vector", "ORIGIN"]
