"""
どこで: `engine.layout.viewport`
何を: 描画領域の矩形 `Viewport`（中心・短辺・正方形との交差判定）。
なぜ: 多角形サイズの基準（短辺）と、画面外の多角形を省く可視判定の両方に同じ矩形を使うため。
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.core.vector import Point


@dataclass(frozen=True)
class Viewport:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if not (self.width > 0 and self.height > 0):
            raise ValueError(f"viewport must have a positive size: {self.width}x{self.height}")

    @classmethod
    def of_size(cls, width: float, height: float) -> "Viewport":
        return cls(0.0, 0.0, float(width), float(height))

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def shorter_side(self) -> float:
        return min(self.width, self.height)

    def intersects_square(self, center: Point, half_side: float) -> bool:
        """`center` を中心とする一辺 `2 * half_side` の正方形と重なるか（辺の接触のみは False）。"""
        return (
            center.x - half_side < self.max_x
            and center.x + half_side > self.min_x
            and center.y - half_side < self.max_y
            and center.y + half_side > self.min_y
        )


__all__ = ["Viewport"]
