"""
どこで: `engine.core.path`
何を: 描画協調側（外部のレンダラ）へ渡すパス記述子 `PolygonPath` / `CirclePath` と、閉路の構築。
なぜ: エンジン自身はストロークや塗りを行わず、「どの点を結ぶか/どの円弧か」だけを返すため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from .errors import NoPointsError, TooFewPointsError
from .vector import Point


@dataclass(frozen=True)
class PolygonPath:
    """先頭点から開始し、残りの点を順に辿って先頭へ戻る閉路。"""

    vertices: tuple[Point, ...]

    @property
    def start(self) -> Point:
        return self.vertices[0]

    def closed_ring(self) -> tuple[Point, ...]:
        """描画順の頂点列（末尾に先頭点を複製して閉ループ化）。"""
        return self.vertices + self.vertices[:1]

    def contains_vertex(self, point: Point) -> bool:
        return point in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True)
class CirclePath:
    """中心と半径で表す円（全周の円弧）。"""

    center: Point
    radius: float


Path = Union[PolygonPath, CirclePath]


def closed_path(points: Sequence[Point]) -> PolygonPath:
    """点列から閉路を作る。

    例外:
        NoPointsError: 点列が空。
        TooFewPointsError: 1 点または 2 点（閉路には 3 頂点以上が必要）。
    """
    pts = tuple(points)
    if not pts:
        raise NoPointsError()
    if len(pts) < 3:
        raise TooFewPointsError(pts)
    return PolygonPath(pts)


__all__ = ["PolygonPath", "CirclePath", "Path", "closed_path"]
