"""
どこで: `engine.core.line`
何を: 始点とベクトルで表す有向線分 `Line` と、点列の連結・線分の等分割。
なぜ: 構造多角形の辺を結び、各辺を等分割した内分点を多角形の中心点として使うため。

Notes
-----
- `connect_consecutively` は 2 点なら 1 本（閉じない）、3 点以上なら入力順の閉路を返す。
- `Line.segment(n)` は両端点を含まない `n-1` 個の内分点を始点側から返す。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import InvalidSegmentCountError, NoPointsError, SinglePointError
from .vector import Point, Vector


@dataclass(frozen=True)
class Line:
    """`start` から `vector` だけ進む有向線分。等価性は `(start, vector)` の組で判定する。"""

    start: Point
    vector: Vector

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "Line":
        return cls(start, end - start)

    @property
    def end(self) -> Point:
        return self.start + self.vector

    @property
    def length(self) -> float:
        return self.vector.length

    def segment(self, number_of_segments: int) -> list[Point]:
        """線分を `number_of_segments` 等分する内分点を返す。

        Parameters
        ----------
        number_of_segments : int
            分割数。1 なら内分点は無く空リスト。

        Returns
        -------
        list[Point]
            `start + (k / n) * vector`（k = 1..n-1）を始点側から順に並べたもの。

        Raises
        ------
        InvalidSegmentCountError
            `number_of_segments <= 0` の場合。
        """
        n = int(number_of_segments)
        if n <= 0:
            raise InvalidSegmentCountError(number_of_segments)
        if n == 1:
            return []
        return [self.start + (k / n) * self.vector for k in range(1, n)]


def connect_consecutively(points: Sequence[Point]) -> list[Line]:
    """点列を入力順に結ぶ線分列を返す。

    - 空: `NoPointsError`
    - 1 点: `SinglePointError`（その点を保持）
    - 2 点: 1 本のみ（閉じる線分は作らない）
    - 3 点以上: `points[i] -> points[(i + 1) % n]` の閉路
    """
    pts = list(points)
    if not pts:
        raise NoPointsError()
    if len(pts) == 1:
        raise SinglePointError(pts[0])
    if len(pts) == 2:
        return [Line.from_points(pts[0], pts[1])]

    # 先頭を末尾へ回した列と zip して（点, 次の点）の組を作る
    shifted = pts[1:] + pts[:1]
    return [Line.from_points(a, b) for a, b in zip(pts, shifted)]


__all__ = ["Line", "connect_consecutively"]
