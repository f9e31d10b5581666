"""
どこで: `engine.core.errors`
何を: 幾何構築エラー（呼び出し側の入力不正）と、エンジン内部の不変条件違反を区別する例外型。
なぜ: 線分/多角形/パス層からは引数付きのエラーをそのまま伝搬させ、レイアウトエンジンだけが
      「想定内（layer 0 の退化ケース）」と「致命的（契約違反）」を判別できるようにするため。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover - 型のみ
    from .vector import Point


class GeometryError(ValueError):
    """幾何構築エラーの基底。各派生は問題の引数を属性として保持する。"""


class NoPointsError(GeometryError):
    """点列が空。"""

    def __init__(self) -> None:
        super().__init__("点列が空です")


class SinglePointError(GeometryError):
    """点が 1 つしかなく線分を作れない。"""

    def __init__(self, point: "Point") -> None:
        super().__init__(f"点が 1 つしかありません: {point!r}")
        self.point = point


class TooFewPointsError(GeometryError):
    """閉路には 3 点以上が必要。"""

    def __init__(self, points: Sequence["Point"]) -> None:
        super().__init__(f"閉路には 3 点以上が必要です: got {len(points)}")
        self.points = tuple(points)


class InvalidSegmentCountError(GeometryError):
    def __init__(self, count: int) -> None:
        super().__init__(f"分割数は 1 以上である必要があります: {count}")
        self.count = count


class InvalidEdgeCountError(GeometryError):
    def __init__(self, edge_count: int) -> None:
        super().__init__(f"正多角形の辺数は 3 以上である必要があります: {edge_count}")
        self.edge_count = edge_count


class InvalidCornerDistanceError(GeometryError):
    def __init__(self, distance: float) -> None:
        super().__init__(f"頂点距離は正である必要があります: {distance}")
        self.distance = distance


class LayoutInvariantError(RuntimeError):
    """レイアウトエンジン内部の契約違反（到達し得ないはずのエラー）。

    `ValueError` ではないため、呼び出し側は「入力不正」と「エンジン不具合」を区別できる。
    元の `GeometryError` は `original` と `__cause__` の両方から参照できる。
    """

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


__all__ = [
    "GeometryError",
    "NoPointsError",
    "SinglePointError",
    "TooFewPointsError",
    "InvalidSegmentCountError",
    "InvalidEdgeCountError",
    "InvalidCornerDistanceError",
    "LayoutInvariantError",
]
