"""
どこで: `engine.layout.options`
何を: 描画オプション `DrawingOptions` と色オプション `ColorOptions`（独立に組み合わせ可能なフラグ）。
なぜ: 真偽値の束を `|` で合成し、設定ファイルからは snake_case の名前列で指定できるようにするため。
"""

from __future__ import annotations

from enum import Flag, auto
from typing import Iterable, TypeVar

_F = TypeVar("_F", bound="_NamedFlag")


class _NamedFlag(Flag):
    @classmethod
    def from_names(cls: type[_F], names: Iterable[str]) -> _F:
        """`["draw_polygon_edges", ...]` のような名前列からフラグを合成する。

        例外:
            ValueError: 未知の名前を含む場合。
        """
        result = cls(0)
        for raw in names:
            key = str(raw).strip().replace("-", "_").upper()
            try:
                result |= cls[key]
            except KeyError:
                known = sorted(m.name.lower() for m in cls if m.value and m.name)
                raise ValueError(f"unknown {cls.__name__} flag: {raw!r} (known: {known})") from None
        return result

    def names(self) -> list[str]:
        return [m.name.lower() for m in type(self) if m.value and m.name and m in self]


class DrawingOptions(_NamedFlag):
    NONE = 0
    REVERSE_DRAWING_ORDER = auto()
    DRAW_POLYGON_EDGES = auto()
    DRAW_STRUCTURE_EDGES = auto()
    REPLACE_POLYGONS_WITH_CIRCLES = auto()


class ColorOptions(_NamedFlag):
    NONE = 0
    COLOR_IN_POLYGONS = auto()
    USE_RANDOM_COLORS = auto()
    USE_POLYGON_COLOR_FOR_EDGES = auto()


__all__ = ["DrawingOptions", "ColorOptions"]
