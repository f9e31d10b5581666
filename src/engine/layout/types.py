"""
どこで: `engine.layout` 型定義。
何を: レイアウト結果として外部レンダラへ渡す描画指示（多角形・構造の輪郭）とレイヤー単位の計画。
なぜ: エンジンは描画の副作用を持たず、「どのパスを・どの色で塗り/線描するか」だけを返すため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Protocol, Union

from engine.core.color import Color
from engine.core.path import Path, PolygonPath
from engine.core.vector import Point

from .options import ColorOptions, DrawingOptions


class LayoutParameters(Protocol):
    """レイアウトエンジンが読む設定（検証済みであることを前提とする）。"""

    layer_count: int
    scale: float
    structure_edge_count: int
    polygon_edge_count: int
    drawing_options: DrawingOptions
    color_options: ColorOptions
    inner_color: Color
    outer_color: Color
    default_stroke_color: Color


@dataclass(frozen=True)
class PolygonDirective:
    """1 個の多角形（または円）の描画指示。`fill`/`stroke` が None なら塗らない/線を引かない。"""

    layer: int
    center: Point
    radius: float
    path: Path
    fill: Color | None
    stroke: Color | None


@dataclass(frozen=True)
class StructureDirective:
    """構造多角形の輪郭（細分化前の頂点で作る閉路）。"""

    layer: int
    path: PolygonPath
    stroke: Color


Directive = Union[PolygonDirective, StructureDirective]


@dataclass(frozen=True)
class LayerPlan:
    index: int
    polygons: tuple[PolygonDirective, ...]
    structure: StructureDirective | None = None
    # 可視判定前の中心点数
    candidates: int = 0

    @property
    def visible(self) -> bool:
        return bool(self.polygons)


@dataclass(frozen=True)
class LayoutResult:
    """描画順に並んだレイヤー計画。早期終了で評価しなかったレイヤーは `skipped_layers`。"""

    layers: tuple[LayerPlan, ...]
    terminated_early: bool = False
    skipped_layers: tuple[int, ...] = field(default_factory=tuple)

    @property
    def polygons(self) -> list[PolygonDirective]:
        return [p for plan in self.layers for p in plan.polygons]

    def directives(self) -> Iterator[Directive]:
        """描画順の指示列（各レイヤーの多角形 → そのレイヤーの構造輪郭）。"""
        for plan in self.layers:
            yield from plan.polygons
            if plan.structure is not None:
                yield plan.structure

    def layer(self, index: int) -> LayerPlan:
        for plan in self.layers:
            if plan.index == index:
                return plan
        raise KeyError(f"layer {index} was not laid out")


__all__ = [
    "LayoutParameters",
    "PolygonDirective",
    "StructureDirective",
    "Directive",
    "LayerPlan",
    "LayoutResult",
]
