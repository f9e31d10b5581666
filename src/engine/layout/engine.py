"""
どこで: `engine.layout.engine`
何を: レイヤーごとに構造多角形を作り、その辺を等分した点列を多角形の中心として並べ、
      画面外の多角形を省いたうえで描画指示（パス・塗り色・線色）を組み立てる。
なぜ: 描画協調側が「返された指示を順に実行するだけ」で同心レイヤー状の多角形模様を描けるようにするため。

処理の流れ（1 回の `compute_layout` 呼び出し）:
1. レイヤー順序: `REVERSE_DRAWING_ORDER` なら 0 → n-1、そうでなければ n-1 → 0（外側から描く）。
2. 多角形の頂点距離 `d = 短辺 * scale / layer_count / 2`。
3. レイヤー L の構造多角形は頂点距離 `L * d`。L=0 では距離 0 となり、
   これは「描画領域の中心に 1 個だけ置く」退化ケースとして扱う。
4. L>0 では構造の頂点を閉路で結び、各辺を L 等分した内分点を
   「頂点 → その頂点から出る辺の内分点」の順に差し込む（計 `辺数 * L` 点）。
5. 各中心の外接正方形（一辺 2d）が描画領域と重ならなければ省く。
6. 非反転順で可視多角形が 0 個のレイヤーが出たら、以降（より内側）のレイヤーも
   何も描かないとみなしてループを打ち切る（単調に縮むことを仮定した近似。
   `GV_EARLY_TERMINATION=0` で無効化できる）。

エラー方針:
- 設定値の検証は呼び出し側（`api.config.LayoutConfig`）の責務。
- 退化ケース以外で幾何構築エラーが起きた場合は契約違反として `LayoutInvariantError` を送出する。
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from common import settings as _settings
from engine.core.color import Color, layer_factor, mix, random_color
from engine.core.errors import GeometryError, InvalidCornerDistanceError, LayoutInvariantError
from engine.core.line import connect_consecutively
from engine.core.path import CirclePath, Path, closed_path
from engine.core.vector import Point
from shapes.polygon import corner_points, regular_polygon_path

from .culling import visible_mask
from .options import ColorOptions, DrawingOptions
from .types import LayerPlan, LayoutParameters, LayoutResult, PolygonDirective, StructureDirective
from .viewport import Viewport

logger = logging.getLogger(__name__)


def _fatal(error: GeometryError, context: str) -> LayoutInvariantError:
    logger.error("layout invariant broken (%s): %s", context, error)
    return LayoutInvariantError(f"unexpected geometry error while {context}: {error}", error)


def layer_order(layer_count: int, drawing_options: DrawingOptions) -> range:
    """描画するレイヤーの順序を返す。"""
    if DrawingOptions.REVERSE_DRAWING_ORDER in drawing_options:
        return range(layer_count)
    return range(layer_count - 1, -1, -1)


def polygon_corner_distance(viewport: Viewport, scale: float, layer_count: int) -> float:
    return viewport.shorter_side * scale / layer_count / 2.0


def polygon_centers(structure_corners: Sequence[Point], layer: int) -> list[Point]:
    """構造多角形の頂点列から、レイヤー `layer` の多角形中心列を作る。

    各頂点の直後に、その頂点から次の頂点へ向かう辺の `layer - 1` 個の内分点を並べる。
    幾何構築エラーはそのまま伝搬する。
    """
    edges = connect_consecutively(structure_corners)
    centers: list[Point] = []
    for corner, edge in zip(structure_corners, edges):
        centers.append(corner)
        centers.extend(edge.segment(layer))
    return centers


def _structure_corners(
    edge_count: int, center: Point, distance: float, layer: int
) -> list[Point] | None:
    """構造多角形の頂点を返す。退化ケース（距離 0 の layer 0）では None。"""
    try:
        return corner_points(edge_count, center, distance)
    except InvalidCornerDistanceError as e:
        if e.distance == 0 and layer == 0:
            return None
        raise _fatal(e, f"building the structure of layer {layer}") from e
    except GeometryError as e:
        raise _fatal(e, f"building the structure of layer {layer}") from e


def _polygon_path(params: LayoutParameters, center: Point, radius: float) -> Path:
    if DrawingOptions.REPLACE_POLYGONS_WITH_CIRCLES in params.drawing_options:
        return CirclePath(center, radius)
    try:
        return regular_polygon_path(params.polygon_edge_count, center, radius)
    except GeometryError as e:
        raise _fatal(e, "building a polygon path") from e


def _layer_fill(params: LayoutParameters, layer: int) -> Color | None:
    """乱数色を使わない場合のレイヤー共通の塗り色（レイヤー単位で 1 回だけ計算）。"""
    opts = params.color_options
    if ColorOptions.COLOR_IN_POLYGONS not in opts or ColorOptions.USE_RANDOM_COLORS in opts:
        return None
    return mix(params.inner_color, params.outer_color, layer_factor(layer, params.layer_count))


def _stroke_for(params: LayoutParameters, fill: Color | None) -> Color | None:
    if DrawingOptions.DRAW_POLYGON_EDGES not in params.drawing_options:
        return None
    if ColorOptions.USE_POLYGON_COLOR_FOR_EDGES in params.color_options and fill is not None:
        return fill
    # 塗り色が無いときは既定色にフォールバック
    return params.default_stroke_color


def _layout_layer(
    params: LayoutParameters,
    viewport: Viewport,
    layer: int,
    distance: float,
    rng: np.random.Generator | None,
) -> LayerPlan:
    corners = _structure_corners(params.structure_edge_count, viewport.center, layer * distance, layer)
    if corners is None:
        centers = [viewport.center]
    else:
        try:
            centers = polygon_centers(corners, layer)
        except GeometryError as e:
            raise _fatal(e, f"subdividing the structure of layer {layer}") from e

    mask = visible_mask(centers, distance, viewport)
    opts = params.color_options
    use_random = ColorOptions.COLOR_IN_POLYGONS in opts and ColorOptions.USE_RANDOM_COLORS in opts
    shared_fill = _layer_fill(params, layer)

    polygons: list[PolygonDirective] = []
    for center, visible in zip(centers, mask):
        if not visible:
            continue
        fill = random_color(rng) if use_random else shared_fill
        polygons.append(
            PolygonDirective(
                layer=layer,
                center=center,
                radius=distance,
                path=_polygon_path(params, center, distance),
                fill=fill,
                stroke=_stroke_for(params, fill),
            )
        )

    structure = None
    if corners is not None and DrawingOptions.DRAW_STRUCTURE_EDGES in params.drawing_options:
        try:
            outline = closed_path(corners)
        except GeometryError as e:
            raise _fatal(e, f"outlining the structure of layer {layer}") from e
        structure = StructureDirective(layer, outline, params.default_stroke_color)

    return LayerPlan(layer, tuple(polygons), structure, candidates=len(centers))


def compute_layout(
    params: LayoutParameters,
    viewport: Viewport,
    *,
    rng: np.random.Generator | None = None,
    early_termination: bool | None = None,
) -> LayoutResult:
    """全レイヤーの描画指示を計算する（副作用なし）。

    Parameters
    ----------
    params : LayoutParameters
        検証済みの設定（`api.config.LayoutConfig` など）。
    viewport : Viewport
        中心位置・多角形サイズ・可視判定の基準となる描画領域。
    rng : numpy.random.Generator, optional
        乱数色に使う生成器。未指定なら `np.random` のグローバル状態。
    early_termination : bool, optional
        可視多角形の無いレイヤーで打ち切るか。未指定なら `GV_EARLY_TERMINATION`。

    Returns
    -------
    LayoutResult
        描画順に並んだ `LayerPlan` の列。
    """
    if early_termination is None:
        early_termination = _settings.get().EARLY_TERMINATION
    reverse = DrawingOptions.REVERSE_DRAWING_ORDER in params.drawing_options
    distance = polygon_corner_distance(viewport, params.scale, params.layer_count)
    order = layer_order(params.layer_count, params.drawing_options)

    plans: list[LayerPlan] = []
    for position, layer in enumerate(order):
        plan = _layout_layer(params, viewport, layer, distance, rng)
        plans.append(plan)
        logger.debug(
            "layer %d: %d/%d polygons visible", layer, len(plan.polygons), plan.candidates
        )
        # TODO: 内側レイヤーの外接円と viewport の交差を直接判定し、単調縮小の仮定をやめる
        if early_termination and not reverse and not plan.visible:
            skipped = tuple(order[position + 1 :])
            if skipped:
                logger.info(
                    "layer %d has no visible polygons; skipping inner layers %s", layer, list(skipped)
                )
            return LayoutResult(tuple(plans), terminated_early=bool(skipped), skipped_layers=skipped)

    return LayoutResult(tuple(plans))


__all__ = [
    "compute_layout",
    "layer_order",
    "polygon_centers",
    "polygon_corner_distance",
]
