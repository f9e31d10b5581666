"""
どこで: `api.config`
何を: レイアウト設定 `LayoutConfig`（検証済みの不変値）と、辞書/YAML からの構築。
なぜ: レイアウトエンジンは検証済みの入力を前提とするため、不正な辺数・レイヤー数・倍率を
      設定の時点で `ConfigurationError` として弾く所有者が必要。

YAML 例（`configs/default.yaml` の `layout` セクション）::

    layout:
      layer_count: 4
      scale: 1.0
      structure_edge_count: 6
      polygon_edge_count: 6
      drawing_options: [draw_polygon_edges, draw_structure_edges]
      color_options: [color_in_polygons]
      inner_color: "#FF000080"
      outer_color: [0, 0, 255]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Iterable, Mapping

from engine.core.color import BLACK, CLEAR, Color
from engine.layout.options import ColorOptions, DrawingOptions
from shapes.polygon import MIN_EDGE_COUNT
from util.utils import load_config

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """設定値の不正。問題のフィールド名と値を保持する。"""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"invalid {field}={value!r}: {reason}")
        self.field = field
        self.value = value


@dataclass(frozen=True)
class LayoutConfig:
    """レイアウトエンジンへの入力。生成時に検証される（不正な設定は存在しない）。"""

    layer_count: int = 1
    scale: float = 1.0
    structure_edge_count: int = MIN_EDGE_COUNT
    # 1 は円
    polygon_edge_count: int = 1
    drawing_options: DrawingOptions = DrawingOptions.DRAW_POLYGON_EDGES
    color_options: ColorOptions = ColorOptions.NONE
    inner_color: Color = CLEAR
    outer_color: Color = CLEAR
    default_stroke_color: Color = BLACK

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.layer_count < 1:
            raise ConfigurationError("layer_count", self.layer_count, "must be >= 1")
        if not self.scale > 0:
            raise ConfigurationError("scale", self.scale, "must be > 0")
        if self.structure_edge_count < MIN_EDGE_COUNT:
            raise ConfigurationError(
                "structure_edge_count", self.structure_edge_count, f"must be >= {MIN_EDGE_COUNT}"
            )
        if self.polygon_edge_count != 1 and self.polygon_edge_count < MIN_EDGE_COUNT:
            raise ConfigurationError(
                "polygon_edge_count",
                self.polygon_edge_count,
                f"must be 1 (circle) or >= {MIN_EDGE_COUNT}",
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, clamp: bool = False) -> "LayoutConfig":
        """辞書（YAML のセクション）から生成する。

        - オプションは snake_case 名のリスト、色は Hex/タプル/HSBA マッピングで指定する。
        - `clamp=True` の場合、整数値を受理範囲へ丸める（レイヤー数は 1 以上、
          構造の辺数は 3 以上、多角形の辺数は 1 または 3 以上）。

        例外:
            ConfigurationError: 未知のキー・型変換できない値・範囲外の値。
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(unknown[0], data[unknown[0]], "unknown layout setting")

        kwargs: dict[str, Any] = {}
        for name in ("layer_count", "structure_edge_count", "polygon_edge_count"):
            if name in data:
                kwargs[name] = _as_int(name, data[name])
        if "scale" in data:
            kwargs["scale"] = _as_float("scale", data["scale"])
        if "drawing_options" in data:
            kwargs["drawing_options"] = _as_flags(
                "drawing_options", DrawingOptions, data["drawing_options"]
            )
        if "color_options" in data:
            kwargs["color_options"] = _as_flags("color_options", ColorOptions, data["color_options"])
        for name in ("inner_color", "outer_color", "default_stroke_color"):
            if name in data:
                kwargs[name] = _as_color(name, data[name])

        if clamp:
            _clamp_counts(kwargs)
        return cls(**kwargs)


def _as_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(name, value, "expected an integer")
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ConfigurationError(name, value, "expected an integer") from e


def _as_float(name: str, value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ConfigurationError(name, value, "expected a number") from e


def _as_flags(name: str, flag_type: Any, value: object) -> Any:
    if isinstance(value, flag_type):
        return value
    if value is None:
        return flag_type(0)
    names: Iterable[str] = [value] if isinstance(value, str) else value  # type: ignore[assignment]
    try:
        return flag_type.from_names(names)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(name, value, str(e)) from e


def _as_color(name: str, value: object) -> Color:
    try:
        return Color.from_value(value)
    except ValueError as e:
        raise ConfigurationError(name, value, str(e)) from e


def _clamp_counts(kwargs: dict[str, Any]) -> None:
    if "layer_count" in kwargs:
        kwargs["layer_count"] = max(1, kwargs["layer_count"])
    if "structure_edge_count" in kwargs:
        kwargs["structure_edge_count"] = max(MIN_EDGE_COUNT, kwargs["structure_edge_count"])
    if "polygon_edge_count" in kwargs:
        n = kwargs["polygon_edge_count"]
        kwargs["polygon_edge_count"] = 1 if n <= 1 else max(MIN_EDGE_COUNT, n)


def load_layout_config(
    section: str = "layout", *, project_root: Path | None = None, clamp: bool = False
) -> LayoutConfig:
    """YAML 構成（`configs/default.yaml` + `config.yaml`）の `section` から設定を読む。

    セクションが無い場合は既定値の `LayoutConfig` を返す。
    """
    raw = load_config(project_root).get(section)
    if raw is None:
        logger.debug("no '%s' section in config; using defaults", section)
        return LayoutConfig()
    if not isinstance(raw, Mapping):
        raise ConfigurationError(section, raw, "expected a mapping")
    return LayoutConfig.from_mapping(raw, clamp=clamp)


__all__ = ["ConfigurationError", "LayoutConfig", "load_layout_config"]
