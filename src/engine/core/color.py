"""
どこで: `engine.core.color`
何を: 正規化 RGBA の色値 `Color`、レイヤー間の色補間 `mix`、乱数色 `random_color`。
なぜ: レイヤー番号だけで決まる塗り色を内側色→外側色の範囲から求めるため。

補間規則:
- `inner == outer` なら `inner` をそのまま返す（丸め誤差を入れない）。
- それ以外は成分ごとに `min + factor * (max - min)`。どちらが大きいかに依らず、
  小さい方から大きい方へ向かう補間になる（inner→outer の符号付き lerp ではない）。
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass

import numpy as np

from common import settings as _settings
from common.types import RGBA
from util.color import normalize_color


@dataclass(frozen=True)
class Color:
    """RGBA（各成分 0–1）の色。"""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_hsba(cls, hue: float, saturation: float, brightness: float, alpha: float) -> "Color":
        r, g, b = colorsys.hsv_to_rgb(hue, saturation, brightness)
        return cls(r, g, b, alpha)

    @classmethod
    def from_value(cls, value: object) -> "Color":
        """Hex 文字列や (r,g,b[,a]) タプル（0–1 / 0–255）から生成する。"""
        if isinstance(value, Color):
            return value
        r, g, b, a = normalize_color(value)
        return cls(r, g, b, a)

    @property
    def components(self) -> RGBA:
        return (self.r, self.g, self.b, self.a)


CLEAR = Color(0.0, 0.0, 0.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)


def layer_factor(layer: int, layer_count: int) -> float:
    """レイヤー `layer` の補間係数（`layer / (layer_count - 1)`、1 レイヤーなら 0）。"""
    if layer_count <= 1:
        return 0.0
    return layer / (layer_count - 1)


def mix(inner: Color, outer: Color, factor: float) -> Color:
    """2 色を成分ごとに補間する（モジュール docstring の規則を参照）。"""
    if inner == outer:
        return inner
    mixed = []
    for i, o in zip(inner.components, outer.components):
        lo, hi = (i, o) if i < o else (o, i)
        mixed.append(lo + factor * (hi - lo))
    return Color(*mixed)


def random_color(rng: np.random.Generator | None = None, *, buckets: int | None = None) -> Color:
    """HSBA の各成分を `[0, 1)` の `buckets` 段階から一様に選んだ色を返す。

    `rng` 未指定時は `np.random` のグローバル状態を使う（テストのシード固定が効く）。
    """
    n = int(buckets) if buckets is not None else _settings.get().RANDOM_COLOR_BUCKETS
    if rng is None:
        steps = np.random.randint(0, n, size=4)
    else:
        steps = rng.integers(0, n, size=4)
    hue, saturation, brightness, alpha = (float(k) / n for k in steps)
    return Color.from_hsba(hue, saturation, brightness, alpha)


__all__ = ["Color", "CLEAR", "BLACK", "layer_factor", "mix", "random_color"]
