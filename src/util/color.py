"""
どこで: `util.color`。
何を: 設定ファイル/API から受け取る色指定（Hex, RGBA 0–1, RGBA 0–255, HSBA マッピング）を
      RGBA(0–1) へ正規化する。
なぜ: YAML の `inner_color` / `outer_color` / `default_stroke_color` を同一の受理仕様と
      エラーメッセージで解釈するため。
"""

from __future__ import annotations

import colorsys
from typing import Mapping, Sequence

_HSBA_KEYS = ("hue", "saturation", "brightness")


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> tuple[float, float, float, float]:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(t[i : i + 2], 16) for i in range(0, len(t), 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def _from_sequence(seq: Sequence[object]) -> tuple[float, float, float, float]:
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        values = [float(v) for v in seq]  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {seq!r}") from e
    if len(values) == 3:
        values.append(1.0 if all(0.0 <= v <= 1.0 for v in values) else 255.0)
    # 全成分が 0..1 ならそのまま、そうでなければ 0–255 とみなして丸め → 0–1 へ
    if all(0.0 <= v <= 1.0 for v in values):
        r, g, b, a = (_clamp01(v) for v in values)
        return (r, g, b, a)
    r, g, b, a = (max(0, min(255, int(round(v)))) / 255.0 for v in values)
    return (r, g, b, a)


def _from_hsba_mapping(m: Mapping[str, object]) -> tuple[float, float, float, float]:
    missing = [k for k in _HSBA_KEYS if k not in m]
    if missing:
        raise ValueError(f"HSBA color mapping is missing keys: {missing}")
    try:
        h, s, b = (_clamp01(float(m[k])) for k in _HSBA_KEYS)  # type: ignore[arg-type]
        a = _clamp01(float(m.get("alpha", 1.0)))  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid HSBA color mapping: {dict(m)!r}") from e
    r, g, bl = colorsys.hsv_to_rgb(h, s, b)
    return (r, g, bl, a)


def normalize_color(value: object) -> tuple[float, float, float, float]:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （0–1 または 0–255）,
      `{"hue", "saturation", "brightness"[, "alpha"]}` マッピング（各 0–1）
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if isinstance(value, Mapping):
        return _from_hsba_mapping(value)
    if isinstance(value, (list, tuple)):
        return _from_sequence(value)
    raise ValueError(f"unsupported color type: {type(value)!r}")


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


__all__ = [
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
]
