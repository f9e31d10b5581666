"""
どこで: `common` パッケージ。
何を: engine/shapes/api から共有する軽量ユーティリティ（型エイリアス・環境設定・ロギング）。
なぜ: 依存の向きを単純化し、幾何コアが上位層を import しないようにするため。
"""

from .logging import setup_default_logging
from .types import RGBA, Vec2

__all__ = [
    "RGBA",
    "Vec2",
    "setup_default_logging",
]
