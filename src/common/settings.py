"""
どこで: `common.settings`
何を: プロジェクトの環境変数（`GV_*`）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # Layout
    EARLY_TERMINATION: bool = True

    # Color
    RANDOM_COLOR_BUCKETS: int = 256

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int` を使用。
    - バケット数は 1 未満を 1 に丸める。
    """
    _settings.EARLY_TERMINATION = env_bool("GV_EARLY_TERMINATION", True)
    _settings.RANDOM_COLOR_BUCKETS = env_int("GV_RANDOM_COLOR_BUCKETS", 256, min_value=1) or 256
    _settings.LOG_LEVEL = env_str("GV_LOG_LEVEL", "INFO")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
