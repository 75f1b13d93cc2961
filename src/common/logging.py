"""
どこで: `common.logging`。
何を: スクリプト/デモ用に、ルートロガーへ最小構成を 1 度だけ適用するヘルパ。
なぜ: ライブラリ本体（生成器・レンダラ）はハンドラを持たず `getLogger(__name__)` だけを使い、
      出力先と閾値の決定を呼び出し側へ委ねるため。

レベルは `SFX_LOG_LEVEL`（`common.settings`）が既定。フレーム統計は DEBUG、
`SFX_DEBUG_FRAME_STATS=1` のときのみ INFO で出る。
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from common import settings

        level = settings.get().LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    # 未知の名前は "Level X" 文字列が返る
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_default_logging(level: int | str | None = None) -> None:
    """ルートロガーにハンドラが無い場合に限り `basicConfig` を適用する。"""
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "setup_default_logging"]
