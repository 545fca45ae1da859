# jumprunner/game/strings.py
from __future__ import annotations
from typing import Dict

STRINGS: Dict[str, Dict[str, str]] = {
    "ja": {
        "title": "ジャンプランナー",
        "score": "スコア: {score}",
        "powerup": "パワーアップ中！",
        "start": "スタート",
        "retry": "リトライ",
        "game_over": "ゲームオーバー",
        "retry_hint": "リトライボタンで再挑戦",
        "controls": "SPACE / Z / クリック: ジャンプ",
    },
    "en": {
        "title": "Jump Runner",
        "score": "Score: {score}",
        "powerup": "POWER UP!",
        "start": "Start",
        "retry": "Retry",
        "game_over": "GAME OVER",
        "retry_hint": "Press Retry to play again",
        "controls": "SPACE / Z / click: jump",
    },
}

DEFAULT_LANG = "ja"


def text(key: str, lang: str = DEFAULT_LANG, **fmt) -> str:
    """Look up a UI label; raises ValueError for an unknown language."""
    if lang not in STRINGS:
        raise ValueError(f"Unknown language {lang!r} (expected one of {sorted(STRINGS)})")
    return STRINGS[lang][key].format(**fmt)
