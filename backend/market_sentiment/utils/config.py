# backend/market_sentiment/utils/config.py

"""
環境変数読み取り用のユーティリティ。
ニュース検索 / LLM / Supabase の各設定モジュールから共通利用する。
"""

import os
from typing import Optional


class EnvVarMissingError(RuntimeError):
    """必須環境変数が設定されていない場合に投げる例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> Optional[str]:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: デフォルト値（required=False の場合のみ使用）
    :param required: True の場合、未設定なら例外を投げる
    :return: 文字列値（空文字は未設定とみなす）
    """
    value = os.getenv(name)

    if value is None or value == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value


def get_first_env(*names: str) -> Optional[str]:
    """
    複数の候補名のうち、最初に設定されている環境変数の値を返す。
    """
    for name in names:
        value = get_env(name, required=False)
        if value is not None:
            return value
    return None


def get_env_float(name: str, default: float) -> float:
    """
    数値（秒数など）の環境変数を取得するヘルパー。

    不正な値が入っていた場合は RuntimeError にする。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    try:
        return float(raw)
    except ValueError as exc:  # noqa: TRY003
        raise RuntimeError(
            f"Invalid numeric value for env var {name}: {raw!r}"
        ) from exc


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_env_bool(name: str, default: bool) -> bool:
    """
    真偽値の環境変数を取得するヘルパー。

    true/false, 1/0, yes/no, on/off を受け付ける（大文字小文字は区別しない）。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    raise RuntimeError(f"Invalid boolean value for env var {name}: {raw!r}")
