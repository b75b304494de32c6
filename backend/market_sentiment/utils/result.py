# backend/market_sentiment/utils/result.py

"""
フォールバック付きの処理結果に「出どころ（provenance）」を付与するための型。

外部 API が使えない場合でもレスポンスの形は変わらないため、
呼び出し側・テストが実データとモックを区別できるようにする。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

MOCK_ORIGIN = "mock"


class Provenance(str, Enum):
    """値がどこから来たかを表す列挙型。"""

    LIVE = "live"
    MOCK = "mock"


@dataclass(frozen=True)
class Sourced(Generic[T]):
    """
    値と、その値の出どころをまとめたコンテナ。

    - origin: 値を生成した上流サービス名（tavily / anthropic / zhipu / mock）
    - reason: モックに切り替えた理由（LIVE の場合は None）
    """

    value: T
    provenance: Provenance
    origin: str
    reason: Optional[str] = None

    @classmethod
    def live(cls, value: T, origin: str) -> "Sourced[T]":
        return cls(value=value, provenance=Provenance.LIVE, origin=origin)

    @classmethod
    def mock(cls, value: T, reason: str) -> "Sourced[T]":
        return cls(
            value=value,
            provenance=Provenance.MOCK,
            origin=MOCK_ORIGIN,
            reason=reason,
        )

    @property
    def is_mock(self) -> bool:
        return self.provenance is Provenance.MOCK
