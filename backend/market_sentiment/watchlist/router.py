# backend/market_sentiment/watchlist/router.py

from fastapi import APIRouter, Depends, HTTPException, Request, status

from .client import WatchlistClientError, WatchlistNotConfiguredError
from .schemas import WatchlistAddRequest, WatchlistEntry
from .service import WatchlistService

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


def get_watchlist_service(request: Request) -> WatchlistService:
    return request.app.state.watchlist_service


@router.post(
    "",
    response_model=WatchlistEntry,
    status_code=status.HTTP_201_CREATED,
    summary="ウォッチリストに追加",
    description="ティッカーを大文字に正規化して Supabase の watchlist テーブルに 1 行追加する。",
)
def add_to_watchlist(
    request: WatchlistAddRequest,
    service: WatchlistService = Depends(get_watchlist_service),
) -> WatchlistEntry:
    """
    - Supabase 未設定: 503
    - 書き込み失敗: 502（詳細はログ側で確認）
    """
    if not request.symbol.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing symbol",
        )

    try:
        return service.add(request.symbol)
    except WatchlistNotConfiguredError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Watchlist storage is not configured.",
        ) from exc
    except WatchlistClientError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to add symbol to watchlist.",
        ) from exc
