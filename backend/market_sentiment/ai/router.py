# backend/market_sentiment/ai/router.py
"""
市場センチメント分析用の FastAPI ルーター定義。

- POST /api/chat
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from market_sentiment.pipeline import SentimentPipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])


def get_pipeline(request: Request) -> SentimentPipeline:
    """create_app() で構築したパイプラインを返す依存関数。"""
    return request.app.state.pipeline


@router.post(
    "/chat",
    summary="ティッカーの市場センチメント分析",
    description=(
        '{"symbol": "AAPL"} を受け取り、ニュース検索と LLM による分析結果を返す。'
        "外部サービスが使えない場合でも、モックデータで 200 を返す。"
    ),
    responses={400: {"description": "JSON 不正、または symbol 未指定"}},
)
async def analyze_symbol(
    request: Request,
    pipeline: SentimentPipeline = Depends(get_pipeline),
) -> Response:
    """
    ティッカーを受け取り、分析結果を返すエンドポイント。

    - ボディが JSON として読めない場合は 400 (Invalid JSON)
    - symbol が無い / 空 / 文字列でない場合は 400 (Missing symbol)
    - パイプライン内の予期しない例外はモックでの 200 応答に置き換える
    """
    try:
        payload = json.loads(await request.body())
    except ValueError:
        return PlainTextResponse("Invalid JSON", status_code=status.HTTP_400_BAD_REQUEST)

    symbol = payload.get("symbol") if isinstance(payload, dict) else None
    if not isinstance(symbol, str) or not symbol.strip():
        return PlainTextResponse("Missing symbol", status_code=status.HTTP_400_BAD_REQUEST)

    symbol = symbol.strip()

    try:
        outcome = await run_in_threadpool(pipeline.run, symbol)
    except Exception as exc:  # noqa: BLE001
        # 予期しない例外でもエラーにはせず、モックで応答する（詳細はログ側に残す）
        logger.exception("Analysis pipeline failed unexpectedly. symbol=%s", symbol)
        outcome = pipeline.fallback(symbol, reason=f"unexpected error: {exc}")

    return JSONResponse(outcome.response_body(), headers=outcome.source_headers())
