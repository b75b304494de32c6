# backend/market_sentiment/news/__init__.py

"""
ニュース取得用モジュール群。

主な責務:
- Tavily Search API からティッカーの最新ニュースを取得する
- 各ニュースのセンチメントをキーワードで判定する
- API が使えない場合はモックニュースに切り替える
"""
