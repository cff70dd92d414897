"""Compute technical indicators for a ticker and print them as JSON.

Fetches daily bars from Yahoo Finance and runs the Indicator Engine
with the periods configured in the environment (SMA_PERIODS,
EMA_PERIOD, RSI_PERIOD).

Usage:
    python -m scripts.analyze_symbol AAPL
    python -m scripts.analyze_symbol MSFT --years 1 --history
    python -m scripts.analyze_symbol NVDA --summary
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date, timedelta

from src.modules.analysis.engine import IndicatorEngine
from src.modules.analysis.errors import InvalidSeriesError
from src.modules.data.protocols import MarketDataProvider, ProviderError
from src.modules.data.providers.yahoo import YahooProvider
from src.shared.config import load_config


def analyze_symbol(
    provider: MarketDataProvider,
    ticker: str,
    years: int,
    history: bool = False,
    summary: bool = False,
    today: date | None = None,
) -> str:
    """Fetch a ticker's history and render its indicators.

    Args:
        provider: Source of the price series.
        ticker: Stock symbol.
        years: Years of daily history to fetch.
        history: Include full indicator histories in the JSON output.
        summary: Render plain-text summary lines instead of JSON.
        today: End date of the fetch window (default: today).

    Returns:
        Rendered output.
    """
    config = load_config()
    end_date = today or date.today()
    start_date = end_date - timedelta(days=365 * years)

    prices = provider.get_price_series(ticker, start_date, end_date)
    bundle = IndicatorEngine().compute(prices, config.indicator_config())

    if summary:
        header = f"Technical indicators for {ticker} ({len(bundle.prices)} bars):"
        return "\n".join([header, *bundle.summary_lines()])
    return json.dumps({"ticker": ticker, **bundle.to_dict(include_history=history)}, indent=2)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    config = load_config()
    parser = argparse.ArgumentParser(description="Compute technical indicators for a ticker")
    parser.add_argument("ticker", help="Stock symbol, e.g. AAPL")
    parser.add_argument(
        "--years",
        type=int,
        default=config.history_years,
        help="Years of daily history to fetch (default: HISTORY_YEARS or 2)",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="Include each indicator's full value history",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print latest value and signal per indicator as text",
    )
    args = parser.parse_args(argv)

    try:
        output = analyze_symbol(
            YahooProvider(),
            args.ticker.upper(),
            args.years,
            history=args.history,
            summary=args.summary,
        )
    except (ProviderError, InvalidSeriesError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
