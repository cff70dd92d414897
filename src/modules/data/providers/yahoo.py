"""Yahoo Finance Market Data Provider.

Loads daily price history for the Indicator Engine using the
yfinance library (unofficial scraper).
"""

from datetime import date

import pandas as pd
import yfinance as yf

from src.modules.analysis.series import PRICE_COLUMNS, to_epoch_millis
from src.modules.data.protocols import ProviderError
from src.shared.logger import get_logger

logger = get_logger(__name__)


class YahooProvider:
    """Yahoo Finance market data provider.

    Uses yfinance library which scrapes Yahoo Finance.
    Be aware: may be rate-limited or blocked with heavy usage.
    """

    @property
    def name(self) -> str:
        """Provider name."""
        return "Yahoo"

    def get_price_series(
        self,
        ticker: str,
        start_date: date,
        end_date: date,
    ) -> pd.DataFrame:
        """Fetch daily OHLCV bars from Yahoo Finance.

        Args:
            ticker: Stock symbol (e.g., 'AAPL').
            start_date: Start date (inclusive).
            end_date: End date (inclusive).

        Returns:
            Timestamp-indexed PriceSeries DataFrame.

        Raises:
            ProviderError: If Yahoo Finance fails or returns no bars.
        """
        logger.info(
            "Fetching price history from Yahoo Finance",
            extra={"ticker": ticker, "start": str(start_date), "end": str(end_date)},
        )

        try:
            # yfinance end_date is exclusive, so add 1 day
            end_date_exclusive = pd.Timestamp(end_date) + pd.Timedelta(days=1)

            stock = yf.Ticker(ticker)
            df = stock.history(
                start=start_date.isoformat(),
                end=end_date_exclusive.strftime("%Y-%m-%d"),
                interval="1d",
            )

            if df.empty:
                raise ProviderError(self.name, ticker, "No data returned")

            return self._normalize(df, ticker)

        except Exception as e:
            if isinstance(e, ProviderError):
                raise
            raise ProviderError(self.name, ticker, str(e)) from e

    def _normalize(self, df: pd.DataFrame, ticker: str) -> pd.DataFrame:
        """Normalize yfinance response to the PriceSeries schema.

        Args:
            df: Raw yfinance DataFrame.
            ticker: Ticker being normalized, for logging.

        Returns:
            DataFrame indexed by epoch-millisecond timestamp, ascending.

        Raises:
            ProviderError: If price columns are missing.
        """
        df = df.rename(
            columns={
                "Open": "open",
                "High": "high",
                "Low": "low",
                "Close": "close",
                "Volume": "volume",
            }
        )

        missing = set(PRICE_COLUMNS) - set(df.columns)
        if missing:
            raise ProviderError(self.name, ticker, f"Missing columns: {sorted(missing)}")

        df = df[PRICE_COLUMNS].astype(float)
        df.index = to_epoch_millis(pd.DatetimeIndex(df.index))

        incomplete = df.isna().any(axis=1)
        if incomplete.any():
            logger.warning(
                f"Dropping {int(incomplete.sum())} incomplete bars",
                extra={"ticker": ticker},
            )
            df = df[~incomplete]

        return df.sort_index()
