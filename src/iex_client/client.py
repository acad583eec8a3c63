from typing import Optional
import requests

from .config import ClientConfig
from .endpoints import (
    MarketDataService,
    StockFundamentalsService,
    StockProfilesService,
)


class IEXCloudClient:
    """
    Central entry point for all IEX Cloud API modules.
    Aggregates services such as StockProfilesService, MarketDataService, etc.
    """

    def __init__(
        self,
        *,
        config: ClientConfig,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.session = session or requests.Session()

        # Services share one session; auth headers are set per request
        opts = dict(
            session=self.session,
            base_url=config.base_url,
            secret_key=config.secret_key,
            public_key=config.public_key,
            sign=config.sign,
            timeout=config.timeout,
        )
        self.stock_profiles = StockProfilesService(**opts)
        self.stock_fundamentals = StockFundamentalsService(**opts)
        self.market_data = MarketDataService(**opts)

    @classmethod
    def from_env(cls) -> "IEXCloudClient":
        return cls(config=ClientConfig.from_env())

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "IEXCloudClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
