from .stock_profiles import StockProfilesService
from .stock_fundamentals import StockFundamentalsService
from .market_data import MarketDataService

__all__ = [
    "StockProfilesService",
    "StockFundamentalsService",
    "MarketDataService",
]
