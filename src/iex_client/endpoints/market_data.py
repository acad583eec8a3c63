from typing import List

from ..executor import Executor
from ..models import LastResponse, StatusResponse, TopsResponse


class MarketDataService(Executor):
    """
    Provides access to IEX market data endpoints: API status and the
    TOPS (top of book) feeds, which accept a list of symbols.
    """

    def get_status(self) -> StatusResponse:
        """Current IEX Cloud system status."""
        return self.no_param_execute(
            "status",
            self.auth_token,
            StatusResponse,
        )

    def get_tops(self, *, symbols: List[str]) -> List[TopsResponse]:
        """
        Retrieve aggregated best bid/offer and last sale for symbols.

        Parameters
        ----------
        symbols : list[str]
            Market symbols, sent as one comma-separated parameter.

        Returns
        -------
        list[TopsResponse]
            One entry per known symbol.
        """
        return self.symbols_execute(
            "tops",
            symbols,
            self.auth_token,
            List[TopsResponse],
        )

    def get_tops_last(self, *, symbols: List[str]) -> List[LastResponse]:
        """Last sale price, size and time for symbols."""
        return self.symbols_execute(
            "tops/last",
            symbols,
            self.auth_token,
            List[LastResponse],
        )
