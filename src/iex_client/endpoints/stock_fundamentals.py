from ..executor import Executor
from ..models import EarningResponse


class StockFundamentalsService(Executor):
    """
    Provides access to IEX Cloud fundamentals endpoints that take a
    recency window (`last`), such as earnings.
    """

    def get_earnings(
        self,
        *,
        symbol: str,
        last: int = 1
    ) -> EarningResponse:
        """
        Retrieve the last `last` quarters of earnings for a symbol.

        Parameters
        ----------
        symbol : str
            Market symbol.
        last : int
            Number of quarters (1 to 4).

        Returns
        -------
        EarningResponse
            Symbol plus one `Earning` per quarter, most recent first.
        """
        return self.symbol_last_execute(
            "stock/[symbol]/earnings/[last]",
            symbol,
            last,
            self.auth_token,
            EarningResponse,
        )

    def get_earning_field(
        self,
        *,
        symbol: str,
        field: str,
        last: int = 1
    ) -> str:
        """
        Retrieve a single earnings field (e.g. "actualEPS") as text.
        """
        return self.symbol_last_field_execute(
            "stock/[symbol]/earnings/[last]/[field]",
            symbol,
            field,
            last,
            self.auth_token,
        )
