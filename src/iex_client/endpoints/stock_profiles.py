from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List
from rich.progress import Progress

from ..errors import IEXClientError, InvalidArgumentError
from ..executor import Executor
from ..logger import get_logger
from ..models import (
    CompanyResponse,
    InsiderRosterResponse,
    InsiderSummaryResponse,
    InsiderTransactionResponse,
    LogoResponse,
)


class StockProfilesService(Executor):
    """
    Provides access to IEX Cloud stock profile endpoints: company
    description, insiders, logo and peer groups.

    Every method takes a single symbol and decodes the response into
    the matching model from `iex_client.models`.
    """

    max_batch_symbols = 100

    def get_company(self, *, symbol: str) -> CompanyResponse:
        """
        Retrieve the company profile for a symbol.

        Parameters
        ----------
        symbol : str
            Market symbol, e.g. "AAPL".

        Returns
        -------
        CompanyResponse
            Company profile; fields missing from the payload are None.
        """
        return self.symbol_execute(
            "stock/[symbol]/company",
            symbol,
            self.auth_token,
            CompanyResponse,
        )

    def get_insider_roster(
        self,
        *,
        symbol: str
    ) -> List[InsiderRosterResponse]:
        """Top 10 insiders, with the most recent information."""
        return self.symbol_execute(
            "stock/[symbol]/insider-roster",
            symbol,
            self.auth_token,
            List[InsiderRosterResponse],
        )

    def get_insider_summary(
        self,
        *,
        symbol: str
    ) -> List[InsiderSummaryResponse]:
        """Insider transactions summarized over the last six months."""
        return self.symbol_execute(
            "stock/[symbol]/insider-summary",
            symbol,
            self.auth_token,
            List[InsiderSummaryResponse],
        )

    def get_insider_transactions(
        self,
        *,
        symbol: str
    ) -> List[InsiderTransactionResponse]:
        return self.symbol_execute(
            "stock/[symbol]/insider-transactions",
            symbol,
            self.auth_token,
            List[InsiderTransactionResponse],
        )

    def get_logo(self, *, symbol: str) -> LogoResponse:
        return self.symbol_execute(
            "stock/[symbol]/logo",
            symbol,
            self.auth_token,
            LogoResponse,
        )

    def get_peer_groups(self, *, symbol: str) -> List[str]:
        """Symbols of peer companies, as a plain list of strings."""
        return self.symbol_execute(
            "stock/[symbol]/peers",
            symbol,
            self.auth_token,
            List[str],
        )

    def get_companies(
        self,
        *,
        symbols: List[str],
        max_workers: int = 8,
    ) -> Dict[str, CompanyResponse]:
        """
        Retrieve company profiles for several symbols concurrently.

        Each symbol is an independent call on a worker thread. A
        failing symbol is logged and left out of the result instead of
        aborting the whole batch.

        Parameters
        ----------
        symbols : list[str]
            Market symbols.
        max_workers : int
            Number of worker threads.

        Returns
        -------
        dict
            Symbol to company profile, for the symbols that succeeded.

        Raises
        ------
        InvalidArgumentError
            If the list is empty or exceeds `max_batch_symbols`.
        """
        if not symbols:
            raise InvalidArgumentError("At least one symbol must be provided.")

        if len(symbols) > self.max_batch_symbols:
            raise InvalidArgumentError(
                f"Maximum {self.max_batch_symbols} symbols per batch."
            )

        log = get_logger("iex.batch")
        results: Dict[str, CompanyResponse] = {}

        with Progress() as progress:
            task = progress.add_task(
                "[cyan]Fetching company profiles...", total=len(symbols)
            )

            with ThreadPoolExecutor(max_workers=max_workers) as ex:
                futures = {
                    ex.submit(self.get_company, symbol=symbol): symbol
                    for symbol in symbols
                }

                for fut in as_completed(futures):
                    symbol = futures[fut]
                    progress.advance(task, 1)

                    try:
                        results[symbol] = fut.result()
                    except IEXClientError as e:
                        log.warning(f"Skipping {symbol}: {e}")

        return results
