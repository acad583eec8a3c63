from typing import List
from unittest.mock import MagicMock, patch

from iex_client.endpoints import (
    MarketDataService,
    StockFundamentalsService,
    StockProfilesService,
)
from iex_client.errors import InvalidArgumentError, TransportError
from iex_client.models import (
    CompanyResponse,
    EarningResponse,
    InsiderRosterResponse,
    InsiderSummaryResponse,
    InsiderTransactionResponse,
    LogoResponse,
    StatusResponse,
    TopsResponse,
)
import pytest


BASE_URL = "https://cloud.iexapis.com/stable/"


def make_response(text="{}", status_code=200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.text = text
    return resp


@pytest.fixture
def session():
    s = MagicMock()
    s.get.return_value = make_response()
    return s


@pytest.fixture
def opts(session):
    return dict(session=session, base_url=BASE_URL, public_key="pk_test")


@pytest.mark.parametrize("method,pattern,result_type", [
    ("get_company", "stock/[symbol]/company", CompanyResponse),
    ("get_insider_roster", "stock/[symbol]/insider-roster",
     List[InsiderRosterResponse]),
    ("get_insider_summary", "stock/[symbol]/insider-summary",
     List[InsiderSummaryResponse]),
    ("get_insider_transactions", "stock/[symbol]/insider-transactions",
     List[InsiderTransactionResponse]),
    ("get_logo", "stock/[symbol]/logo", LogoResponse),
    ("get_peer_groups", "stock/[symbol]/peers", List[str]),
])
@patch.object(StockProfilesService, "symbol_execute")
def test_stock_profiles_delegate(mock_exec, opts, method, pattern, result_type):
    """
    Ensure each profile endpoint passes its pattern, the symbol, the
    token and its result type to symbol_execute().
    """
    api = StockProfilesService(**opts)
    getattr(api, method)(symbol="AAPL")

    mock_exec.assert_called_once_with(pattern, "AAPL", "pk_test", result_type)


def test_get_company_decodes_payload(opts, session):
    session.get.return_value = make_response(
        '{"symbol": "AAPL", "companyName": "Apple Inc.",'
        ' "tags": ["Electronic Technology"], "phone": null}'
    )
    api = StockProfilesService(**opts)

    company = api.get_company(symbol="aapl")

    assert session.get.call_args.args[0] == (
        f"{BASE_URL}stock/aapl/company?token=pk_test"
    )
    assert company.company_name == "Apple Inc."
    assert company.tags == ["Electronic Technology"]
    assert company.phone is None


def test_get_peer_groups_decodes_strings(opts, session):
    session.get.return_value = make_response('["MSFT", "NOKIA"]')
    api = StockProfilesService(**opts)
    assert api.get_peer_groups(symbol="aapl") == ["MSFT", "NOKIA"]


def test_signed_service_sends_no_token(session):
    session.get.return_value = make_response('{"url": "https://x/aapl.png"}')
    api = StockProfilesService(
        session=session, base_url=BASE_URL,
        public_key="pk_test", secret_key="sk_test", sign=True,
    )

    logo = api.get_logo(symbol="aapl")

    assert session.get.call_args.args[0] == f"{BASE_URL}stock/aapl/logo"
    assert "Authorization" in session.get.call_args.kwargs["headers"]
    assert logo.url == "https://x/aapl.png"


@patch.object(StockProfilesService, "get_company")
def test_get_companies_skips_failures(mock_company, opts):
    """
    A failing symbol is left out; the others are returned.
    """
    def fake(symbol):
        if symbol == "BAD":
            raise TransportError("404", status_code=404, body="Unknown")
        return CompanyResponse(symbol=symbol)

    mock_company.side_effect = fake
    api = StockProfilesService(**opts)

    res = api.get_companies(symbols=["AAPL", "BAD", "MSFT"], max_workers=2)

    assert set(res) == {"AAPL", "MSFT"}
    assert res["MSFT"].symbol == "MSFT"
    assert mock_company.call_count == 3


def test_get_companies_empty_list(opts):
    api = StockProfilesService(**opts)
    with pytest.raises(InvalidArgumentError, match="At least one symbol"):
        api.get_companies(symbols=[])


def test_get_companies_too_many_symbols(opts):
    api = StockProfilesService(**opts)
    with pytest.raises(InvalidArgumentError, match="Maximum 100 symbols"):
        api.get_companies(symbols=["SYM"] * 101)


def test_get_earnings(opts, session):
    session.get.return_value = make_response(
        '{"symbol": "AAPL", "earnings": ['
        '{"actualEPS": 2.46, "consensusEPS": 2.36, "EPSReportDate":'
        ' "2019-01-29", "fiscalPeriod": "Q4 2018", "yearAgo": null}]}'
    )
    api = StockFundamentalsService(**opts)

    res = api.get_earnings(symbol="aapl", last=1)

    assert session.get.call_args.args[0] == (
        f"{BASE_URL}stock/aapl/earnings/1?token=pk_test"
    )
    assert isinstance(res, EarningResponse)
    assert res.earnings[0].actual_eps == 2.46
    assert res.earnings[0].eps_report_date == "2019-01-29"
    assert res.earnings[0].year_ago is None


def test_get_earning_field(opts, session):
    session.get.return_value = make_response("2.46")
    api = StockFundamentalsService(**opts)

    res = api.get_earning_field(symbol="aapl", field="actualEPS", last=2)

    assert res == "2.46"
    assert session.get.call_args.args[0] == (
        f"{BASE_URL}stock/aapl/earnings/2/actualEPS?token=pk_test"
    )


def test_get_status(opts, session):
    session.get.return_value = make_response(
        '{"status": "up", "version": "1.0", "time": 1555000000000,'
        ' "currentMonthAPICalls": 42}'
    )
    api = MarketDataService(**opts)

    status = api.get_status()

    assert session.get.call_args.args[0] == f"{BASE_URL}status?token=pk_test"
    assert isinstance(status, StatusResponse)
    assert status.status == "up"
    assert status.current_month_api_calls == 42


def test_get_tops(opts, session):
    session.get.return_value = make_response(
        '[{"symbol": "SNAP", "bidPrice": 9.5, "askSize": 100},'
        ' {"symbol": "FB", "lastSalePrice": 180.1}]'
    )
    api = MarketDataService(**opts)

    tops = api.get_tops(symbols=["SNAP", "FB"])

    assert session.get.call_args.args[0] == (
        f"{BASE_URL}tops?token=pk_test&symbols=SNAP%2CFB"
    )
    assert [t.symbol for t in tops] == ["SNAP", "FB"]
    assert isinstance(tops[0], TopsResponse)
    assert tops[0].bid_price == 9.5
    assert tops[1].bid_price is None


def test_get_tops_last(opts, session):
    session.get.return_value = make_response(
        '[{"symbol": "SNAP", "price": 9.51, "size": 10, "time": 1}]'
    )
    api = MarketDataService(**opts)

    last = api.get_tops_last(symbols=["SNAP"])

    assert session.get.call_args.args[0].endswith("tops/last?token=pk_test&symbols=SNAP")
    assert last[0].price == 9.51


def test_get_tops_accepts_single_symbol_string(opts, session):
    session.get.return_value = make_response('[{"symbol": "AAPL"}]')
    api = MarketDataService(**opts)

    tops = api.get_tops(symbols="AAPL")

    assert session.get.call_args.args[0] == (
        f"{BASE_URL}tops?token=pk_test&symbols=AAPL"
    )
    assert tops[0].symbol == "AAPL"
