from iex_client import IEXCloudClient, ClientConfig

if __name__ == "__main__":
    config = ClientConfig(public_key="Tpk_xxx", use_sandbox=True)
    iex = IEXCloudClient(config=config)

    print(iex.market_data.get_status())

    # Symbols are sent as a single comma-separated parameter
    for quote in iex.market_data.get_tops(symbols=["SNAP", "FB"]):
        print(quote.symbol, quote.bid_price, quote.ask_price)

    earnings = iex.stock_fundamentals.get_earnings(symbol="AAPL", last=4)
    eps = iex.stock_fundamentals.get_earning_field(
        symbol="AAPL", field="actualEPS", last=1
    )
