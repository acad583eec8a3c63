from iex_client import IEXCloudClient, ClientConfig
from iex_client.toolbox import insider_transactions_to_dataframe

if __name__ == "__main__":
    # Reads IEX_PUBLIC_KEY, IEX_SECRET_KEY, IEX_SIGN, IEX_SANDBOX...
    config = ClientConfig.from_env()

    # Facade Pattern, IEXCloudClient is an entry point.
    with IEXCloudClient(config=config) as iex:
        company = iex.stock_profiles.get_company(symbol="AAPL")
        print(company.company_name, company.ceo)

        # Several profiles at once, on a thread pool
        companies = iex.stock_profiles.get_companies(
            symbols=["AAPL", "MSFT", "IBM"],
            max_workers=3,
        )

        transactions = iex.stock_profiles.get_insider_transactions(
            symbol="AAPL"
        )
        df = insider_transactions_to_dataframe(transactions)
        print(df.head())
