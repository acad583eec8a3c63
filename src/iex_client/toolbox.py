from typing import Iterable, List
from dateutil.parser import isoparse
import pandas as pd

from .models import IEXModel, InsiderTransactionResponse


def models_to_dataframe(
    models: Iterable[IEXModel]
) -> pd.DataFrame:
    """
    Convert decoded response models into a DataFrame, one row per
    model and one snake_case column per field.

    Unset fields become NaN/None. An empty input yields an empty
    DataFrame.
    """
    rows = [m.model_dump() for m in models]
    return pd.DataFrame(rows)


def insider_transactions_to_dataframe(
    transactions: List[InsiderTransactionResponse]
) -> pd.DataFrame:
    """
    Convert insider transactions into a cleaned DataFrame.

    The function:
    1. Loads the transactions into a DataFrame.
    2. Converts `effective_date` (epoch milliseconds) into a date string.
    3. Sorts rows chronologically by `filing_date`, rows without a
       filing date last.
    4. Enforces numeric dtypes on price, share and value columns.

    Parameters
    ----------
    transactions : list[InsiderTransactionResponse]
        Output of `StockProfilesService.get_insider_transactions`.

    Returns
    -------
    pandas.DataFrame
        Columns: ['filing_date', 'effective_date', 'full_name',
        'reported_title', 'transaction_code', 'tran_price',
        'tran_shares', 'tran_value'].

    Raises
    ------
    ValueError
        If a filing date cannot be parsed.
    """
    ordered_cols = [
        "filing_date", "effective_date", "full_name", "reported_title",
        "transaction_code", "tran_price", "tran_shares", "tran_value",
    ]

    df = models_to_dataframe(transactions)
    if df.empty:
        return pd.DataFrame(columns=ordered_cols)

    df["effective_date"] = (
        pd.to_datetime(df["effective_date"], unit="ms").dt.date.astype(str)
    )

    # Missing dates may be None or NaN depending on the pandas version
    df["_filed"] = pd.to_datetime(
        df["filing_date"].map(
            lambda d: isoparse(d) if pd.notna(d) and d else None
        )
    )
    df = df.sort_values("_filed", na_position="last", kind="stable")
    df = df[ordered_cols].reset_index(drop=True)

    df = df.astype({
        "tran_price": "float64",
        "tran_shares": "float64",
        "tran_value": "float64",
    })

    return df
