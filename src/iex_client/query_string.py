from typing import Any, List, Tuple
import requests


class QueryStringBuilder:
    """
    Accumulates query parameters in insertion order and renders them
    as a canonical `?k=v&k2=v2` string.

    Duplicate keys are kept in order, which is how array-style
    parameters are sent to the API.

    Examples
    --------
    >>> qsb = QueryStringBuilder().add("a", "1").add("b", "2")
    >>> qsb.build()
    '?a=1&b=2'
    """

    def __init__(self) -> None:
        self._pairs: List[Tuple[str, str]] = []

    def add(
        self,
        key: str,
        value: Any
    ) -> "QueryStringBuilder":
        """Append a key/value pair and return the builder."""
        self._pairs.append((str(key), str(value)))
        return self

    def items(self) -> List[Tuple[str, str]]:
        return list(self._pairs)

    def canonical(self) -> str:
        """
        Rendered pairs without the leading `?`.

        Keys and values are percent-encoded with no safe characters,
        so a comma-joined list such as `AAPL,MSFT` goes out as
        `AAPL%2CMSFT`.
        """
        return "&".join(
            f"{requests.utils.quote(k, safe='')}="
            f"{requests.utils.quote(v, safe='')}"
            for k, v in self._pairs
        )

    def build(self) -> str:
        """Return `""` when empty, else `?` followed by the pairs."""
        if not self._pairs:
            return ""
        return f"?{self.canonical()}"

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __repr__(self) -> str:
        return f"QueryStringBuilder({self._pairs!r})"
