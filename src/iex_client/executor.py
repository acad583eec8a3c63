from functools import lru_cache
from typing import Any, Dict, Iterable, Mapping, Optional
from urllib.parse import urlparse

from pydantic import ConfigDict, TypeAdapter, ValidationError
import requests

from .errors import DeserializationError, InvalidArgumentError, TransportError
from .logger import get_logger
from .query_string import QueryStringBuilder
from .signer import Signer


LOG_BODY_LIMIT = 500


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    # Field endpoints return bare JSON scalars; numbers come back as text.
    if result_type is str:
        return TypeAdapter(str, config=ConfigDict(coerce_numbers_to_str=True))
    return TypeAdapter(result_type)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def substitute_path(
    url_pattern: str,
    path_params: Mapping[str, str]
) -> str:
    """
    Replace every `[key]` placeholder in `url_pattern` with its value.

    Validation happens before any replacement, so the returned pattern
    is only produced for a fully valid call. Neither argument is
    modified.

    Parameters
    ----------
    url_pattern : str
        Template such as `stock/[symbol]/company`.
    path_params : mapping
        Placeholder name to value.

    Returns
    -------
    str
        The substituted pattern.

    Raises
    ------
    InvalidArgumentError
        If the pattern is blank, `path_params` is None, a key or value
        is blank, or a key has no matching placeholder.
    """
    if _is_blank(url_pattern):
        raise InvalidArgumentError("url_pattern cannot be empty")
    if path_params is None:
        raise InvalidArgumentError("path_params cannot be None")

    for key, value in path_params.items():
        if _is_blank(key):
            raise InvalidArgumentError("path_params keys cannot be empty")
        if _is_blank(value):
            raise InvalidArgumentError(
                f"path_params value for '{key}' cannot be empty"
            )
        if f"[{key}]" not in url_pattern:
            raise InvalidArgumentError(
                f"url_pattern doesn't contain key [{key}]"
            )

    # Single pass: substituted values are never scanned for placeholders
    parts = []
    pos = 0
    while True:
        start = url_pattern.find("[", pos)
        end = url_pattern.find("]", start + 1) if start >= 0 else -1
        if start < 0 or end < 0:
            parts.append(url_pattern[pos:])
            break
        key = url_pattern[start + 1:end]
        if key in path_params:
            parts.append(url_pattern[pos:start])
            parts.append(str(path_params[key]))
            pos = end + 1
        else:
            parts.append(url_pattern[pos:start + 1])
            pos = start + 1
    return "".join(parts)


class Executor:
    """
    Single execution point for IEX Cloud calls.

    Turns a URL pattern, path parameters and a query builder into one
    GET request, signs it when signing is enabled, and decodes the
    JSON body into the requested result type. Endpoint services
    inherit from this class and only supply patterns and types.

    Signing headers are attached to each request individually; the
    shared `requests.Session` is never mutated, so one session can be
    used from several threads at once.

    Parameters
    ----------
    session : requests.Session
        Shared HTTP session.
    base_url : str
        API root including version, e.g.
        `https://cloud.iexapis.com/stable/`.
    secret_key : str, optional
        Secret key, required when `sign` is True.
    public_key : str, optional
        Publishable key. Sent as the signing credential, or as the
        `token` query parameter when signing is disabled.
    sign : bool
        Whether requests are signed. Fixed for the executor lifetime.
    timeout : float, optional
        Per-request timeout in seconds, forwarded to `requests`.
    """

    def __init__(
        self,
        *,
        session: requests.Session,
        base_url: str,
        secret_key: Optional[str] = None,
        public_key: Optional[str] = None,
        sign: bool = False,
        timeout: Optional[float] = None,
    ) -> None:
        if _is_blank(base_url):
            raise InvalidArgumentError("base_url cannot be empty")

        self.session = session
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.public_key = public_key
        self.timeout = timeout
        self._sign = sign
        self._signer: Optional[Signer] = None

        if sign:
            if _is_blank(public_key):
                raise InvalidArgumentError(
                    "public_key is required for signed requests"
                )
            self._signer = Signer(urlparse(self.base_url).hostname, secret_key)

        self.logger = get_logger("iex.executor")

    @property
    def signing_enabled(self) -> bool:
        return self._sign

    @property
    def auth_token(self) -> Optional[str]:
        """Token sent as query parameter; only used without signing."""
        return None if self._sign else self.public_key

    def _masked_query(self, query: QueryStringBuilder) -> str:
        masked = QueryStringBuilder()
        for k, v in query.items():
            masked.add(k, "***" if k == "token" else v)
        return masked.build()

    def _redact(self, text: str, query: QueryStringBuilder) -> str:
        """Strip token values, raw or percent-encoded, from `text`."""
        for k, v in query.items():
            if k == "token" and v:
                text = text.replace(requests.utils.quote(v, safe=""), "***")
                text = text.replace(v, "***")
        return text

    def execute(
        self,
        url_pattern: str,
        path_params: Mapping[str, str],
        query: QueryStringBuilder,
        result_type: Any = Any,
    ) -> Any:
        """
        Run one API call and decode its body.

        Parameters
        ----------
        url_pattern : str
            Path template relative to `base_url`.
        path_params : mapping
            Values for the `[key]` placeholders.
        query : QueryStringBuilder
            Query parameters, rendered verbatim on the wire.
        result_type : type, optional
            Anything pydantic can validate against (a model, a
            `List[Model]`, `str`...). Defaults to raw JSON.

        Returns
        -------
        Any
            A fresh instance of `result_type`.

        Raises
        ------
        InvalidArgumentError
            For malformed calls, before any I/O.
        TransportError
            On network errors, timeouts and non-2xx responses.
        DeserializationError
            If the body does not decode into `result_type`.
        """
        if query is None:
            raise InvalidArgumentError("query cannot be None")
        path = substitute_path(url_pattern, path_params)

        query_string = query.build()
        url = f"{self.base_url}{path.lstrip('/')}"

        # Sign what requests will actually send, after its own re-quoting
        prepared = requests.Request("GET", f"{url}{query_string}").prepare()
        wire_path, _, wire_query = prepared.path_url.partition("?")

        headers: Dict[str, str] = {}
        if self._sign:
            signed = self._signer.sign(
                self.public_key,
                "GET",
                wire_path,
                wire_query,
            )
            headers.update(signed.as_dict())

        self.logger.debug(f"GET {url}{self._masked_query(query)}")

        try:
            resp = self.session.get(
                prepared.url,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            reason = self._redact(str(e), query)
            self.logger.error(f"Request to {path} failed: {reason}")
            raise TransportError(f"Request to {path} failed: {reason}") from e

        content = resp.text
        if not resp.ok:
            self.logger.error(
                f"Request to {path} returned {resp.status_code}: "
                f"{content[:LOG_BODY_LIMIT]}"
            )
            raise TransportError(
                f"Request to {path} returned HTTP {resp.status_code}",
                status_code=resp.status_code,
                body=content,
            )

        try:
            return _adapter(result_type).validate_json(content)
        except ValidationError as e:
            self.logger.warning(f"Could not decode response from {path}")
            raise DeserializationError(
                content,
                reason=f"{e.error_count()} validation error(s)",
            ) from e

    def _token_query(self, token: Optional[str]) -> QueryStringBuilder:
        qsb = QueryStringBuilder()
        if token:
            qsb.add("token", token)
        return qsb

    def no_param_execute(
        self,
        url: str,
        token: Optional[str] = None,
        result_type: Any = Any,
    ) -> Any:
        """Call an endpoint with no path parameters."""
        return self.execute(url, {}, self._token_query(token), result_type)

    def symbol_execute(
        self,
        url_pattern: str,
        symbol: str,
        token: Optional[str] = None,
        result_type: Any = Any,
    ) -> Any:
        """Call an endpoint keyed by a `[symbol]` placeholder."""
        return self.execute(
            url_pattern,
            {"symbol": symbol},
            self._token_query(token),
            result_type,
        )

    def symbols_execute(
        self,
        url_pattern: str,
        symbols: Iterable[str],
        token: Optional[str] = None,
        result_type: Any = Any,
    ) -> Any:
        """
        Call an endpoint taking a `symbols` query parameter.

        Symbols go out as a single comma-joined parameter, never as
        repeated keys.

        Raises
        ------
        InvalidArgumentError
            If no symbols are given.
        """
        if isinstance(symbols, str):
            symbols = [symbols]
        symbols = [s.strip() for s in symbols if s and s.strip()]
        if not symbols:
            raise InvalidArgumentError("At least one symbol must be provided.")

        qsb = self._token_query(token)
        qsb.add("symbols", ",".join(symbols))
        return self.execute(url_pattern, {}, qsb, result_type)

    def symbol_last_execute(
        self,
        url_pattern: str,
        symbol: str,
        last: int,
        token: Optional[str] = None,
        result_type: Any = Any,
    ) -> Any:
        """Call an endpoint keyed by `[symbol]` and `[last]`."""
        return self.execute(
            url_pattern,
            {"symbol": symbol, "last": str(last)},
            self._token_query(token),
            result_type,
        )

    def symbol_last_field_execute(
        self,
        url_pattern: str,
        symbol: str,
        field: str,
        last: int,
        token: Optional[str] = None,
    ) -> str:
        """
        Call an endpoint keyed by `[symbol]`, `[last]` and `[field]`.

        These endpoints return a single JSON value, decoded as a string.
        """
        return self.execute(
            url_pattern,
            {"symbol": symbol, "last": str(last), "field": field},
            self._token_query(token),
            str,
        )
