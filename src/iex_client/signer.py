from datetime import datetime, timezone
from typing import Callable, NamedTuple, Optional
import hashlib
import hmac

from .errors import InvalidArgumentError


ALGORITHM = "HMAC-SHA256"
SIGNED_HEADERS = "host;x-iex-date"
CREDENTIAL_SERVICE = "iex_request"
EMPTY_PAYLOAD_HASH = hashlib.sha256(b"").hexdigest()


class SignedHeaders(NamedTuple):
    """Header values produced for one signed request."""

    iex_date: str
    authorization: str

    def as_dict(self) -> dict:
        return {
            "x-iex-date": self.iex_date,
            "Authorization": self.authorization,
        }


def _hmac_sha256(
    key: bytes,
    msg: str
) -> bytes:
    return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Signer:
    """
    Computes IEX Cloud signed-request headers.

    IEX Cloud verifies requests with an AWS SigV4-like scheme: a
    canonical request (method, path, query, signed headers and payload
    hash) is hashed into a string-to-sign, which is then signed with a
    key derived from the secret and the request date.

    Parameters
    ----------
    host : str
        Target host, e.g. `cloud.iexapis.com`. Part of the canonical
        headers.
    secret_key : str
        Secret API key used to derive the signing key.
    clock : callable, optional
        Returns the current UTC `datetime`. Injected by tests to get
        deterministic signatures.

    Raises
    ------
    InvalidArgumentError
        If host or secret key is empty.
    """

    def __init__(
        self,
        host: str,
        secret_key: str,
        clock: Optional[Callable[[], datetime]] = None
    ) -> None:
        if not host or not host.strip():
            raise InvalidArgumentError("host cannot be empty")
        if not secret_key or not secret_key.strip():
            raise InvalidArgumentError("secret_key cannot be empty")

        self.host = host
        self._secret_key = secret_key
        self._clock = clock or _utc_now

    def _signing_key(self, datestamp: str) -> bytes:
        k_date = _hmac_sha256(self._secret_key.encode("utf-8"), datestamp)
        return _hmac_sha256(k_date, CREDENTIAL_SERVICE)

    def canonical_request(
        self,
        method: str,
        path: str,
        query_string: str,
        iex_date: str
    ) -> str:
        """
        Build the canonical request for the given wire path and query.

        `path` must be the exact path sent on the wire (placeholders
        already resolved). A leading `?` on `query_string` is dropped.
        """
        canonical_uri = path if path.startswith("/") else f"/{path}"
        canonical_query = query_string[1:] if query_string.startswith("?") \
            else query_string
        canonical_headers = (
            f"host:{self.host}\n"
            f"x-iex-date:{iex_date}\n"
        )
        return "\n".join([
            method.upper(),
            canonical_uri,
            canonical_query,
            canonical_headers,
            SIGNED_HEADERS,
            EMPTY_PAYLOAD_HASH,
        ])

    def sign(
        self,
        public_key: str,
        method: str,
        path: str,
        query_string: str,
        now: Optional[datetime] = None
    ) -> SignedHeaders:
        """
        Sign a single request.

        Parameters
        ----------
        public_key : str
            Publishable key, sent as the credential.
        method : str
            HTTP method (always `GET` for this client).
        path : str
            Wire path with placeholders resolved.
        query_string : str
            Rendered query string, with or without the leading `?`.
        now : datetime, optional
            Timestamp to sign with. Defaults to the signer's clock.

        Returns
        -------
        SignedHeaders
            The `x-iex-date` and `Authorization` header values.
        """
        ts = (now or self._clock()).astimezone(timezone.utc)
        iex_date = ts.strftime("%Y%m%dT%H%M%SZ")
        datestamp = ts.strftime("%Y%m%d")

        canonical = self.canonical_request(method, path, query_string, iex_date)
        credential_scope = f"{datestamp}/{CREDENTIAL_SERVICE}"
        string_to_sign = "\n".join([
            ALGORITHM,
            iex_date,
            credential_scope,
            hashlib.sha256(canonical.encode("utf-8")).hexdigest(),
        ])

        signature = hmac.new(
            self._signing_key(datestamp),
            string_to_sign.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

        authorization = (
            f"{ALGORITHM} Credential={public_key}/{credential_scope}, "
            f"SignedHeaders={SIGNED_HEADERS}, Signature={signature}"
        )
        return SignedHeaders(iex_date, authorization)
