from typing import Optional


class IEXClientError(Exception):
    """Base class for every error raised by the IEX Cloud client."""


class InvalidArgumentError(IEXClientError, ValueError):
    """
    Raised when a call is malformed (blank URL pattern, missing
    placeholder, empty path parameter). Always raised before any
    network activity.
    """


class TransportError(IEXClientError):
    """
    Raised on network failures, timeouts and non-2xx HTTP responses.

    Attributes
    ----------
    status_code : int or None
        HTTP status code, when a response was received.
    body : str or None
        Raw response body, when a response was received.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DeserializationError(IEXClientError):
    """
    Raised when a response body cannot be decoded into the requested
    result type.

    The raw body is kept on `body` and repeated in the message, since
    IEX error payloads have a different shape than the success ones
    and the caller usually wants to see them.
    """

    def __init__(
        self,
        body: str,
        *,
        reason: Optional[str] = None
    ) -> None:
        message = f"Unable to decode response body: {body!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.body = body
        self.reason = reason
