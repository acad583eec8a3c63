from .client import IEXCloudClient
from .config import ClientConfig
from .errors import (
    IEXClientError,
    InvalidArgumentError,
    TransportError,
    DeserializationError,
)
from .executor import Executor, substitute_path
from .query_string import QueryStringBuilder
from .signer import Signer, SignedHeaders

__all__ = [
    "IEXCloudClient",
    "ClientConfig",
    "IEXClientError",
    "InvalidArgumentError",
    "TransportError",
    "DeserializationError",
    "Executor",
    "substitute_path",
    "QueryStringBuilder",
    "Signer",
    "SignedHeaders",
]
