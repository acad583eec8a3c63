from dataclasses import dataclass
from typing import Optional
import os


_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for the IEX Cloud client.

    Attributes
    ----------
    public_key : str
        Publishable API key. Used as the `token` query parameter, or
        as the credential of signed requests.
    secret_key : str, optional
        Secret API key, required when `sign` is True.
    sign : bool
        Sign every request instead of sending the token in the query.
    use_sandbox : bool
        Target the sandbox environment (test data, free of charge).
    version : str
        API version segment, "stable" by default.
    timeout : float
        Per-request timeout in seconds.
    """

    public_key: str
    secret_key: Optional[str] = None
    sign: bool = False
    use_sandbox: bool = False
    version: str = "stable"
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if not self.public_key:
            raise ValueError("public_key is required")
        if self.sign and not self.secret_key:
            raise ValueError("secret_key is required when sign is enabled")

    @property
    def base_url(self) -> str:
        host = "sandbox.iexapis.com" if self.use_sandbox \
            else "cloud.iexapis.com"
        return f"https://{host}/{self.version.strip('/')}/"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build a config from environment variables.

        Reads IEX_PUBLIC_KEY, IEX_SECRET_KEY, IEX_SIGN, IEX_SANDBOX,
        IEX_VERSION and IEX_TIMEOUT.

        Raises
        ------
        ValueError
            If IEX_PUBLIC_KEY is missing, IEX_SIGN is set without
            IEX_SECRET_KEY, or IEX_TIMEOUT is not a number.
        """
        public_key = os.getenv("IEX_PUBLIC_KEY")
        if not public_key:
            raise ValueError("Missing environment variable: IEX_PUBLIC_KEY")

        timeout = os.getenv("IEX_TIMEOUT", "30")
        try:
            timeout_s = float(timeout)
        except ValueError:
            raise ValueError(f"Invalid IEX_TIMEOUT: {timeout}")

        return cls(
            public_key=public_key,
            secret_key=os.getenv("IEX_SECRET_KEY") or None,
            sign=_env_flag("IEX_SIGN"),
            use_sandbox=_env_flag("IEX_SANDBOX"),
            version=os.getenv("IEX_VERSION", "stable"),
            timeout=timeout_s,
        )
