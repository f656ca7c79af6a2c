# src/xai_kit/api/config.py

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.x.ai/v1"
DEFAULT_TIMEOUT = 30.0

ENV_API_KEY = "XAI_API_KEY"
ENV_BASE_URL = "XAI_BASE_URL"
ENV_TIMEOUT = "XAI_TIMEOUT"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the API client.

    Immutable. Explicit. Environment is only read by ``from_env``.

    Attributes:
        api_key: Bearer token sent on every request.
        base_url: Endpoint every request path is appended to.
        timeout: Per-request timeout in seconds.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigurationError("api_key is required")
        if not self.base_url:
            raise ConfigurationError("base_url must be non-empty")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ConfigurationError(
                f"timeout must be a number of seconds, got {self.timeout!r}"
            )
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be > 0")
        # frozen: bypass __setattr__ to normalise the URL once
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> "ClientConfig":
        """Build a config from ``XAI_API_KEY``, ``XAI_BASE_URL``, ``XAI_TIMEOUT``.

        Keyword overrides that are not ``None`` take precedence.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {"api_key": env.get(ENV_API_KEY, "")}
        if env.get(ENV_BASE_URL):
            values["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_TIMEOUT):
            try:
                values["timeout"] = float(env[ENV_TIMEOUT])
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_TIMEOUT} must be a number, got {env[ENV_TIMEOUT]!r}"
                ) from None
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]
