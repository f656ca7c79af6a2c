# src/xai_kit/api/factory.py

from xai_kit.observability.base import MetricsHook, NoOpMetricsHook

from .client import XAIClient
from .config import ClientConfig


def create_client(
    config: ClientConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> XAIClient:
    """Create an API client from config.

    Args:
        config: Client configuration. Read from the environment when omitted.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured XAIClient.

    Raises:
        ConfigurationError: If no API key is configured.

    Example:
        >>> client = create_client(ClientConfig(api_key="xai-..."))
        >>> models = await client.list_models()
    """
    if config is None:
        config = ClientConfig.from_env()
    return XAIClient(config=config, metrics_hook=metrics_hook)
