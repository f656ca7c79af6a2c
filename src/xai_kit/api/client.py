# src/xai_kit/api/client.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from time import monotonic
from typing import Any
from urllib.parse import quote

import httpx

from xai_kit.observability import names
from xai_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from .errors import ApiError, NetworkError, TimeoutError
from .params import (
    ChatCompletionParams,
    CodeEditParams,
    CompletionParams,
    EmbeddingParams,
    ImageEditParams,
    ImageGenerationParams,
    build_params,
    require,
)

logger = logging.getLogger(__name__)

ParamsArg = Mapping[str, Any] | None


class XAIClient:
    """Async client for the hosted model API.

    Stateless between calls. One request per call. No retries.

    Example:
        >>> async with XAIClient(api_key="xai-...") as client:
        ...     models = await client.list_models()
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if config is None:
            config = ClientConfig(api_key=api_key or "", base_url=base_url, timeout=timeout)
        self.config = config
        self.metrics_hook = metrics_hook
        self._http = http_client
        self._transport = transport
        self._owns_http = http_client is None
        logger.info(
            "Initialized XAIClient with base_url=%s, timeout=%s",
            config.base_url,
            config.timeout,
        )

    async def __aenter__(self) -> "XAIClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the connection pool if this client created it."""
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            # The cancellation timer in _send enforces the timeout; httpx's own
            # timeout is kept as a backstop for stalled sockets.
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                transport=self._transport,
            )
        return self._http

    # ------------------------------------------------------------------
    # Request execution
    # ------------------------------------------------------------------

    async def execute(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON response.

        Raises:
            ApiError: Non-success HTTP status, or a success body that is not JSON.
            TimeoutError: No response within ``config.timeout`` seconds.
            NetworkError: Any other request failure, such as a refused connection.
        """
        response = await self._send(path, method, body, headers)
        try:
            return response.json()
        except ValueError:
            raise ApiError(
                response.status_code,
                response.reason_phrase,
                "invalid JSON in response body",
            ) from None

    async def _send(
        self,
        path: str,
        method: str,
        body: Any,
        headers: Mapping[str, str] | None,
    ) -> httpx.Response:
        method = method.upper()
        url = f"{self.config.base_url}{path}"
        request_headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        if headers:
            request_headers.update(headers)

        logger.debug("Calling API: %s %s", method, path)
        start = monotonic()
        try:
            # wait_for owns the timer: it is cancelled on every exit path and,
            # when it fires, cancels the in-flight request.
            response = await asyncio.wait_for(
                self._client().request(
                    method,
                    url,
                    json=body if body is not None and method != "GET" else None,
                    headers=request_headers,
                ),
                timeout=self.config.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            self._record_failure(method, path, start, "timeout")
            raise TimeoutError(self.config.timeout) from None
        except httpx.RequestError as exc:
            self._record_failure(method, path, start, "network")
            raise NetworkError(f"{method} {path} failed: {exc}") from exc

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.API_REQUEST_DURATION, elapsed_ms, labels={"method": method}
        )

        if not response.is_success:
            self.metrics_hook.increment(
                names.API_ERRORS_TOTAL,
                labels={"method": method, "kind": "api"},
            )
            error_body = _decode_error_body(response)
            logger.warning(
                "API error: %s %s -> %d %s",
                method,
                path,
                response.status_code,
                response.reason_phrase,
            )
            raise ApiError(
                response.status_code,
                response.reason_phrase,
                _error_message(error_body),
                error_body,
            )

        self.metrics_hook.increment(
            names.API_REQUESTS_TOTAL,
            labels={"method": method, "status": str(response.status_code)},
        )
        logger.info(
            "API call: %s %s -> %d, latency=%.0fms",
            method,
            path,
            response.status_code,
            elapsed_ms,
        )
        return response

    def _record_failure(self, method: str, path: str, start: float, kind: str) -> None:
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.API_REQUEST_DURATION, elapsed_ms, labels={"method": method}
        )
        self.metrics_hook.increment(
            names.API_ERRORS_TOTAL, labels={"method": method, "kind": kind}
        )
        logger.warning("API %s: %s %s after %.0fms", kind, method, path, elapsed_ms)

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def create_chat_completion(
        self, params: ChatCompletionParams | ParamsArg = None, **fields: Any
    ) -> Any:
        """POST /chat/completions. Requires ``messages`` (non-empty) and ``model``."""
        request = build_params(ChatCompletionParams, params, fields)
        return await self.execute("/chat/completions", "POST", request.to_body())

    async def create_completion(
        self, params: CompletionParams | ParamsArg = None, **fields: Any
    ) -> Any:
        """POST /completions. Requires ``prompt`` and ``model``."""
        request = build_params(CompletionParams, params, fields)
        return await self.execute("/completions", "POST", request.to_body())

    async def create_embedding(
        self, params: EmbeddingParams | ParamsArg = None, **fields: Any
    ) -> Any:
        """POST /embeddings. Requires ``input`` and ``model``."""
        request = build_params(EmbeddingParams, params, fields)
        return await self.execute("/embeddings", "POST", request.to_body())

    async def create_image(
        self, params: ImageGenerationParams | ParamsArg = None, **fields: Any
    ) -> Any:
        """POST /images/generations. Requires ``prompt``."""
        request = build_params(ImageGenerationParams, params, fields)
        return await self.execute("/images/generations", "POST", request.to_body())

    async def edit_image(
        self, params: ImageEditParams | ParamsArg = None, **fields: Any
    ) -> Any:
        """POST /images/edits. Requires ``image`` and ``prompt``."""
        request = build_params(ImageEditParams, params, fields)
        return await self.execute("/images/edits", "POST", request.to_body())

    async def list_models(self) -> Any:
        return await self.execute("/models")

    async def get_model(self, model_id: str | None = None) -> Any:
        model_id = require("model_id", model_id)
        return await self.execute(f"/models/{_segment(model_id)}")

    async def get_api_key_info(self) -> Any:
        return await self.execute("/api-key")

    async def function_call(
        self,
        function_name: str | None = None,
        arguments: Mapping[str, Any] | None = None,
    ) -> Any:
        """POST /functions/{function_name} with ``arguments`` as the body.

        The request and response schema of this endpoint is provisional.
        """
        function_name = require("function_name", function_name)
        return await self.execute(
            f"/functions/{_segment(function_name)}", "POST", dict(arguments or {})
        )

    async def code_edit(
        self, params: CodeEditParams | ParamsArg = None, **fields: Any
    ) -> Any:
        """POST /code/edit. Requires ``code`` and ``instructions``. Provisional schema."""
        request = build_params(CodeEditParams, params, fields)
        return await self.execute("/code/edit", "POST", request.to_body())

    async def apply_edit(self, edit_id: str | None = None) -> Any:
        """POST /code/apply/{edit_id}. Provisional schema."""
        edit_id = require("edit_id", edit_id)
        return await self.execute(f"/code/apply/{_segment(edit_id)}", "POST")

    async def check_connection(self) -> bool:
        """Liveness probe: GET /health.

        Returns ``False`` instead of raising on any error. This is the only
        method that does so. Cancellation still propagates.
        """
        try:
            await self._send("/health", "GET", None, None)
        except Exception as exc:
            logger.info("Health check failed: %r", exc)
            self.metrics_hook.increment(
                names.API_HEALTH_CHECKS_TOTAL, labels={"healthy": "false"}
            )
            return False
        self.metrics_hook.increment(
            names.API_HEALTH_CHECKS_TOTAL, labels={"healthy": "true"}
        )
        return True


def _segment(value: str) -> str:
    return quote(value, safe="")


def _decode_error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_message(body: Mapping[str, Any]) -> str | None:
    message = body.get("message")
    if isinstance(message, str) and message:
        return message
    error = body.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, Mapping) and isinstance(error.get("message"), str):
        return error["message"]
    return None
