import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from . import codec
from .config import ConnectionContext
from .errors import OneFuseTransportError
from .observability import log_event
from .responses import classify_response, raise_for_classification

T = TypeVar("T", bound=BaseModel)

CLIENT_SOURCE = "onefuse-python"


def standard_headers(context: ConnectionContext) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "*/*",
        "Cache-Control": "no-cache",
        "Connection": "keep-alive",
        "Host": context.netloc,
        "SOURCE": CLIENT_SOURCE,
    }


class OneFuseClient:
    """
    Shared HTTP client for the OneFuse HAL+JSON API.
    - Handles auth, standard headers and TLS verification from the context
    - One execute() call is exactly one round trip; nothing is retried
    - Returns raw dict payloads or pydantic records; resource modules own
      domain decisions
    """

    def __init__(
        self,
        context: ConnectionContext,
        *,
        timeout_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
    ):
        self.context = context
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("onefuse_client.client")

        options: Dict[str, Any] = {}
        if timeout_seconds is not None:
            options["timeout"] = timeout_seconds

        self._owns_http = http is None
        self.http = http or httpx.Client(
            auth=httpx.BasicAuth(context.username, context.password),
            headers=standard_headers(context),
            verify=context.verify_ssl,
            **options,
        )

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "OneFuseClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def execute(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
        operation: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """
        Issue a single request and return the raw response.
        - Raises OneFuseTransportError on network/timeout errors
        - Does not look at the status code
        """
        method = method.upper()
        options: Dict[str, Any] = {}
        if timeout is not None:
            options["timeout"] = timeout

        start = time.perf_counter()
        try:
            resp = self.http.request(
                method, url, params=params, content=content, **options
            )
        except (httpx.TimeoutException, httpx.NetworkError) as exc:
            self._log_call(operation, method, url, start, exc=exc)
            raise OneFuseTransportError(
                f"Network/timeout error calling {method} {url}: {exc}",
                method=method,
                url=url,
                operation=operation,
            ) from exc
        except httpx.HTTPError as exc:
            self._log_call(operation, method, url, start, exc=exc)
            raise OneFuseTransportError(
                f"HTTPX error calling {method} {url}: {exc}",
                method=method,
                url=url,
                operation=operation,
            ) from exc

        self._log_call(operation, method, url, start, resp=resp)
        return resp

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
        operation: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Execute, classify and parse.
        - Raises OneFuseHTTPClientError / OneFuseHTTPServerError on >= 400
        - Raises OneFuseDecodeError if the body isn't a JSON object
        - Returns {} for an empty body
        """
        resp = self.execute(
            method,
            url,
            params=params,
            content=content,
            operation=operation,
            timeout=timeout,
        )
        classification = classify_response(resp)
        raise_for_classification(
            classification,
            method=resp.request.method,
            url=str(resp.request.url),
            operation=operation,
        )
        try:
            return codec.decode_json(resp, operation=operation)
        finally:
            resp.close()

    def request_model(
        self, model: Type[T], method: str, url: str, **kwargs: Any
    ) -> T:
        payload = self.request(method, url, **kwargs)
        return codec.decode_record(model, payload, operation=kwargs.get("operation"))

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        return self.request(
            "GET", url, params=params, operation=operation, timeout=timeout
        )

    def delete(
        self,
        url: str,
        *,
        operation: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Classify only; a successful DELETE body is never decoded."""
        resp = self.execute("DELETE", url, operation=operation, timeout=timeout)
        try:
            raise_for_classification(
                classify_response(resp),
                method=resp.request.method,
                url=str(resp.request.url),
                operation=operation,
            )
        finally:
            resp.close()

    def _log_call(
        self,
        operation: Optional[str],
        method: str,
        url: str,
        start: float,
        *,
        resp: Optional[httpx.Response] = None,
        exc: Optional[Exception] = None,
    ) -> None:
        duration_ms = int((time.perf_counter() - start) * 1000)
        if resp is not None:
            self.log.debug(
                "op.request",
                extra={
                    "operation": operation,
                    "method": method,
                    "url": str(resp.request.url),
                    "status": resp.status_code,
                    "duration_ms": duration_ms,
                },
            )
            log_event(
                "op_call",
                operation=operation,
                method=method,
                endpoint=resp.request.url.path,
                status=resp.status_code,
                duration_ms=duration_ms,
            )
            return

        log_event(
            "op_call",
            operation=operation,
            method=method,
            endpoint=httpx.URL(url).path,
            status="exception",
            error_type=type(exc).__name__ if exc else None,
            duration_ms=duration_ms,
        )


__all__ = ["OneFuseClient", "CLIENT_SOURCE", "standard_headers"]
