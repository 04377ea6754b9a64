from __future__ import annotations

from typing import Optional


class OneFuseClientError(Exception):
    """Base error for client failures."""


class OneFuseTransportError(OneFuseClientError):
    """Raised when the request never produced an HTTP response."""

    def __init__(
        self,
        message: str,
        *,
        method: str,
        url: str,
        operation: Optional[str] = None,
    ):
        super().__init__(message)
        self.method = method
        self.url = url
        self.operation = operation


class OneFuseHTTPError(OneFuseClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        operation: Optional[str] = None,
        response_text: Optional[str] = None,
    ):
        prefix = f"{operation}: " if operation else ""
        super().__init__(
            f"{prefix}{status_code} {method} {url}: {response_text or 'request failed'}"
        )
        self.status_code = status_code
        self.method = method
        self.url = url
        self.operation = operation
        self.response_text = response_text


class OneFuseHTTPClientError(OneFuseHTTPError):
    """4xx response; the body carries the server's detail."""


class OneFuseHTTPServerError(OneFuseHTTPError):
    """5xx response; the body carries the server's detail."""


class OneFuseDecodeError(OneFuseClientError):
    pass


class OneFuseValidationError(OneFuseClientError, ValueError):
    def __init__(self, message: str, *, operation: str, fields: tuple[str, ...] = ()):
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.fields = fields


class LinkResolutionError(OneFuseClientError, ValueError):
    def __init__(self, message: str, *, href: Optional[str]):
        super().__init__(message)
        self.href = href


class ResolutionError(OneFuseClientError, ValueError):
    def __init__(self, message: str, *, query: str):
        super().__init__(message)
        self.query = query


class DefaultWorkspaceNotFoundError(ResolutionError):
    pass


class ResourceNotFoundError(ResolutionError):
    def __init__(self, message: str, *, query: str, resource_type: str):
        super().__init__(message, query=query)
        self.resource_type = resource_type


class UnsupportedOperationError(OneFuseClientError, NotImplementedError):
    def __init__(self, *, operation: str, resource_type: str):
        super().__init__(
            f"{operation}: not implemented for resource type '{resource_type}'"
        )
        self.operation = operation
        self.resource_type = resource_type


__all__ = [
    "OneFuseClientError",
    "OneFuseTransportError",
    "OneFuseHTTPError",
    "OneFuseHTTPClientError",
    "OneFuseHTTPServerError",
    "OneFuseDecodeError",
    "OneFuseValidationError",
    "LinkResolutionError",
    "ResolutionError",
    "DefaultWorkspaceNotFoundError",
    "ResourceNotFoundError",
    "UnsupportedOperationError",
]
