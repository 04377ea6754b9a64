"""onefuse_client package exports."""

from .core import (
    Capability,
    ConnectionContext,
    CustomName,
    DefaultWorkspaceNotFoundError,
    LinkResolutionError,
    MicrosoftADPolicy,
    MicrosoftADPolicyInput,
    MicrosoftEndpoint,
    OneFuseAPIClient,
    OneFuseClient,
    OneFuseClientError,
    OneFuseDecodeError,
    OneFuseHTTPClientError,
    OneFuseHTTPError,
    OneFuseHTTPServerError,
    OneFuseTransportError,
    OneFuseValidationError,
    ResolutionError,
    ResourceNotFoundError,
    UnsupportedOperationError,
    Workspace,
    create_client_from_env,
    parse_id_from_href,
)
from .core.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Client
    "OneFuseAPIClient",
    "OneFuseClient",
    "ConnectionContext",
    "create_client_from_env",
    "Capability",
    # Records
    "Workspace",
    "CustomName",
    "MicrosoftEndpoint",
    "MicrosoftADPolicy",
    "MicrosoftADPolicyInput",
    # Exceptions
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
    # HAL utilities
    "parse_id_from_href",
    # Logging
    "setup_logging",
]
